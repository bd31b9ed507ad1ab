"""
Catalog service for loading and looking up schemes and villages
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from ..config import settings
from ..models.scheme import Scheme
from ..models.village import Village
from ..utils.validators import find_blank_keywords, find_duplicate_ids, find_unresolved_scheme_ids

logger = logging.getLogger(__name__)

_schemes_adapter = TypeAdapter(List[Scheme])
_villages_adapter = TypeAdapter(List[Village])


class CatalogLoadError(ValueError):
    """Raised when a catalog file is missing or malformed"""


class CatalogService:
    """Read-only access to the scheme and village catalogs"""

    def __init__(self):
        self._schemes: Tuple[Scheme, ...] = ()
        self._villages: Tuple[Village, ...] = ()
        self._schemes_by_id: Dict[str, Scheme] = {}
        self._villages_by_id: Dict[str, Village] = {}
        self.loaded = False

    @property
    def schemes(self) -> Tuple[Scheme, ...]:
        return self._schemes

    @property
    def villages(self) -> Tuple[Village, ...]:
        return self._villages

    def load(
        self,
        schemes_path: Optional[Union[str, Path]] = None,
        villages_path: Optional[Union[str, Path]] = None
    ):
        """
        Load both catalogs from JSON files

        Args:
            schemes_path: Path to the schemes file (defaults to settings)
            villages_path: Path to the villages file (defaults to settings)

        Raises:
            CatalogLoadError: If a file is missing, is not valid JSON or
                              holds invalid records
        """
        schemes_data = self._read_records(schemes_path or settings.schemes_file, "schemes")
        villages_data = self._read_records(villages_path or settings.villages_file, "villages")
        self.load_records(schemes_data, villages_data)

    def load_records(self, schemes_data: List[Dict[str, Any]], villages_data: List[Dict[str, Any]]):
        """Validate raw catalog records and replace the current catalogs"""
        try:
            schemes = _schemes_adapter.validate_python(schemes_data)
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid scheme records: {e}") from e

        try:
            villages = _villages_adapter.validate_python(villages_data)
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid village records: {e}") from e

        duplicates = find_duplicate_ids(schemes)
        if duplicates:
            raise CatalogLoadError(f"Duplicate scheme ids: {', '.join(duplicates)}")

        duplicates = find_duplicate_ids(villages)
        if duplicates:
            raise CatalogLoadError(f"Duplicate village ids: {', '.join(duplicates)}")

        blank = find_blank_keywords(schemes)
        if blank:
            raise CatalogLoadError(f"Schemes with empty keywords: {', '.join(blank)}")

        for village_id, missing in find_unresolved_scheme_ids(villages, schemes).items():
            logger.warning(f"Village {village_id} recommends unknown schemes: {', '.join(missing)}")

        self._schemes = tuple(schemes)
        self._villages = tuple(villages)
        self._schemes_by_id = {scheme.id: scheme for scheme in schemes}
        self._villages_by_id = {village.id: village for village in villages}
        self.loaded = True

        logger.info(f"Catalog loaded: {len(self._schemes)} schemes, {len(self._villages)} villages")

    def _read_records(self, path: Union[str, Path], key: str) -> List[Dict[str, Any]]:
        """Read a JSON file holding either a list of records or {key: [...]}"""
        path = Path(path)
        if not path.is_file():
            raise CatalogLoadError(f"Catalog file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Invalid JSON in {path}: {e}") from e
        except (UnicodeDecodeError, OSError) as e:
            raise CatalogLoadError(f"Cannot read catalog file {path}: {e}") from e

        if isinstance(data, list):
            return data
        if isinstance(data, dict) and isinstance(data.get(key), list):
            return data[key]

        raise CatalogLoadError(f"Invalid {key} file structure: {path}")

    def get_scheme(self, scheme_id: str) -> Optional[Scheme]:
        return self._schemes_by_id.get(scheme_id)

    def get_village(self, village_id: str) -> Optional[Village]:
        return self._villages_by_id.get(village_id)

    def list_schemes(self, category: Optional[str] = None) -> List[Scheme]:
        """All schemes in catalog order, optionally limited to one category"""
        if category is None:
            return list(self._schemes)
        return [scheme for scheme in self._schemes if scheme.category == category]

    def list_villages(self) -> List[Village]:
        return list(self._villages)

    def search_schemes(self, query: str, limit: int = 20) -> List[Scheme]:
        """
        Search schemes by name, full name or description

        Args:
            query: Search text, matched case-insensitively
            limit: Maximum number of results

        Returns:
            Matching schemes in catalog order
        """
        query_lower = query.lower()
        matching = [
            scheme for scheme in self._schemes
            if (query_lower in scheme.name.lower() or
                query_lower in scheme.full_name.lower() or
                query_lower in scheme.description.lower())
        ]
        return matching[:limit]

    def category_counts(self) -> List[Dict[str, Any]]:
        """Number of schemes per category, largest first"""
        counts: Dict[str, int] = {}
        for scheme in self._schemes:
            counts[scheme.category] = counts.get(scheme.category, 0) + 1

        category_list = [{"name": name, "count": count} for name, count in counts.items()]
        category_list.sort(key=lambda x: x["count"], reverse=True)
        return category_list


# Global catalog instance
catalog_service = CatalogService()
