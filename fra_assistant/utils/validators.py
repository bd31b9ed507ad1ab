"""
Consistency checks for loaded catalogs
"""
from collections import Counter
from typing import Dict, List, Sequence

from ..models.scheme import Scheme
from ..models.village import Village


def find_duplicate_ids(records: Sequence) -> List[str]:
    """
    Find ids used by more than one record

    Args:
        records: Schemes or villages

    Returns:
        Duplicated ids in first-seen order
    """
    counts = Counter(record.id for record in records)
    return [record_id for record_id, count in counts.items() if count > 1]


def find_blank_keywords(schemes: Sequence[Scheme]) -> List[str]:
    """
    Find schemes with an empty keyword

    An empty keyword is contained in every query, so such a scheme would
    answer everything.
    """
    return [scheme.id for scheme in schemes if any(not keyword for keyword in scheme.keywords)]


def find_unresolved_scheme_ids(
    villages: Sequence[Village],
    schemes: Sequence[Scheme]
) -> Dict[str, List[str]]:
    """
    Map village id to curated scheme ids that are missing from the catalog

    Args:
        villages: Village catalog
        schemes: Scheme catalog

    Returns:
        Only villages with at least one unresolved id are included
    """
    known = {scheme.id for scheme in schemes}
    unresolved = {}

    for village in villages:
        missing = [scheme_id for scheme_id in village.recommended_schemes if scheme_id not in known]
        if missing:
            unresolved[village.id] = missing

    return unresolved
