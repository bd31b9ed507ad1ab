"""
Rule-based scheme recommendations for a village
"""
import logging
from typing import Callable, Iterable, List, Optional, Sequence, Set

from ..keyword_tables import (
    ADDITIONAL_RECOMMENDATION_LIMIT,
    AGRICULTURE_RULE_LIMIT,
    FARMING_OCCUPATIONS,
    FOREST_DEPENDENCY_THRESHOLD,
    LOW_LITERACY_THRESHOLD,
    LOW_WATER_THRESHOLD,
)
from ..models.scheme import Scheme
from ..models.village import Village

logger = logging.getLogger(__name__)


def _is_water_scheme(scheme: Scheme) -> bool:
    return "water" in scheme.keywords or "jal" in scheme.keywords


def _collect(
    schemes: Iterable[Scheme],
    predicate: Callable[[Scheme], bool],
    seen: Set[str],
    limit: Optional[int] = None
) -> List[Scheme]:
    """Pick schemes matching predicate that are not in seen, marking them as seen"""
    picked = []
    for scheme in schemes:
        if limit is not None and len(picked) >= limit:
            break
        if scheme.id in seen or not predicate(scheme):
            continue
        picked.append(scheme)
        seen.add(scheme.id)
    return picked


def get_village_recommendations(village: Village, schemes: Sequence[Scheme]) -> List[Scheme]:
    """
    Recommend schemes for a village

    The village's curated schemes come first, in catalog order. Schemes
    suggested by the village profile follow, capped at
    ADDITIONAL_RECOMMENDATION_LIMIT across all rules:

    - forest dependency of 70% or more adds forest schemes
    - literacy below 60% adds education schemes
    - piped water below 60% adds schemes tagged "water" or "jal"
    - farming villages get up to two agriculture schemes

    Args:
        village: Village profile
        schemes: Scheme catalog

    Returns:
        Ordered list of schemes without duplicates
    """
    curated = set(village.recommended_schemes)
    base = [scheme for scheme in schemes if scheme.id in curated]
    seen = {scheme.id for scheme in base}

    additional: List[Scheme] = []

    if village.forest_dependency >= FOREST_DEPENDENCY_THRESHOLD:
        additional.extend(_collect(schemes, lambda s: s.category == "forest", seen))

    if village.literacy_rate < LOW_LITERACY_THRESHOLD:
        additional.extend(_collect(schemes, lambda s: s.category == "education", seen))

    if village.infrastructure.water < LOW_WATER_THRESHOLD:
        additional.extend(_collect(schemes, _is_water_scheme, seen))

    if any(occupation in FARMING_OCCUPATIONS for occupation in village.main_occupation):
        additional.extend(
            _collect(schemes, lambda s: s.category == "agriculture", seen, limit=AGRICULTURE_RULE_LIMIT)
        )

    recommendations = base + additional[:ADDITIONAL_RECOMMENDATION_LIMIT]
    logger.debug(
        f"Recommendations for {village.id}: {len(base)} curated, "
        f"{len(additional)} profile-based candidates, {len(recommendations)} returned"
    )
    return recommendations
