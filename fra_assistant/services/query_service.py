"""
Query classification for the chat assistant

Free-text queries are matched against the scheme and village catalogs
with plain substring checks on the lower-cased query. Rules are tried in
priority order and the first one that matches produces the response.
"""
import logging
from typing import Dict, List, Optional, Sequence

from ..keyword_tables import (
    CATEGORY_KEYWORDS,
    CATEGORY_MATCH_LIMIT,
    FOREST_QUERY_LIMIT,
    OCCUPATION_MATCH_LIMIT,
    OCCUPATION_SCHEMES,
    RECOMMENDATION_TRIGGERS,
    SCHEME_ALIASES,
    SELECTED_VILLAGE_LIMIT,
    TOP_SCHEME_IDS,
)
from ..models.chat import QueryIntent, QueryResponse, ResponseKind
from ..models.scheme import Scheme
from ..models.village import Village
from .recommendation_service import get_village_recommendations

logger = logging.getLogger(__name__)


def _index_by_id(schemes: Sequence[Scheme]) -> Dict[str, Scheme]:
    index = {}
    for scheme in schemes:
        index.setdefault(scheme.id, scheme)
    return index


def find_scheme_by_query(query: str, schemes: Sequence[Scheme]) -> Optional[Scheme]:
    """
    Find the scheme a lower-cased query refers to

    A query that is exactly a scheme id always selects that scheme. Then
    direct matches on name, id or keywords win, in catalog order. Otherwise
    the first alias phrase found in the query decides, and an alias pointing
    at a scheme missing from the catalog means no match.
    """
    index = _index_by_id(schemes)
    if query in index:
        return index[query]

    for scheme in schemes:
        if (scheme.name.lower() in query or
                scheme.id in query or
                any(keyword in query for keyword in scheme.keywords)):
            return scheme

    for phrase, scheme_id in SCHEME_ALIASES.items():
        if phrase in query:
            return index.get(scheme_id)

    return None


def find_village_by_query(query: str, villages: Sequence[Village]) -> Optional[Village]:
    for village in villages:
        if village.name.lower() in query or village.id in query:
            return village
    return None


def find_schemes_by_category(query: str, schemes: Sequence[Scheme]) -> List[Scheme]:
    """All catalog schemes in any category whose trigger words appear in the query"""
    matched_categories = [
        category for category, triggers in CATEGORY_KEYWORDS.items()
        if any(trigger in query for trigger in triggers)
    ]
    if not matched_categories:
        return []

    return [scheme for scheme in schemes if scheme.category in matched_categories]


def find_schemes_by_occupation(query: str, schemes: Sequence[Scheme]) -> List[Scheme]:
    """Schemes listed for the first occupation mentioned in the query, in table order"""
    index = _index_by_id(schemes)
    for occupation, scheme_ids in OCCUPATION_SCHEMES.items():
        if occupation in query:
            return [index[scheme_id] for scheme_id in scheme_ids if scheme_id in index]
    return []


def get_top_recommendations(schemes: Sequence[Scheme]) -> List[Scheme]:
    """Broadly applicable schemes, in fixed order; ids missing from the catalog are skipped"""
    index = _index_by_id(schemes)
    return [index[scheme_id] for scheme_id in TOP_SCHEME_IDS if scheme_id in index]


def handle_recommendation_query(
    query: str,
    schemes: Sequence[Scheme],
    villages: Sequence[Village],
    selected_village_id: Optional[str] = None
) -> QueryResponse:
    """Answer a query that asks for recommendations"""
    if selected_village_id:
        village = next((v for v in villages if v.id == selected_village_id), None)
        if village:
            recommendations = get_village_recommendations(village, schemes)
            return QueryResponse(
                kind=ResponseKind.SUGGESTION,
                intent=QueryIntent.RECOMMENDATION,
                text=f"💡 Based on {village.name}'s profile, here are the top recommendations:",
                schemes=recommendations[:SELECTED_VILLAGE_LIMIT]
            )
        logger.debug(f"Selected village not in catalog: {selected_village_id}")

    if "forest" in query:
        forest_schemes = [
            scheme for scheme in schemes
            if (scheme.category == "forest" or
                "tribal" in scheme.target_audience or
                "forest" in scheme.keywords)
        ]
        return QueryResponse(
            kind=ResponseKind.SUGGESTION,
            intent=QueryIntent.RECOMMENDATION,
            text="🌲 Top schemes for forest-dependent communities:",
            schemes=forest_schemes[:FOREST_QUERY_LIMIT]
        )

    return QueryResponse(
        kind=ResponseKind.SUGGESTION,
        intent=QueryIntent.RECOMMENDATION,
        text="💡 Here are the top recommended government schemes:",
        schemes=get_top_recommendations(schemes)
    )


def process_query(
    query: str,
    schemes: Sequence[Scheme],
    villages: Sequence[Village],
    selected_village_id: Optional[str] = None
) -> QueryResponse:
    """
    Classify a user query and build the response

    Args:
        query: Free-text user query
        schemes: Scheme catalog
        villages: Village catalog
        selected_village_id: Village currently selected in the widget, if any

    Returns:
        QueryResponse; a fallback response when nothing matches
    """
    lower_query = query.lower()
    response = _classify(lower_query, schemes, villages, selected_village_id)
    logger.debug(f"Query classified as {response.intent.value} with {len(response.schemes)} schemes")
    return response


def _classify(
    query: str,
    schemes: Sequence[Scheme],
    villages: Sequence[Village],
    selected_village_id: Optional[str]
) -> QueryResponse:
    scheme = find_scheme_by_query(query, schemes)
    if scheme:
        return QueryResponse(
            kind=ResponseKind.INFORMATIONAL,
            intent=QueryIntent.SCHEME,
            text=f"📋 Here's information about {scheme.name}:",
            schemes=[scheme]
        )

    village = find_village_by_query(query, villages)
    if village:
        return QueryResponse(
            kind=ResponseKind.SUGGESTION,
            intent=QueryIntent.VILLAGE,
            text=f"🌿 {village.name} information and recommended schemes:",
            schemes=get_village_recommendations(village, schemes)
        )

    if any(trigger in query for trigger in RECOMMENDATION_TRIGGERS):
        return handle_recommendation_query(query, schemes, villages, selected_village_id)

    category_schemes = find_schemes_by_category(query, schemes)
    if category_schemes:
        return QueryResponse(
            kind=ResponseKind.SUGGESTION,
            intent=QueryIntent.CATEGORY,
            text="💡 Here are schemes related to your query:",
            schemes=category_schemes[:CATEGORY_MATCH_LIMIT]
        )

    occupation_schemes = find_schemes_by_occupation(query, schemes)
    if occupation_schemes:
        return QueryResponse(
            kind=ResponseKind.SUGGESTION,
            intent=QueryIntent.OCCUPATION,
            text="💼 Based on your occupation, here are relevant schemes:",
            schemes=occupation_schemes[:OCCUPATION_MATCH_LIMIT]
        )

    return QueryResponse(
        kind=ResponseKind.INFORMATIONAL,
        intent=QueryIntent.FALLBACK,
        text=(
            "🤔 I'm not sure about that specific query. Here are some popular "
            "government schemes you might find helpful:"
        ),
        schemes=get_top_recommendations(schemes)
    )

