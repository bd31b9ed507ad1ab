"""
Services package for the FRA DSS Assistant
"""

from .catalog_service import CatalogService, CatalogLoadError, catalog_service
from .recommendation_service import get_village_recommendations
from .query_service import process_query
from .chat_service import ChatService, EmptyQueryError, VillageNotFoundError, chat_service

# Short names for the two decision functions
classify = process_query
recommend = get_village_recommendations

__all__ = [
    "CatalogService",
    "CatalogLoadError",
    "catalog_service",
    "ChatService",
    "EmptyQueryError",
    "VillageNotFoundError",
    "chat_service",
    "process_query",
    "get_village_recommendations",
    "classify",
    "recommend"
]
