"""
Models package for the FRA DSS Assistant
"""

from .scheme import (
    Scheme,
    SchemeCategory,
    SCHEME_CATEGORIES
)

from .village import (
    Village,
    Infrastructure
)

from .chat import (
    ResponseKind,
    QueryIntent,
    QueryResponse,
    ChatMessage,
    ChatRequest,
    WelcomeResponse,
    VillageSelectionResponse
)

__all__ = [
    # Catalog models
    "Scheme",
    "SchemeCategory",
    "SCHEME_CATEGORIES",
    "Village",
    "Infrastructure",

    # Chat models
    "ResponseKind",
    "QueryIntent",
    "QueryResponse",
    "ChatMessage",
    "ChatRequest",
    "WelcomeResponse",
    "VillageSelectionResponse"
]
