"""
Chat service producing widget messages from the catalogs
"""
import logging
from typing import List, Optional

from ..config import settings
from ..models.chat import (
    ChatMessage,
    QueryResponse,
    ResponseKind,
    VillageSelectionResponse,
    WelcomeResponse,
)
from .catalog_service import CatalogService, catalog_service
from .query_service import process_query
from .recommendation_service import get_village_recommendations

logger = logging.getLogger(__name__)

WELCOME_TEXT = (
    "🌿 Welcome to FRA DSS Assistant! I can help you learn about government schemes "
    "for rural and forest-dwelling communities. You can ask about specific schemes, "
    "villages, or get personalized recommendations."
)

DEFAULT_PROMPTS = (
    "Show me all schemes for my village",
    "I am a farmer, what schemes can I use?",
    "Tell me about health insurance schemes",
    "Which schemes are best for small businesses?",
    "What pension schemes are available?",
)


class EmptyQueryError(ValueError):
    """Raised when a blank query is submitted"""


class VillageNotFoundError(LookupError):
    """Raised when a village id is not in the catalog"""


def to_chat_message(response: QueryResponse) -> ChatMessage:
    message_type = "suggestion" if response.kind == ResponseKind.SUGGESTION else "bot"
    return ChatMessage(
        type=message_type,
        content=response.text,
        schemes=list(response.schemes),
        intent=response.intent
    )


class ChatService:
    """Turns user actions in the chat widget into bot messages"""

    def __init__(self, catalog: CatalogService = catalog_service, typing_delay_ms: Optional[int] = None):
        self.catalog = catalog
        self.typing_delay_ms = settings.typing_delay_ms if typing_delay_ms is None else typing_delay_ms

    def welcome(self) -> WelcomeResponse:
        return WelcomeResponse(
            message=ChatMessage(id="welcome", type="bot", content=WELCOME_TEXT),
            prompts=list(DEFAULT_PROMPTS),
            typing_delay_ms=self.typing_delay_ms
        )

    def answer(self, query: str, selected_village_id: Optional[str] = None) -> ChatMessage:
        """
        Answer a free-text query

        Args:
            query: User query
            selected_village_id: Village selected in the widget, if any

        Returns:
            Bot or suggestion message

        Raises:
            EmptyQueryError: If the query is blank
        """
        if not query or not query.strip():
            raise EmptyQueryError("Query must not be empty")

        response = process_query(
            query.strip(),
            self.catalog.schemes,
            self.catalog.villages,
            selected_village_id
        )
        logger.info(f"Answered query with intent {response.intent.value} ({len(response.schemes)} schemes)")
        return to_chat_message(response)

    def select_village(self, village_id: str) -> VillageSelectionResponse:
        """
        Build the messages shown when a village is picked

        Raises:
            VillageNotFoundError: If the village is not in the catalog
        """
        village = self.catalog.get_village(village_id)
        if village is None:
            raise VillageNotFoundError(f"Village not found: {village_id}")

        recommendations = get_village_recommendations(village, self.catalog.schemes)

        messages: List[ChatMessage] = [
            ChatMessage(
                type="suggestion",
                content=(
                    f"💡 Based on {village.name}'s profile ({village.tribal_population:g}% tribal "
                    f"population, {village.forest_dependency:g}% forest dependency), here are the "
                    f"recommended schemes:"
                ),
                schemes=recommendations
            ),
            ChatMessage(
                type="bot",
                content=(
                    f"🌿 {village.name} is located in {village.district}, {village.state} with "
                    f"{village.population} residents. Main occupations include "
                    f"{', '.join(village.main_occupation)}. The village faces challenges like "
                    f"{', '.join(village.challenges)}."
                )
            ),
        ]
        return VillageSelectionResponse(village_id=village.id, messages=messages)


# Global chat service instance
chat_service = ChatService()
