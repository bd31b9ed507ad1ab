"""
API routes for the chat widget
"""
import logging

from fastapi import APIRouter, HTTPException

from ..models.chat import ChatMessage, ChatRequest, VillageSelectionResponse, WelcomeResponse
from ..services.chat_service import EmptyQueryError, VillageNotFoundError, chat_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/welcome", response_model=WelcomeResponse)
async def get_welcome():
    """
    Welcome message and starter prompts for a new conversation
    """
    return chat_service.welcome()


@router.post("/query", response_model=ChatMessage)
async def post_query(request: ChatRequest):
    """
    Answer a free-text question about schemes or villages
    """
    try:
        return chat_service.answer(request.query, request.selected_village_id)

    except EmptyQueryError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error answering query: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/villages/{village_id}", response_model=VillageSelectionResponse)
async def select_village(village_id: str):
    """
    Recommendations and profile summary for a selected village
    """
    try:
        return chat_service.select_village(village_id)

    except VillageNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error selecting village {village_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
