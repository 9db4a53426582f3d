# app/chat_history/routes.py
import logging
from typing import List

from fastapi import APIRouter, Depends, status

from app.medical_models.chat_history_model.chat_history_schemas import (
    ChatHistoryCreate,
    ChatHistoryResponse,
)
from app.shared.dependencies import get_repository
from app.shared.errors import APIError
from app.storage.base import MedicalRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat-history", tags=["Chat History"])


@router.post("", response_model=ChatHistoryResponse, status_code=status.HTTP_201_CREATED)
async def save_chat_history(
    chat_history: ChatHistoryCreate, repository: MedicalRepository = Depends(get_repository)
):
    try:
        saved = await repository.create_chat_history(chat_history)
    except Exception as e:
        logger.error(f"❌ Failed to save chat history: {e}", exc_info=True)
        raise APIError(500, "Failed to save chat history", error=str(e))

    logger.info(f"💾 Saved chat history {saved.id} ({len(saved.messages)} messages)")
    return saved


@router.get("/{user_id}", response_model=List[ChatHistoryResponse])
async def user_chat_history(user_id: int, repository: MedicalRepository = Depends(get_repository)):
    try:
        return await repository.get_chat_history_by_user_id(user_id)
    except Exception as e:
        logger.error(f"❌ Failed to fetch chat history for user {user_id}: {e}", exc_info=True)
        raise APIError(500, "Failed to fetch chat history", error=str(e))
