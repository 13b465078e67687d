"""
Chat endpoint for sending messages to the assistant.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from luna.api.deps import get_chat_service
from luna.schemas.chat import ChatRequest, ChatResponse
from luna.services.chat_service import ChatService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["Chat"])


@router.post("", response_model=ChatResponse)
async def send_message(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service)
):
    """
    Send a chat message and get the assistant's reply.

    An unknown conversationId starts a new conversation rather than failing.

    Args:
        request: Chat request with message, optional topic and conversation id
        chat_service: Chat orchestrator

    Returns:
        ChatResponse with reply, conversation id and suggested resources
    """
    try:
        return await chat_service.send_message(request)
    except Exception:
        logger.exception("Chat turn failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate response"
        )
