"""
Conversation history endpoints: list, fetch, rename and delete.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from luna.api.deps import get_conversation_store
from luna.models import Conversation
from luna.schemas.chat import ConversationUpdate, SuccessResponse
from luna.storage import ConversationStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/conversations", tags=["Conversations"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Conversation not found"
    )


@router.get("", response_model=List[Conversation])
async def list_conversations(store: ConversationStore = Depends(get_conversation_store)):
    """
    Get all conversations, most recently updated first.
    """
    try:
        return await store.list()
    except Exception:
        logger.exception("Listing conversations failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch conversations"
        )


@router.delete("", response_model=SuccessResponse)
async def clear_conversations(store: ConversationStore = Depends(get_conversation_store)):
    """
    Delete every conversation.
    """
    try:
        await store.delete_all()
    except Exception:
        logger.exception("Clearing conversations failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to clear conversations"
        )
    return SuccessResponse()


@router.get("/{conversation_id}", response_model=Conversation)
async def get_conversation(
    conversation_id: str,
    store: ConversationStore = Depends(get_conversation_store)
):
    """
    Get a single conversation with its messages.

    Raises:
        HTTPException: 404 if the conversation does not exist
    """
    conversation = await store.get(conversation_id)
    if conversation is None:
        raise _not_found()
    return conversation


@router.patch("/{conversation_id}", response_model=Conversation)
async def update_conversation(
    conversation_id: str,
    updates: ConversationUpdate,
    store: ConversationStore = Depends(get_conversation_store)
):
    """
    Rename a conversation or change its topic.

    Raises:
        HTTPException: 404 if the conversation does not exist
    """
    conversation = await store.update(conversation_id, updates.model_dump(exclude_none=True))
    if conversation is None:
        raise _not_found()
    return conversation


@router.delete("/{conversation_id}", response_model=SuccessResponse)
async def delete_conversation(
    conversation_id: str,
    store: ConversationStore = Depends(get_conversation_store)
):
    """
    Delete a conversation.

    Raises:
        HTTPException: 404 if the conversation does not exist
    """
    if not await store.delete(conversation_id):
        raise _not_found()
    return SuccessResponse()
