"""
API dependencies for store and service access.
These functions are used with FastAPI's Depends() for dependency injection.

The objects themselves are built once in create_app() and kept on app.state.
"""
from fastapi import Depends, Request

from luna.services.chat_service import ChatService
from luna.services.completion_gateway import CompletionGateway
from luna.storage import ConversationStore, ResourceCatalog


def get_conversation_store(request: Request) -> ConversationStore:
    """Conversation store shared by all requests."""
    return request.app.state.conversation_store


def get_resource_catalog(request: Request) -> ResourceCatalog:
    """Seeded resource catalog."""
    return request.app.state.resource_catalog


def get_completion_gateway(request: Request) -> CompletionGateway:
    return request.app.state.completion_gateway


def get_chat_service(
    store: ConversationStore = Depends(get_conversation_store),
    gateway: CompletionGateway = Depends(get_completion_gateway)
) -> ChatService:
    """
    Dependency to get a chat orchestrator bound to the app's store and gateway.

    Returns:
        ChatService: Stateless orchestrator for one request
    """
    return ChatService(store=store, gateway=gateway)
