"""
Storage interfaces.

Services depend on these protocols rather than on a concrete backend, so a
durable store can replace the in-memory one without touching the chat flow.
"""
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from luna.models import Conversation, Message, Resource, ResourceBase


@runtime_checkable
class ConversationStore(Protocol):
    """Capability interface for conversation persistence."""

    async def get(self, conversation_id: str) -> Optional[Conversation]:
        ...

    async def list(self) -> List[Conversation]:
        """Return all conversations, most recently updated first."""
        ...

    async def create(self, title: str, topic: str, messages: List[Message]) -> Conversation:
        ...

    async def update(self, conversation_id: str, updates: Dict[str, Any]) -> Optional[Conversation]:
        """Merge `updates` into the record and refresh updated_at."""
        ...

    async def delete(self, conversation_id: str) -> bool:
        ...

    async def delete_all(self) -> None:
        ...


@runtime_checkable
class ResourceCatalog(Protocol):
    """Capability interface for the support resource list."""

    async def list(self) -> List[Resource]:
        ...

    async def list_by_category(self, category: str) -> List[Resource]:
        ...

    async def create(self, resource: ResourceBase) -> Resource:
        ...
