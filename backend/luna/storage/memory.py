"""
In-memory conversation store.

All state lives in a dict owned by the store instance and is lost when the
process exits. Writes are not serialized: two concurrent updates to the same
conversation are last-write-wins on the whole record.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from luna.models import Conversation, Message

logger = logging.getLogger(__name__)

# Fields the caller may never overwrite through update()
PROTECTED_FIELDS = {"id", "created_at", "updated_at"}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryConversationStore:
    """
    Conversation store backed by a plain dict keyed by conversation id.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        """
        Args:
            clock: Source of "now" for created_at/updated_at stamps
        """
        self._conversations: Dict[str, Conversation] = {}
        self._clock = clock

    async def get(self, conversation_id: str) -> Optional[Conversation]:
        return self._conversations.get(conversation_id)

    async def list(self) -> List[Conversation]:
        # Equal timestamps fall back to id so the order is deterministic
        return sorted(
            self._conversations.values(),
            key=lambda conv: (conv.updated_at, conv.id),
            reverse=True,
        )

    async def create(self, title: str, topic: str, messages: Optional[List[Message]] = None) -> Conversation:
        now = self._clock()
        conversation = Conversation(
            id=str(uuid.uuid4()),
            title=title,
            topic=topic,
            messages=list(messages or []),
            created_at=now,
            updated_at=now,
        )
        self._conversations[conversation.id] = conversation
        logger.debug("Created conversation %s", conversation.id)
        return conversation

    async def update(self, conversation_id: str, updates: Dict[str, Any]) -> Optional[Conversation]:
        existing = self._conversations.get(conversation_id)
        if existing is None:
            return None

        changes = {key: value for key, value in updates.items() if key not in PROTECTED_FIELDS}
        if "messages" in changes:
            changes["messages"] = list(changes["messages"])

        # updated_at never precedes created_at, even with a skewed clock
        updated_at = max(self._clock(), existing.created_at)
        updated = existing.model_copy(update={**changes, "updated_at": updated_at})
        self._conversations[conversation_id] = updated
        return updated

    async def delete(self, conversation_id: str) -> bool:
        return self._conversations.pop(conversation_id, None) is not None

    async def delete_all(self) -> None:
        """
        Delete every conversation present when the call starts.

        Not atomic: conversations created after the snapshot survive.
        """
        for conversation in await self.list():
            await self.delete(conversation.id)
