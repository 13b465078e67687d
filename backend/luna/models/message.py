"""
Message model for individual chat turns.
"""
import enum
import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class MessageRole(str, enum.Enum):
    """Enum for message roles"""
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """
    One turn within a conversation. Immutable once created.

    Fields:
        id: Opaque unique identifier
        role: Who produced the turn (user or assistant)
        content: The actual message content
        timestamp: When the message was created
    """
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    role: MessageRole
    content: str = Field(..., min_length=1)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        content_preview = self.content[:50] + "..." if len(self.content) > 50 else self.content
        return f"<Message(id={self.id}, role={self.role}, content='{content_preview}')>"
