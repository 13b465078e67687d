"""
Conversation model for storing chat history.
"""
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from luna.models.message import Message


class Conversation(BaseModel):
    """
    A topic-tagged transcript of chat turns.

    Fields:
        id: Opaque unique identifier
        title: Conversation title (first message excerpt)
        topic: Topic tag the conversation was started under
        messages: Turns in append order
        created_at: When conversation was created
        updated_at: When conversation was last changed
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    topic: str
    messages: List[Message] = []
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    def __repr__(self):
        return f"<Conversation(id='{self.id}', title='{self.title}', messages={len(self.messages)})>"
