"""
Pydantic schemas for chat requests and responses.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from luna.models.topic import Topic


class ResourceStub(BaseModel):
    """A resource suggested by the assistant alongside its reply"""
    title: str = Field(..., min_length=1)
    description: str
    url: Optional[str] = None


class ChatRequest(BaseModel):
    """Request schema for sending a chat message"""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    message: str = Field(..., min_length=1)
    topic: Optional[Topic] = None
    conversation_id: Optional[str] = Field(None, alias="conversationId")


class ChatResponse(BaseModel):
    """Response schema for chat message"""
    model_config = ConfigDict(populate_by_name=True)

    response: str
    conversation_id: str = Field(..., alias="conversationId")
    resources: List[ResourceStub] = []


class ConversationUpdate(BaseModel):
    """Fields a client may change on an existing conversation"""
    model_config = ConfigDict(use_enum_values=True)

    title: Optional[str] = Field(None, min_length=1)
    topic: Optional[Topic] = None


class SuccessResponse(BaseModel):
    """Acknowledgement for delete operations"""
    success: bool = True
