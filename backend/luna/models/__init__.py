"""
Models package - exports all domain models.
"""
from luna.models.message import Message, MessageRole
from luna.models.conversation import Conversation
from luna.models.resource import Resource, ResourceBase, ResourceCategory
from luna.models.topic import DEFAULT_TOPIC, TOPICS, Topic, TopicInfo

__all__ = [
    "Message",
    "MessageRole",
    "Conversation",
    "Resource",
    "ResourceBase",
    "ResourceCategory",
    "Topic",
    "TopicInfo",
    "TOPICS",
    "DEFAULT_TOPIC",
]
