"""
Storage package - conversation store and resource catalog.
"""
from luna.storage.base import ConversationStore, ResourceCatalog
from luna.storage.memory import InMemoryConversationStore
from luna.storage.resources import DEFAULT_RESOURCES, InMemoryResourceCatalog

__all__ = [
    "ConversationStore",
    "ResourceCatalog",
    "InMemoryConversationStore",
    "InMemoryResourceCatalog",
    "DEFAULT_RESOURCES",
]
