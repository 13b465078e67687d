"""
Seeded, read-mostly catalog of support resources.
"""
import uuid
from typing import Dict, List, Optional

from luna.models import Resource, ResourceBase, ResourceCategory


DEFAULT_RESOURCES: List[ResourceBase] = [
    ResourceBase(
        title="Teen Mental Health Guide",
        description="Understanding anxiety, depression, and stress management techniques specifically for teenagers.",
        category=ResourceCategory.MENTAL_HEALTH,
        content="A comprehensive guide covering common mental health challenges faced by teenagers, including practical coping strategies, when to seek help, and how to build resilience.",
        icon="brain",
    ),
    ResourceBase(
        title="Mindfulness & Meditation",
        description="Simple breathing exercises and mindfulness practices to help manage stress and anxiety.",
        category=ResourceCategory.MENTAL_HEALTH,
        content="Learn evidence-based mindfulness techniques including 4-7-8 breathing, body scan meditation, and grounding exercises that can be done anywhere.",
        icon="heart",
    ),
    ResourceBase(
        title="Menstrual Health 101",
        description="Everything you need to know about periods, cycles, and managing menstrual health.",
        category=ResourceCategory.BODY_HEALTH,
        content="Complete information about menstrual cycles, period products, managing symptoms, and when to consult a healthcare provider.",
        icon="calendar",
    ),
    ResourceBase(
        title="Body Positivity & Self-Image",
        description="Building confidence and developing a healthy relationship with your changing body.",
        category=ResourceCategory.BODY_HEALTH,
        content="Tips for developing a positive body image, dealing with body changes during puberty, and building self-confidence.",
        icon="user",
    ),
    ResourceBase(
        title="National Suicide Prevention Lifeline",
        description="24/7 crisis support hotline",
        category=ResourceCategory.CRISIS,
        content="Call 988 for immediate crisis support. Available 24/7 with trained counselors.",
        url="tel:988",
        icon="phone",
    ),
    ResourceBase(
        title="Crisis Text Line",
        description="Text-based crisis support",
        category=ResourceCategory.CRISIS,
        content="Text HOME to 741741 for free, 24/7 crisis support via text message.",
        url="sms:741741",
        icon="message-circle",
    ),
    ResourceBase(
        title="Headspace",
        description="Meditation & mindfulness app",
        category=ResourceCategory.APPS,
        content="Popular meditation app with guided sessions for anxiety, sleep, and focus.",
        url="https://headspace.com",
        icon="smartphone",
    ),
    ResourceBase(
        title="Clue",
        description="Period & cycle tracking app",
        category=ResourceCategory.APPS,
        content="Science-based period tracker that helps you understand your menstrual cycle.",
        url="https://helloclue.com",
        icon="calendar",
    ),
]


class InMemoryResourceCatalog:
    """
    Resource catalog seeded synchronously at construction time.
    """

    def __init__(self, seed: Optional[List[ResourceBase]] = None):
        """
        Args:
            seed: Resources to load, defaults to DEFAULT_RESOURCES
        """
        self._resources: Dict[str, Resource] = {}
        for resource in DEFAULT_RESOURCES if seed is None else seed:
            self._add(resource)

    def _add(self, resource: ResourceBase) -> Resource:
        stored = Resource(id=str(uuid.uuid4()), **resource.model_dump())
        self._resources[stored.id] = stored
        return stored

    async def list(self) -> List[Resource]:
        return list(self._resources.values())

    async def list_by_category(self, category: str) -> List[Resource]:
        # Unknown categories simply match nothing
        return [resource for resource in self._resources.values() if resource.category == category]

    async def create(self, resource: ResourceBase) -> Resource:
        return self._add(resource)
