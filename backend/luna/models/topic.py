"""
Conversation topics.
"""
import enum
from typing import List

from pydantic import BaseModel


class Topic(str, enum.Enum):
    """Enum for conversation topics"""
    MENTAL_HEALTH = "mental-health"
    RELATIONSHIPS = "relationships"
    MENSTRUAL_HEALTH = "menstrual-health"
    GENERAL_WELLNESS = "general-wellness"


DEFAULT_TOPIC = Topic.GENERAL_WELLNESS


class TopicInfo(BaseModel):
    """Display metadata for a topic"""
    id: Topic
    title: str
    description: str
    tags: List[str]


TOPICS: List[TopicInfo] = [
    TopicInfo(
        id=Topic.MENTAL_HEALTH,
        title="Mental Health & Wellbeing",
        description="Anxiety, depression, stress, self-care, and emotional support",
        tags=["Anxiety", "Self-care", "Stress"],
    ),
    TopicInfo(
        id=Topic.RELATIONSHIPS,
        title="Relationships & Social Life",
        description="Friendships, family, crushes, dating, and social anxiety",
        tags=["Friendships", "Family", "Dating"],
    ),
    TopicInfo(
        id=Topic.MENSTRUAL_HEALTH,
        title="Menstrual Health & Body",
        description="Periods, body changes, hygiene, and reproductive health",
        tags=["Periods", "Body changes", "Health"],
    ),
    TopicInfo(
        id=Topic.GENERAL_WELLNESS,
        title="General Wellness & Life",
        description="School, hobbies, future goals, and everyday challenges",
        tags=["School", "Goals", "Life advice"],
    ),
]
