"""
Support resource model.
"""
import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResourceCategory(str, enum.Enum):
    """Enum for resource categories"""
    MENTAL_HEALTH = "mental-health"
    BODY_HEALTH = "body-health"
    CRISIS = "crisis"
    APPS = "apps"


class ResourceBase(BaseModel):
    """Fields shared by stored resources and creation payloads"""
    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1)
    description: str
    category: ResourceCategory
    content: str
    url: Optional[str] = None
    icon: str


class Resource(ResourceBase):
    """A curated support entry shown in the resources view"""
    id: str
