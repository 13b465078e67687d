"""
Support resource and topic endpoints.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from luna.api.deps import get_resource_catalog
from luna.models import TOPICS, Resource, ResourceBase, TopicInfo
from luna.storage import ResourceCatalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Resources"])


@router.get("/resources", response_model=List[Resource])
async def list_resources(
    category: Optional[str] = None,
    catalog: ResourceCatalog = Depends(get_resource_catalog)
):
    """
    Get support resources, optionally filtered by category.

    An unknown category returns an empty list.
    """
    try:
        if category:
            return await catalog.list_by_category(category)
        return await catalog.list()
    except Exception:
        logger.exception("Listing resources failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch resources"
        )


@router.post("/resources", response_model=Resource, status_code=status.HTTP_201_CREATED)
async def create_resource(
    resource: ResourceBase,
    catalog: ResourceCatalog = Depends(get_resource_catalog)
):
    """Add a resource to the catalog."""
    return await catalog.create(resource)


@router.get("/topics", response_model=List[TopicInfo])
async def list_topics():
    """Conversation topics offered to the user."""
    return TOPICS
