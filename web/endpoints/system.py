"""System health and response cache endpoints."""

import logging

from fastapi import APIRouter, Depends

from models.cache_manager import ResponseCache
from web.dependencies import get_cache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/health")
async def health_check():
    """Health check endpoint to verify API is running."""
    return {"isAlive": True}


@router.get("/cache/stats")
async def get_cache_stats(cache: ResponseCache = Depends(get_cache)):
    """Get response cache statistics."""
    return {"cache_stats": cache.get_cache_stats()}


@router.delete("/cache")
async def clear_cache(cache: ResponseCache = Depends(get_cache)):
    """Drop every cached generation result."""
    cleared = cache.clear()
    return {"message": f"Cleared {cleared} cached responses"}
