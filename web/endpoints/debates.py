"""Saved debate endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from debate_engine.models import Debate, InsertDebate
from storage import DebateStorage
from web.dependencies import get_storage
from web.message_response import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

STORAGE_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


@router.post("/debates", response_model=Debate, status_code=201)
async def save_debate(
    debate: InsertDebate,
    storage: DebateStorage = Depends(get_storage),
):
    """Save a debate."""
    try:
        return await storage.create_debate(debate)
    except Exception as e:
        logger.exception(f"Failed to save debate: {e}")
        raise HTTPException(status_code=500, detail=STORAGE_ERROR_MESSAGE)


@router.get("/debates", response_model=list[Debate])
async def list_debates(
    user_id: str | None = Query(default=None, alias="userId"),
    storage: DebateStorage = Depends(get_storage),
):
    """Get all debates, or only those saved by userId.

    An empty userId means all debates. A non-numeric one matches nothing.
    """
    owner_id: int | None = None
    if user_id:
        try:
            owner_id = int(user_id)
        except ValueError:
            logger.info(f"Listing debates for non-numeric userId {user_id!r} matches nothing")
            return []

    try:
        return await storage.get_debates_by_user_id(owner_id)
    except Exception as e:
        logger.exception(f"Failed to list debates: {e}")
        raise HTTPException(status_code=500, detail=STORAGE_ERROR_MESSAGE)


# Registered before /debates/{debate_id} so "search" is not read as an id
@router.get("/debates/search", response_model=list[Debate])
async def search_debates(
    q: str | None = None,
    storage: DebateStorage = Depends(get_storage),
):
    """Search saved debates by topic."""
    if not q:
        raise HTTPException(status_code=400, detail="Search query is required")

    try:
        return await storage.search_debates(q)
    except Exception as e:
        logger.exception(f"Failed to search debates for {q!r}: {e}")
        raise HTTPException(status_code=500, detail=STORAGE_ERROR_MESSAGE)


@router.get(
    "/debates/{debate_id}",
    response_model=Debate,
    responses={404: {"model": MessageResponse}},
)
async def get_debate(
    debate_id: int,
    storage: DebateStorage = Depends(get_storage),
):
    """Get a saved debate by ID."""
    try:
        debate = await storage.get_debate(debate_id)
    except Exception as e:
        logger.exception(f"Failed to get debate {debate_id}: {e}")
        raise HTTPException(status_code=500, detail=STORAGE_ERROR_MESSAGE)

    if not debate:
        raise HTTPException(status_code=404, detail="Debate not found")
    return debate


@router.delete(
    "/debates/{debate_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": MessageResponse}},
)
async def delete_debate(
    debate_id: int,
    storage: DebateStorage = Depends(get_storage),
):
    """Delete a saved debate."""
    try:
        deleted = await storage.delete_debate(debate_id)
    except Exception as e:
        logger.exception(f"Failed to delete debate {debate_id}: {e}")
        raise HTTPException(status_code=500, detail=STORAGE_ERROR_MESSAGE)

    if not deleted:
        raise HTTPException(status_code=404, detail="Debate not found")
    return Response(status_code=204)
