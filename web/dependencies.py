"""Accessors for the services created at application startup."""

from fastapi import Request

from models.cache_manager import ResponseCache
from models.debate_generator import DebateGenerator
from storage import DebateStorage


def get_storage(request: Request) -> DebateStorage:
    return request.app.state.storage


def get_generator(request: Request) -> DebateGenerator:
    return request.app.state.generator


def get_cache(request: Request) -> ResponseCache:
    return request.app.state.cache
