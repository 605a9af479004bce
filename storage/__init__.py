"""Debate and user repositories."""

from .base import DebateStorage, DuplicateUsernameError
from .memory import MemoryStorage

__all__ = ["DebateStorage", "DuplicateUsernameError", "MemoryStorage"]
