"""Debate content models and shared types."""

from .models import Debate, DebatePoint, EvidenceItem, InsertDebate, InsertUser, User
from .types import Complexity, ResponseShape, Side

__all__ = [
    "Complexity",
    "Debate",
    "DebatePoint",
    "EvidenceItem",
    "InsertDebate",
    "InsertUser",
    "ResponseShape",
    "Side",
    "User",
]
