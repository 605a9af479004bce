"""Prompt builders for the generation endpoints."""

from .builder import (
    build_counter_argument_messages,
    build_debate_messages,
    build_rebuttal_messages,
)

__all__ = [
    "build_counter_argument_messages",
    "build_debate_messages",
    "build_rebuttal_messages",
]
