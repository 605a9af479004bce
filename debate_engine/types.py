"""Shared types and enums for debate generation."""

from enum import Enum


class Complexity(str, Enum):
    """Depth of analysis requested for generated debate points."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class Side(str, Enum):
    """Debate sides."""

    PROPOSITION = "proposition"
    OPPOSITION = "opposition"


class ResponseShape(Enum):
    """Structure the model output is expected to contain."""

    OBJECT = "object"
    ARRAY = "array"
