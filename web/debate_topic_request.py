from pydantic import BaseModel, Field

from debate_engine.types import Complexity


class DebateTopicRequest(BaseModel):
    """Request model for generating debate points."""

    topic: str = Field(..., min_length=3, max_length=200)
    language: str = Field(default="english", min_length=2, max_length=30)
    complexity: Complexity = Complexity.INTERMEDIATE
