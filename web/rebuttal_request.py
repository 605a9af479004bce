from pydantic import BaseModel, Field

from debate_engine.types import Side


class RebuttalRequest(BaseModel):
    """Request model for generating additional rebuttals for one side."""

    topic: str = Field(..., min_length=3, max_length=200)
    side: Side
    count: int = Field(default=2, ge=1, le=5)
