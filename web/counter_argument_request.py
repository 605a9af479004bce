from pydantic import BaseModel, Field


class CounterArgumentRequest(BaseModel):
    """Request model for generating counter-arguments to a single argument."""

    argument: str = Field(..., min_length=3, max_length=500)
    topic: str | None = Field(default=None, min_length=3, max_length=200)
    count: int = Field(default=3, ge=1, le=5)
