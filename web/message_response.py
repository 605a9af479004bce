from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Body returned for every error response."""

    message: str
