"""Data models for generated debate content and saved debates."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EvidenceItem(CamelModel):
    """A supporting claim and the sources backing it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    point: str
    sources: list[str] = Field(..., min_length=1)


class DebatePoint(CamelModel):
    """Arguments, rebuttals and evidence generated for a topic."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    proposition: list[str]
    opposition: list[str]
    proposition_rebuttals: list[str]
    opposition_rebuttals: list[str]
    evidence: list[EvidenceItem]
    language: str | None = None


class InsertDebate(CamelModel):
    """Fields accepted when saving a debate."""

    topic: str = Field(..., min_length=3, max_length=200)
    points: DebatePoint
    user_id: int | None = None
    language: str | None = None
    format: str | None = None


class Debate(CamelModel):
    """A saved debate record."""

    id: int
    topic: str
    points: DebatePoint
    user_id: int | None = None
    language: str | None = "english"
    format: str | None = None
    created_at: datetime


class InsertUser(CamelModel):
    """Fields accepted when creating a user."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class User(CamelModel):
    """A user record. Not exposed over HTTP."""

    id: int
    username: str
    password: str
    preferences: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
