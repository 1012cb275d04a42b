"""Pydantic schemas for captioned post resources."""
from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Payload used by API clients when publishing a post."""

    author_username: str = Field(..., min_length=1, max_length=64)
    caption: str = Field(..., min_length=1, max_length=2200)
    tagged_handles: list[str] = Field(default_factory=list)


class PostResponse(BaseModel):
    """Serialized representation of a persisted post."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    author_username: str
    caption: str
    hashtags: list[str] = Field(default_factory=list)
    mentions: list[str] = Field(default_factory=list)
    created_at: datetime


__all__ = ["PostCreate", "PostResponse"]
