"""Pydantic schemas for caption rendering endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field

from ..services.caption_view import Affordance, RenderedText
from ..services.rich_text import SegmentKind


class RichTextRenderRequest(BaseModel):
    """Caption text plus optional overrides for the configured display budget."""

    content: str | None = None
    max_characters: int | None = None
    max_lines: int | None = Field(default=None, ge=1)
    expanded: bool = False


class SegmentResponse(BaseModel):
    text: str
    kind: SegmentKind
    source_start: int


class RichTextRenderResponse(BaseModel):
    segments: list[SegmentResponse]
    was_truncated: bool
    expanded: bool
    max_lines: int | None = None
    affordance: Affordance | None = None
    hashtags: list[str] = Field(default_factory=list)
    mentions: list[str] = Field(default_factory=list)

    @classmethod
    def from_rendered(
        cls,
        rendered: RenderedText,
        *,
        hashtags: list[str],
        mentions: list[str],
    ) -> "RichTextRenderResponse":
        return cls(
            segments=[
                SegmentResponse(text=segment.text, kind=segment.kind, source_start=segment.source_start)
                for segment in rendered.segments
            ],
            was_truncated=rendered.was_truncated,
            expanded=rendered.expanded,
            max_lines=rendered.max_lines,
            affordance=rendered.affordance,
            hashtags=hashtags,
            mentions=mentions,
        )


class MentionQueryRequest(BaseModel):
    text: str = ""
    cursor: int


class MentionQueryResponse(BaseModel):
    active: bool
    start: int | None = None
    query: str | None = None


class MentionInsertRequest(BaseModel):
    text: str = ""
    cursor: int
    handle: str = Field(..., min_length=1, max_length=64)


class MentionInsertResponse(BaseModel):
    text: str
    cursor: int


__all__ = [
    "MentionInsertRequest",
    "MentionInsertResponse",
    "MentionQueryRequest",
    "MentionQueryResponse",
    "RichTextRenderRequest",
    "RichTextRenderResponse",
    "SegmentResponse",
]
