"""Convenience exports for schema layer."""
from .posts import PostCreate, PostResponse
from .rich_text import (
    MentionInsertRequest,
    MentionInsertResponse,
    MentionQueryRequest,
    MentionQueryResponse,
    RichTextRenderRequest,
    RichTextRenderResponse,
    SegmentResponse,
)

__all__ = [
    "PostCreate",
    "PostResponse",
    "MentionInsertRequest",
    "MentionInsertResponse",
    "MentionQueryRequest",
    "MentionQueryResponse",
    "RichTextRenderRequest",
    "RichTextRenderResponse",
    "SegmentResponse",
]
