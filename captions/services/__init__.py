"""Convenience exports for service layer."""
from .caption_view import (
    Affordance,
    CaptionViewState,
    RenderedText,
    RenderOptions,
    dispatch_activation,
    render_options_from_settings,
    render_rich_text,
)
from .mention_compose import (
    MentionInsertion,
    MentionQuery,
    active_mention_query,
    append_tagged_mentions,
    insert_mention,
)
from .post_service import create_post_record, get_post_record
from .rich_text import (
    DisplayBudget,
    Segment,
    SegmentKind,
    Token,
    TokenKind,
    TruncationPolicy,
    TruncationResult,
    WordCharset,
    build_segments,
    extract_hashtags,
    extract_mentions,
    tokenize,
    truncate,
)

__all__ = [
    "Affordance",
    "CaptionViewState",
    "RenderedText",
    "RenderOptions",
    "dispatch_activation",
    "render_options_from_settings",
    "render_rich_text",
    "MentionInsertion",
    "MentionQuery",
    "active_mention_query",
    "append_tagged_mentions",
    "insert_mention",
    "create_post_record",
    "get_post_record",
    "DisplayBudget",
    "Segment",
    "SegmentKind",
    "Token",
    "TokenKind",
    "TruncationPolicy",
    "TruncationResult",
    "WordCharset",
    "build_segments",
    "extract_hashtags",
    "extract_mentions",
    "tokenize",
    "truncate",
]
