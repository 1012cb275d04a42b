"""Caption rendering and mention-composition API routes."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..schemas import (
    MentionInsertRequest,
    MentionInsertResponse,
    MentionQueryRequest,
    MentionQueryResponse,
    RichTextRenderRequest,
    RichTextRenderResponse,
)
from ..services import (
    RenderOptions,
    active_mention_query,
    extract_hashtags,
    extract_mentions,
    insert_mention,
    render_options_from_settings,
    render_rich_text,
)

router = APIRouter(prefix="/rich-text", tags=["rich-text"])

logger = logging.getLogger(__name__)


def build_render_response(content: str | None, options: RenderOptions, *, expanded: bool) -> RichTextRenderResponse:
    rendered = render_rich_text(
        content,
        options.budget,
        expanded=expanded,
        policy=options.policy,
        charset=options.charset,
    )
    logger.debug(
        "Rendered caption (length=%d, segments=%d, truncated=%s, expanded=%s)",
        len(content or ""),
        len(rendered.segments),
        rendered.was_truncated,
        expanded,
    )
    return RichTextRenderResponse.from_rendered(
        rendered,
        hashtags=extract_hashtags(content, charset=options.charset),
        mentions=extract_mentions(content, charset=options.charset),
    )


@router.post("/render", response_model=RichTextRenderResponse)
def render_endpoint(
    payload: RichTextRenderRequest,
    settings: Settings = Depends(get_settings),
) -> RichTextRenderResponse:
    """Split caption text into plain/hashtag/mention segments for display."""

    options = render_options_from_settings(
        settings,
        max_characters=payload.max_characters,
        max_lines=payload.max_lines,
    )
    return build_render_response(payload.content, options, expanded=payload.expanded)


@router.post("/mention-query", response_model=MentionQueryResponse)
def mention_query_endpoint(
    payload: MentionQueryRequest,
    settings: Settings = Depends(get_settings),
) -> MentionQueryResponse:
    charset = render_options_from_settings(settings).charset
    query = active_mention_query(payload.text, payload.cursor, charset=charset)
    if query is None:
        return MentionQueryResponse(active=False)
    return MentionQueryResponse(active=True, start=query.start, query=query.query)


@router.post("/mention-insert", response_model=MentionInsertResponse)
def mention_insert_endpoint(
    payload: MentionInsertRequest,
    settings: Settings = Depends(get_settings),
) -> MentionInsertResponse:
    charset = render_options_from_settings(settings).charset
    insertion = insert_mention(payload.text, payload.cursor, payload.handle, charset=charset)
    return MentionInsertResponse(text=insertion.text, cursor=insertion.cursor)
