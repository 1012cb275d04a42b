"""Post related API routes backed by SQLAlchemy."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..database import get_session
from ..schemas import PostCreate, PostResponse, RichTextRenderResponse
from ..services import create_post_record, get_post_record, render_options_from_settings
from .rich_text import build_render_response

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post_endpoint(
    payload: PostCreate,
    db: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> PostResponse:
    """Publish a post, folding tagged users into the caption as mentions."""

    charset = render_options_from_settings(settings).charset
    post = create_post_record(
        db,
        author_username=payload.author_username,
        caption=payload.caption,
        tagged_handles=payload.tagged_handles,
        charset=charset,
    )
    return PostResponse.model_validate(post)


@router.get("/{post_id}", response_model=PostResponse)
def get_post_endpoint(post_id: UUID, db: Session = Depends(get_session)) -> PostResponse:
    return PostResponse.model_validate(get_post_record(db, post_id))


@router.get("/{post_id}/caption", response_model=RichTextRenderResponse)
def get_post_caption_endpoint(
    post_id: UUID,
    expanded: bool = Query(False),
    max_characters: int | None = Query(None),
    max_lines: int | None = Query(None, ge=1),
    db: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> RichTextRenderResponse:
    """Render a stored caption in its collapsed or expanded form."""

    post = get_post_record(db, post_id)
    options = render_options_from_settings(settings, max_characters=max_characters, max_lines=max_lines)
    return build_render_response(post.caption, options, expanded=expanded)
