"""Business logic for storing and fetching captioned posts."""
from __future__ import annotations

import logging
from typing import Iterable
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Post
from .mention_compose import append_tagged_mentions
from .rich_text import DEFAULT_CHARSET, WordCharset, extract_hashtags, extract_mentions

logger = logging.getLogger(__name__)


def create_post_record(
    db: Session,
    *,
    author_username: str,
    caption: str,
    tagged_handles: Iterable[str] = (),
    charset: WordCharset = DEFAULT_CHARSET,
) -> Post:
    """Persist a post, appending tagged users and indexing its hashtags/mentions."""

    username = (author_username or "").strip()
    if not username:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Author username cannot be blank")

    content = append_tagged_mentions(caption, tagged_handles, charset=charset)
    if not content:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Caption cannot be empty")

    post = Post(
        author_username=username,
        caption=content,
        hashtags=extract_hashtags(content, charset=charset),
        mentions=extract_mentions(content, charset=charset),
    )
    db.add(post)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to persist post for %s", author_username)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save post") from exc
    db.refresh(post)
    logger.info("Created post %s (hashtags=%d, mentions=%d)", post.id, len(post.hashtags), len(post.mentions))
    return post


def get_post_record(db: Session, post_id: UUID) -> Post:
    post = db.get(Post, post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


__all__ = ["create_post_record", "get_post_record"]
