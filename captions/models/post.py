"""SQLAlchemy ORM model for captioned posts."""
from __future__ import annotations

import uuid

from sqlalchemy import JSON, Column, DateTime, String, Text, Uuid
from sqlalchemy.sql import func

from captions.database import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    author_username = Column(String(64), nullable=False, index=True)
    caption = Column(Text, nullable=False)
    hashtags = Column(JSON, nullable=False, default=list)
    mentions = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


__all__ = ["Post"]
