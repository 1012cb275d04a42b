"""Aggregate router exports."""
from .posts import router as posts_router
from .rich_text import router as rich_text_router

__all__ = ["posts_router", "rich_text_router"]
