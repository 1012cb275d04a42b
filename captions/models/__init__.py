"""Convenience exports for ORM models."""
from .post import Post

__all__ = ["Post"]
