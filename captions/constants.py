"""Project-wide constant values."""
from __future__ import annotations

DEFAULT_MAX_CHARACTERS = 120
DEFAULT_MAX_LINES = 3

ELLIPSIS = "..."  # counted against the character budget

__all__ = ["DEFAULT_MAX_CHARACTERS", "DEFAULT_MAX_LINES", "ELLIPSIS"]
