"""Parsing of configured code point ranges for hashtag/mention word characters."""
from __future__ import annotations


def parse_code_point_ranges(spec: str | None) -> tuple[tuple[int, int], ...]:
    """Parse ``"0590-05FF,0600"`` into inclusive ``(start, end)`` pairs.

    Raises ``ValueError`` for non-hex bounds or inverted ranges.
    """

    ranges: list[tuple[int, int]] = []
    for chunk in (spec or "").split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        low, sep, high = chunk.partition("-")
        try:
            start = int(low, 16)
            end = int(high, 16) if sep else start
        except ValueError as exc:
            raise ValueError(f"Invalid code point range: {chunk!r}") from exc
        if end < start or end > 0x10FFFF:
            raise ValueError(f"Invalid code point range: {chunk!r}")
        ranges.append((start, end))
    return tuple(ranges)


__all__ = ["parse_code_point_ranges"]
