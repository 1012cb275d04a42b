"""Helpers used while composing a caption: mention autocomplete and tagged users."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .rich_text import DEFAULT_CHARSET, WordCharset, extract_mentions


@dataclass(frozen=True, slots=True)
class MentionQuery:
    """A partially typed mention ending at the cursor."""

    start: int
    query: str


@dataclass(frozen=True, slots=True)
class MentionInsertion:
    text: str
    cursor: int


def _clamp_cursor(text: str, cursor: int) -> int:
    return min(max(cursor, 0), len(text))


def active_mention_query(
    text: str | None,
    cursor: int,
    *,
    charset: WordCharset = DEFAULT_CHARSET,
) -> MentionQuery | None:
    """Return the ``@query`` immediately before ``cursor``, if any.

    The query may be empty right after a bare ``@``.
    """

    source = text or ""
    position = _clamp_cursor(source, cursor)
    index = position
    while index > 0 and source[index - 1] in charset:
        index -= 1
    if index == 0 or source[index - 1] != "@":
        return None
    return MentionQuery(start=index - 1, query=source[index:position])


def insert_mention(
    text: str | None,
    cursor: int,
    handle: str,
    *,
    charset: WordCharset = DEFAULT_CHARSET,
) -> MentionInsertion:
    """Replace the partial mention before ``cursor`` with ``@handle ``."""

    source = text or ""
    position = _clamp_cursor(source, cursor)
    query = active_mention_query(source, position, charset=charset)
    if query is None:
        return MentionInsertion(text=source, cursor=position)

    mention = f"@{handle.lstrip('@')} "
    before = source[: query.start] + mention
    return MentionInsertion(text=before + source[position:], cursor=len(before))


def append_tagged_mentions(
    text: str | None,
    handles: Iterable[str],
    *,
    charset: WordCharset = DEFAULT_CHARSET,
) -> str:
    """Append ``@handle`` for every tagged user not already mentioned."""

    content = text or ""
    present = set(extract_mentions(content, charset=charset))
    for raw in handles:
        handle = raw.strip().lstrip("@")
        if not handle or handle in present:
            continue
        content += f" @{handle}"
        present.add(handle)
    return content.strip()


__all__ = [
    "MentionInsertion",
    "MentionQuery",
    "active_mention_query",
    "append_tagged_mentions",
    "insert_mention",
]
