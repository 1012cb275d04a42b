"""Hashtag/mention tokenizer, segment builder and budget truncation for captions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from ..charsets import parse_code_point_ranges
from ..constants import DEFAULT_MAX_CHARACTERS, DEFAULT_MAX_LINES, ELLIPSIS


class TokenKind(str, Enum):
    HASHTAG = "hashtag"
    MENTION = "mention"


class SegmentKind(str, Enum):
    PLAIN = "plain"
    HASHTAG = "hashtag"
    MENTION = "mention"


class TruncationPolicy(str, Enum):
    """How a hashtag or mention that straddles the budget is handled."""

    ELLIPSIS = "ellipsis"
    DROP_TOKENS = "drop_tokens"


_SIGILS: tuple[tuple[str, TokenKind], ...] = (
    ("#", TokenKind.HASHTAG),
    ("@", TokenKind.MENTION),
)


@dataclass(frozen=True, slots=True)
class WordCharset:
    """Characters allowed after a sigil: ASCII word characters plus extra code point ranges."""

    extra_ranges: tuple[tuple[int, int], ...] = ((0x0590, 0x05FF),)

    def __contains__(self, char: str) -> bool:
        if char.isascii():
            return char.isalnum() or char == "_"
        code = ord(char)
        return any(low <= code <= high for low, high in self.extra_ranges)

    @classmethod
    def from_spec(cls, spec: str | None) -> "WordCharset":
        """Build a charset from ``"0590-05FF,0600-06FF"`` style range lists."""

        return cls(extra_ranges=parse_code_point_ranges(spec))


DEFAULT_CHARSET = WordCharset()


@dataclass(frozen=True, slots=True)
class Token:
    start: int
    end: int
    kind: TokenKind


@dataclass(frozen=True, slots=True)
class Segment:
    text: str
    kind: SegmentKind
    source_start: int


@dataclass(frozen=True, slots=True)
class DisplayBudget:
    max_characters: int = DEFAULT_MAX_CHARACTERS
    max_lines: int = DEFAULT_MAX_LINES

    @property
    def character_limit(self) -> int:
        return max(self.max_characters, 0)


@dataclass(frozen=True, slots=True)
class TruncationResult:
    segments: tuple[Segment, ...]
    was_truncated: bool


def _scan(text: str, sigil: str, kind: TokenKind, charset: WordCharset) -> list[Token]:
    # Single forward pass; every index is visited at most twice.
    tokens: list[Token] = []
    length = len(text)
    index = 0
    while index < length:
        if text[index] != sigil:
            index += 1
            continue
        end = index + 1
        while end < length and text[end] in charset:
            end += 1
        if end > index + 1:
            tokens.append(Token(start=index, end=end, kind=kind))
            index = end
        else:
            index += 1
    return tokens


def tokenize(text: str | None, *, charset: WordCharset = DEFAULT_CHARSET) -> tuple[Token, ...]:
    """Return hashtag and mention tokens ordered by start offset.

    Each sigil is scanned independently over the full text. The merged list is
    sorted by ``start``; Python's sort is stable, so on a shared start offset the
    hashtag pass wins over the mention pass.
    """

    if not text:
        return ()
    found: list[Token] = []
    for sigil, kind in _SIGILS:
        found.extend(_scan(text, sigil, kind, charset))
    found.sort(key=lambda token: token.start)
    return tuple(found)


def build_segments(text: str | None, tokens: Sequence[Token]) -> tuple[Segment, ...]:
    """Partition ``text`` into plain and token segments without losing characters."""

    source = text or ""
    if not tokens:
        return (Segment(text=source, kind=SegmentKind.PLAIN, source_start=0),)

    segments: list[Segment] = []
    cursor = 0
    for token in tokens:
        if token.start < cursor:
            # overlapping span from an independent pass
            continue
        if token.start > cursor:
            segments.append(Segment(text=source[cursor : token.start], kind=SegmentKind.PLAIN, source_start=cursor))
        segments.append(
            Segment(text=source[token.start : token.end], kind=SegmentKind(token.kind.value), source_start=token.start)
        )
        cursor = token.end
    if cursor < len(source):
        segments.append(Segment(text=source[cursor:], kind=SegmentKind.PLAIN, source_start=cursor))
    return tuple(segments)


def total_length(segments: Iterable[Segment]) -> int:
    return sum(len(segment.text) for segment in segments)


def truncate(
    segments: Sequence[Segment],
    max_characters: int,
    *,
    policy: TruncationPolicy = TruncationPolicy.ELLIPSIS,
) -> TruncationResult:
    """Cut the segment stream down to ``max_characters`` plain characters.

    The first segment that overflows is shortened to ``remaining - 3``
    characters plus ``"..."`` when more than three characters of budget are
    left, otherwise it is dropped. Under ``DROP_TOKENS`` an overflowing hashtag
    or mention is always dropped whole. Nothing after that segment is kept.
    """

    budget = max(max_characters, 0)
    if total_length(segments) <= budget:
        return TruncationResult(segments=tuple(segments), was_truncated=False)

    kept: list[Segment] = []
    used = 0
    for segment in segments:
        size = len(segment.text)
        if used + size <= budget:
            kept.append(segment)
            used += size
            continue

        remaining = budget - used
        keep_partial = remaining > len(ELLIPSIS)
        if policy is TruncationPolicy.DROP_TOKENS and segment.kind is not SegmentKind.PLAIN:
            keep_partial = False
        if keep_partial:
            kept.append(
                Segment(
                    text=segment.text[: remaining - len(ELLIPSIS)] + ELLIPSIS,
                    kind=segment.kind,
                    source_start=segment.source_start,
                )
            )
        break

    return TruncationResult(segments=tuple(kept), was_truncated=True)


def extract_hashtags(text: str | None, *, charset: WordCharset = DEFAULT_CHARSET) -> list[str]:
    """Return hashtag names (without ``#``) in order of first appearance."""

    return _unique_names(text, TokenKind.HASHTAG, charset)


def extract_mentions(text: str | None, *, charset: WordCharset = DEFAULT_CHARSET) -> list[str]:
    """Return mentioned handles (without ``@``) in order of first appearance."""

    return _unique_names(text, TokenKind.MENTION, charset)


def _unique_names(text: str | None, kind: TokenKind, charset: WordCharset) -> list[str]:
    names: list[str] = []
    seen: set[str] = set()
    for token in tokenize(text, charset=charset):
        if token.kind is not kind:
            continue
        name = (text or "")[token.start + 1 : token.end]
        if name not in seen:
            seen.add(name)
            names.append(name)
    return names


__all__ = [
    "DEFAULT_CHARSET",
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
    "total_length",
    "truncate",
]
