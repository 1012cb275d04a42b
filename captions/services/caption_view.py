"""Collapsed/expanded rendering of captions for a single on-screen post."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..config import Settings
from .rich_text import (
    DEFAULT_CHARSET,
    DisplayBudget,
    Segment,
    SegmentKind,
    TruncationPolicy,
    WordCharset,
    build_segments,
    tokenize,
    truncate,
)


class Affordance(str, Enum):
    SHOW_MORE = "show_more"
    SHOW_LESS = "show_less"


@dataclass(frozen=True, slots=True)
class RenderedText:
    """Display-ready segments plus the flags the presentation layer needs."""

    segments: tuple[Segment, ...]
    was_truncated: bool
    expanded: bool
    max_lines: int | None
    affordance: Affordance | None

    @property
    def is_empty(self) -> bool:
        return not any(segment.text for segment in self.segments)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    budget: DisplayBudget
    policy: TruncationPolicy
    charset: WordCharset


def render_options_from_settings(
    settings: Settings,
    *,
    max_characters: int | None = None,
    max_lines: int | None = None,
) -> RenderOptions:
    """Resolve the configured display defaults, applying per-request overrides."""

    budget = DisplayBudget(
        max_characters=settings.caption_max_characters if max_characters is None else max_characters,
        max_lines=settings.caption_max_lines if max_lines is None else max_lines,
    )
    return RenderOptions(
        budget=budget,
        policy=TruncationPolicy(settings.caption_truncation_policy),
        charset=WordCharset.from_spec(settings.caption_extra_word_ranges),
    )


def render_rich_text(
    content: str | None,
    budget: DisplayBudget | None = None,
    *,
    expanded: bool = False,
    policy: TruncationPolicy = TruncationPolicy.ELLIPSIS,
    charset: WordCharset = DEFAULT_CHARSET,
) -> RenderedText:
    """Tokenize, segment and (when collapsed) truncate ``content``.

    The truncated and full streams are computed the same way in both states;
    ``expanded`` only selects which one is returned.
    """

    budget = budget or DisplayBudget()
    if not content:
        return RenderedText(segments=(), was_truncated=False, expanded=expanded, max_lines=None, affordance=None)

    segments = build_segments(content, tokenize(content, charset=charset))
    result = truncate(segments, budget.character_limit, policy=policy)

    if expanded:
        affordance = Affordance.SHOW_LESS if result.was_truncated else None
        return RenderedText(
            segments=segments,
            was_truncated=False,
            expanded=True,
            max_lines=None,
            affordance=affordance,
        )

    return RenderedText(
        segments=result.segments,
        was_truncated=result.was_truncated,
        expanded=False,
        max_lines=budget.max_lines if result.was_truncated else None,
        affordance=Affordance.SHOW_MORE if result.was_truncated else None,
    )


class CaptionViewState:
    """Per-view toggle between the collapsed and expanded caption.

    Starts collapsed and only changes on explicit ``expand``/``collapse``/
    ``toggle`` calls. Binding different content resets it to collapsed.
    """

    def __init__(
        self,
        content: str | None = None,
        budget: DisplayBudget | None = None,
        *,
        policy: TruncationPolicy = TruncationPolicy.ELLIPSIS,
        charset: WordCharset = DEFAULT_CHARSET,
    ) -> None:
        self._content = content
        self._budget = budget or DisplayBudget()
        self._policy = policy
        self._charset = charset
        self._expanded = False

    @property
    def content(self) -> str | None:
        return self._content

    @property
    def expanded(self) -> bool:
        return self._expanded

    def bind(self, content: str | None) -> None:
        if content != self._content:
            self._content = content
            self._expanded = False

    def expand(self) -> None:
        self._expanded = True

    def collapse(self) -> None:
        self._expanded = False

    def toggle(self) -> bool:
        self._expanded = not self._expanded
        return self._expanded

    def render(self) -> RenderedText:
        return render_rich_text(
            self._content,
            self._budget,
            expanded=self._expanded,
            policy=self._policy,
            charset=self._charset,
        )


def dispatch_activation(
    segment: Segment,
    *,
    on_hashtag: Callable[[str], None] | None = None,
    on_mention: Callable[[str], None] | None = None,
) -> bool:
    """Forward a tapped segment's text (sigil included) to the matching callback.

    Returns ``True`` when a callback was invoked.
    """

    if segment.kind is SegmentKind.HASHTAG and on_hashtag is not None:
        on_hashtag(segment.text)
        return True
    if segment.kind is SegmentKind.MENTION and on_mention is not None:
        on_mention(segment.text)
        return True
    return False


__all__ = [
    "Affordance",
    "CaptionViewState",
    "RenderOptions",
    "RenderedText",
    "dispatch_activation",
    "render_options_from_settings",
    "render_rich_text",
]
