import pytest
from pydantic import ValidationError

from captions.config import Settings
from captions.services.caption_view import (
    Affordance,
    CaptionViewState,
    dispatch_activation,
    render_options_from_settings,
    render_rich_text,
)
from captions.services.rich_text import DisplayBudget, Segment, SegmentKind, TruncationPolicy

SHORT = "That's the tea @reason and the #humans so we need tie skrbr"
LONG = "Morning session at the park with @coach_ana " + "working on handstands and levers " * 4 + "#calisthenics"


def test_render_empty_content_has_nothing_to_show():
    for content in (None, ""):
        rendered = render_rich_text(content)
        assert rendered.segments == ()
        assert rendered.was_truncated is False
        assert rendered.affordance is None
        assert rendered.is_empty


def test_render_short_caption_is_not_truncated():
    rendered = render_rich_text(SHORT, DisplayBudget(max_characters=120))

    assert rendered.was_truncated is False
    assert rendered.affordance is None
    assert rendered.max_lines is None
    assert [(segment.text, segment.kind) for segment in rendered.segments] == [
        ("That's the tea ", SegmentKind.PLAIN),
        ("@reason", SegmentKind.MENTION),
        (" and the ", SegmentKind.PLAIN),
        ("#humans", SegmentKind.HASHTAG),
        (" so we need tie skrbr", SegmentKind.PLAIN),
    ]


def test_render_collapsed_long_caption_offers_show_more():
    assert len(LONG) > 120

    rendered = render_rich_text(LONG, DisplayBudget(max_characters=120, max_lines=2))

    assert rendered.was_truncated is True
    assert rendered.expanded is False
    assert rendered.affordance is Affordance.SHOW_MORE
    assert rendered.max_lines == 2
    assert sum(len(segment.text) for segment in rendered.segments) <= 120
    assert rendered.segments[-1].text.endswith("...")


def test_render_expanded_long_caption_offers_show_less():
    rendered = render_rich_text(LONG, DisplayBudget(max_characters=120), expanded=True)

    assert rendered.was_truncated is False
    assert rendered.expanded is True
    assert rendered.affordance is Affordance.SHOW_LESS
    assert rendered.max_lines is None
    assert "".join(segment.text for segment in rendered.segments) == LONG


def test_render_expanded_short_caption_has_no_affordance():
    rendered = render_rich_text(SHORT, expanded=True)
    assert rendered.affordance is None


def test_view_state_starts_collapsed_and_toggles():
    view = CaptionViewState(LONG)

    assert view.expanded is False
    assert view.render().affordance is Affordance.SHOW_MORE

    assert view.toggle() is True
    assert view.render().affordance is Affordance.SHOW_LESS

    view.collapse()
    assert view.expanded is False
    view.expand()
    assert view.expanded is True


def test_view_state_resets_when_content_changes():
    view = CaptionViewState(LONG)
    view.expand()

    view.bind(LONG)
    assert view.expanded is True

    view.bind(SHORT)
    assert view.expanded is False
    assert view.content == SHORT


def test_view_state_rendering_is_stable_across_toggles():
    view = CaptionViewState(LONG, DisplayBudget(max_characters=60))
    collapsed = view.render()
    view.toggle()
    view.toggle()
    assert view.render() == collapsed


def test_view_state_uses_configured_policy():
    caption = "abc #tagged"
    view = CaptionViewState(caption, DisplayBudget(max_characters=9), policy=TruncationPolicy.DROP_TOKENS)
    assert view.render().segments == (Segment("abc ", SegmentKind.PLAIN, 0),)


def test_dispatch_activation_routes_by_kind():
    calls = []

    def on_hashtag(tag):
        calls.append(("hashtag", tag))

    def on_mention(handle):
        calls.append(("mention", handle))

    assert dispatch_activation(Segment("#humans", SegmentKind.HASHTAG, 0), on_hashtag=on_hashtag, on_mention=on_mention)
    assert dispatch_activation(Segment("@reason", SegmentKind.MENTION, 8), on_hashtag=on_hashtag, on_mention=on_mention)
    assert not dispatch_activation(Segment("plain", SegmentKind.PLAIN, 0), on_hashtag=on_hashtag, on_mention=on_mention)
    assert not dispatch_activation(Segment("#humans", SegmentKind.HASHTAG, 0), on_mention=on_mention)

    assert calls == [("hashtag", "#humans"), ("mention", "@reason")]


def test_render_options_from_settings_applies_overrides():
    settings = Settings(
        DATABASE_URL="sqlite://",
        CAPTION_MAX_CHARACTERS=80,
        CAPTION_TRUNCATION_POLICY="drop_tokens",
        CAPTION_EXTRA_WORD_RANGES="0400-04FF",
    )

    defaults = render_options_from_settings(settings)
    overridden = render_options_from_settings(settings, max_characters=10, max_lines=1)

    assert defaults.budget == DisplayBudget(max_characters=80, max_lines=3)
    assert defaults.policy is TruncationPolicy.DROP_TOKENS
    assert defaults.charset.extra_ranges == ((0x0400, 0x04FF),)
    assert overridden.budget == DisplayBudget(max_characters=10, max_lines=1)


@pytest.mark.parametrize("ranges", ["zz", "05FF-0590", "0590-zz", "110000"])
def test_settings_reject_invalid_word_ranges(ranges):
    with pytest.raises(ValidationError):
        Settings(DATABASE_URL="sqlite://", CAPTION_EXTRA_WORD_RANGES=ranges)


def test_settings_accept_word_range_list():
    settings = Settings(DATABASE_URL="sqlite://", CAPTION_EXTRA_WORD_RANGES="0400-04FF, 0590-05FF,0041")
    assert settings.caption_extra_word_ranges == "0400-04FF, 0590-05FF,0041"
