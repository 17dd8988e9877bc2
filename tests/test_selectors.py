"""Tests for selector aggregation and per-selector keyframe views."""

import pytest

from anime_css import InvariantViolation, ValidationError, timeline
from anime_css.selectors import (
    aggregate_selectors,
    initial_delay,
    keyframes_of,
    last,
    total_duration,
)


def test_aggregates_selectors_in_first_seen_order():
    tl = timeline("test", {"irrelevant": "property"})
    tl.add({"targets": "h1"})
    tl.add({"targets": ["h1", "h2"]})

    assert aggregate_selectors(tl) == ["h1", "h2"]


def test_aggregation_deduplicates_across_keyframes():
    tl = timeline("test", {"duration": 10})
    tl.add({"targets": ["b", "a"]})
    tl.add({"targets": "c"})
    tl.add({"targets": ["a", "c", "b"]})

    assert aggregate_selectors(tl) == ["b", "a", "c"]


def test_non_string_target_is_rejected():
    tl = timeline("test", {"duration": 10})
    tl.add({"targets": ["h1", {"nodeName": "DIV"}]})

    with pytest.raises(ValidationError, match="Use CSS selectors for targets"):
        aggregate_selectors(tl)


def test_missing_target_is_rejected():
    tl = timeline("test", {"duration": 10})
    tl.add({"opacity": 0})

    with pytest.raises(ValidationError):
        aggregate_selectors(tl)


def test_keyframes_of_preserves_order_and_membership():
    tl = timeline("testing", {"duration": 300, "easing": "ease-in-out"})
    tl.add({"targets": "h1", "opacity": 0})
    tl.add({"targets": ["h1", "span"], "color": "red"})
    tl.add({"targets": "span", "background_color": "blue"})
    tl.add({"targets": ["h1", "h2"], "color": "green"})

    assert keyframes_of(tl, "span") == [tl.resolved_keyframes[1], tl.resolved_keyframes[2]]
    assert keyframes_of(tl, "h2") == [tl.resolved_keyframes[3]]
    assert keyframes_of(tl, "p") == []


def test_keyframes_of_does_not_match_substrings():
    tl = timeline("test", {"duration": 10})
    tl.add({"targets": "h1 span"})

    assert keyframes_of(tl, "h1") == []


def test_initial_delay_and_total_duration():
    tl = timeline("test", {"duration": 100})
    tl.add({"targets": "h1"}, 50)
    tl.add({"targets": "h2"}, 400)

    assert initial_delay(tl) == 50
    assert initial_delay(tl, "h2") == 400
    assert initial_delay(tl, "p") == 0
    assert total_duration(tl) == 500


def test_total_duration_uses_last_added_keyframe():
    """Insertion order, not time order, decides the timeline length."""
    tl = timeline("test", {})
    tl.add({"targets": "h1", "duration": 1000}, 0)
    tl.add({"targets": "h2", "duration": 100}, 0)

    assert total_duration(tl) == 100


def test_empty_timeline():
    tl = timeline("test", {})

    assert aggregate_selectors(tl) == []
    assert total_duration(tl) == 0
    assert initial_delay(tl) == 0


def test_last_of_empty_sequence_is_an_invariant_violation():
    assert last([1, 2, 3]) == 3
    with pytest.raises(InvariantViolation):
        last([])
