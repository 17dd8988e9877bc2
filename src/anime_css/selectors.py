"""Selector aggregation over a timeline's resolved keyframes."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeVar

from .errors import InvariantViolation
from .params import ResolvedKeyframe, ensure_string_selector

if TYPE_CHECKING:
    from .timeline import Timeline

T = TypeVar("T")


def last(items: Sequence[T]) -> T:
    if not items:
        raise InvariantViolation("Cannot take last of empty sequence")
    return items[-1]


def aggregate_selectors(tl: "Timeline") -> list[str]:
    """Return every selector referenced by the timeline, in first-seen order."""
    selectors: dict[str, None] = {}
    for keyframe in tl.resolved_keyframes:
        if isinstance(keyframe.targets, (tuple, list)):
            for target in keyframe.targets:
                selectors.setdefault(ensure_string_selector(target), None)
        else:
            selectors.setdefault(ensure_string_selector(keyframe.targets), None)
    return list(selectors)


def targets_selector(keyframe: ResolvedKeyframe, selector: str) -> bool:
    targets = keyframe.targets
    if isinstance(targets, (tuple, list)):
        return selector in targets
    return targets == selector


def keyframes_of(tl: "Timeline", selector: str) -> list[ResolvedKeyframe]:
    """Keyframes targeting ``selector``, in insertion order."""
    return [
        keyframe
        for keyframe in tl.resolved_keyframes
        if targets_selector(keyframe, selector)
    ]


def initial_delay(tl: "Timeline", selector: str | None = None) -> float:
    keyframes = (
        keyframes_of(tl, selector) if selector is not None else tl.resolved_keyframes
    )
    return keyframes[0].start if keyframes else 0


def total_duration(tl: "Timeline") -> float:
    """End of the timeline's last keyframe; every selector shares this length."""
    if not tl.resolved_keyframes:
        return 0
    return last(tl.resolved_keyframes).end
