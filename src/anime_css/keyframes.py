"""Mapping of absolute keyframe times onto ``@keyframes`` percentage stops."""

from collections.abc import Sequence
from typing import Any

from ._shared import format_number
from .constants import COMMENT_KEY
from .easing import css_timing_function_of
from .params import ResolvedKeyframe

StopTree = dict[str, dict[str, Any]]


def percentage(time_ms: float, initial_delay: float, total_duration: float) -> str:
    """Position of ``time_ms`` within ``[initial_delay, total_duration]`` as a CSS stop."""
    span = total_duration - initial_delay
    if span == 0:
        return "0%"
    return f"{format_number((time_ms - initial_delay) / span * 100)}%"


def keyframe_stops(
    keyframes: Sequence[ResolvedKeyframe],
    initial_delay: float,
    total_duration: float,
) -> StopTree:
    """
    Build the stop tree of one selector's ``@keyframes`` rule.

    Each keyframe is written at its end time and held until the next keyframe
    starts; the last one is additionally pinned at ``100%``. Stops that land on
    the same percentage replace each other in place.

    Args:
        keyframes: The selector's keyframes, in insertion order
        initial_delay: Start of the selector's first keyframe (the 0% point)
        total_duration: End of the whole timeline (the 100% point)

    Returns:
        Ordered mapping of stop key (``"25%"``) to the properties held there
    """
    stops: StopTree = {}
    for index, keyframe in enumerate(keyframes):
        stops[percentage(keyframe.end, initial_delay, total_duration)] = _stop(
            keyframe, keyframe.end, initial_delay
        )
        if index == len(keyframes) - 1:
            stops["100%"] = _stop_properties(keyframe)
        else:
            next_start = keyframes[index + 1].start
            stops[percentage(next_start, initial_delay, total_duration)] = _stop(
                keyframe, next_start, initial_delay
            )
    return stops


def _stop(keyframe: ResolvedKeyframe, at_ms: float, initial_delay: float) -> dict[str, Any]:
    return {
        COMMENT_KEY: f"at {format_number(at_ms)} - {format_number(initial_delay)} ms",
        **_stop_properties(keyframe),
    }


def _stop_properties(keyframe: ResolvedKeyframe) -> dict[str, Any]:
    properties = keyframe.property_map()
    if keyframe.easing is not None:
        properties["animation_timing_function"] = css_timing_function_of(keyframe.easing)
    return properties
