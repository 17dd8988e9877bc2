"""Compilation of a timeline into ``@keyframes`` rules plus animation declarations."""

import logging
from typing import TYPE_CHECKING, Any

from ._shared import format_number
from .constants import DEFAULT_INDENT
from .css import css
from .easing import css_timing_function_of
from .errors import ValidationError
from .keyframes import keyframe_stops
from .naming import animation_name
from .params import Loop, TimelineDefaults, ensure_non_function_based, ensure_number
from .selectors import aggregate_selectors, initial_delay, keyframes_of, total_duration

if TYPE_CHECKING:
    from .timeline import Timeline

logger = logging.getLogger(__name__)


def iteration_count(loop: Loop) -> str | float | None:
    """``animation-iteration-count`` for a loop setting; ``None`` elides it."""
    loop = ensure_non_function_based("loop", loop)
    if loop is True:
        return "infinite"
    if loop is False or loop is None:
        return None
    count = ensure_number(loop)
    if count <= 0:
        raise ValidationError(f"Loop count must be positive, got {loop!r}.")
    return count


def animation_declarations(
    defaults: TimelineDefaults,
    name: str,
    duration_ms: float,
    delay_ms: float,
) -> dict[str, Any]:
    """Declarations that attach the generated ``@keyframes`` rule to its selector."""
    easing = defaults.easing
    return {
        "animation": f"{name} {format_number(duration_ms)}ms",
        "animation_timing_function": (
            css_timing_function_of(easing) if easing is not None else None
        ),
        "animation_direction": defaults.direction,
        "animation_iteration_count": iteration_count(defaults.loop),
        "animation_play_state": "running" if defaults.autoplay else "paused",
        "animation_delay": f"{format_number(delay_ms)}ms",
    }


def compile_selector(tl: "Timeline", selector: str, indent: str = DEFAULT_INDENT) -> str:
    """Compile the ``@keyframes`` rule and animation block of one selector."""
    delay = initial_delay(tl, selector)
    duration = total_duration(tl)
    name = animation_name(tl, selector)
    stops = keyframe_stops(keyframes_of(tl, selector), delay, duration)
    logger.debug("Selector %r: %d stops, delay %sms", selector, len(stops), format_number(delay))
    tree = {
        f"@keyframes {name}": stops,
        selector: animation_declarations(tl.defaults, name, duration, delay),
    }
    return f"/** {selector} **/\n" + css(tree, indent)


def compile_timeline(tl: "Timeline", indent: str = DEFAULT_INDENT) -> str:
    """
    Compile every selector of a timeline, in first-seen order.

    The whole document is built before returning, so an error never yields
    partial CSS.
    """
    parts = [compile_selector(tl, selector, indent) + "\n\n" for selector in aggregate_selectors(tl)]
    logger.debug("Timeline %s compiled: %d selectors", tl.name, len(parts))
    return "".join(parts)
