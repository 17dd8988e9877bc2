"""Timeline construction: offset resolution and keyframe storage."""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ._shared import format_number, parse_float
from .compiler import compile_timeline
from .constants import DEFAULT_INDENT, TIMELINE_ONLY_KEYS
from .errors import ParseError, ValidationError
from .params import (
    KeyframeParams,
    ResolvedKeyframe,
    TimelineDefaults,
    ensure_non_function_based,
    ensure_number,
)
from .selectors import last

logger = logging.getLogger(__name__)

_RELATIVE_OPERATOR = re.compile(r"^(\*=|\+=|-=)")

Offset = str | int | float | None


class Timeline:
    """An append-only, named sequence of keyframes sharing one clock."""

    def __init__(self, name: str, defaults: TimelineDefaults | None = None):
        self.name = name
        self.defaults = defaults or TimelineDefaults()
        self._keyframes: list[ResolvedKeyframe] = []

    def __repr__(self) -> str:
        return f"Timeline(name={self.name!r}, keyframes={len(self._keyframes)})"

    @property
    def resolved_keyframes(self) -> tuple[ResolvedKeyframe, ...]:
        return tuple(self._keyframes)

    def add(
        self,
        params: KeyframeParams | Mapping[str, Any],
        offset: Offset = None,
    ) -> "Timeline":
        """
        Append a keyframe to the timeline.

        Args:
            params: Keyframe parameters, either typed or an anime.js-shaped mapping
            offset: Absolute start in ms, a relative expression (``"+=100"``,
                ``"-=50"``, ``"*=2"``), or ``None`` to start after the last keyframe

        Returns:
            The timeline itself, so calls can be chained

        Raises:
            ValidationError: If a parameter is function-based
            ParseError: If the offset or duration is not a number
        """
        if not isinstance(params, KeyframeParams):
            params = KeyframeParams.from_mapping(params)

        start = resolve_timeline_offset(self, offset)

        duration = params.duration
        if duration is None:
            duration = self.defaults.duration
        duration = ensure_number(ensure_non_function_based("duration", duration or 0))
        if duration < 0:
            raise ValidationError(f"Keyframe duration must not be negative, got {duration}.")

        for key, value in params.properties:
            ensure_non_function_based(key, value)

        keyframe = ResolvedKeyframe(
            start=start,
            end=start + duration,
            targets=params.targets,
            properties=params.properties,
            easing=ensure_non_function_based("easing", params.easing),
        )
        self._keyframes.append(keyframe)
        logger.debug(
            "Timeline %s: keyframe %d for %r at %sms for %sms",
            self.name,
            len(self._keyframes) - 1,
            keyframe.targets,
            format_number(keyframe.start),
            format_number(keyframe.duration),
        )
        return self

    def into_css(self, indent: str = DEFAULT_INDENT) -> str:
        """Compile the timeline into ``@keyframes`` rules and animation declarations."""
        return compile_timeline(self, indent)


def resolve_timeline_offset(tl: Timeline, offset: Offset) -> float:
    """Turn a timeline offset into an absolute start time in milliseconds.

    Units are not interpreted: ``"+=1s"`` adds one millisecond.
    """
    base = last(tl.resolved_keyframes).end if tl.resolved_keyframes else 0
    if offset is None:
        return base
    ensure_non_function_based("offset", offset)
    if isinstance(offset, bool):
        raise ValidationError(f"Timeline offset must be a number or string, got {offset!r}.")
    if isinstance(offset, (int, float)):
        return offset
    if not isinstance(offset, str):
        raise ValidationError(f"Timeline offset must be a number or string, got {offset!r}.")

    operator = _RELATIVE_OPERATOR.match(offset)
    if operator is None:
        return ensure_number(offset)
    literal = offset[operator.end():]
    amount = parse_float(literal)
    if amount is None:
        raise ParseError(f"Could not parse {literal} as a number.")

    sign = operator.group(1)[0]
    if sign == "+":
        return base + amount
    if sign == "-":
        return base - amount
    return base * amount


def timeline(
    name: str,
    defaults: TimelineDefaults | Mapping[str, Any] | None = None,
) -> Timeline:
    """Create an empty timeline with the given timeline-wide defaults."""
    if defaults is not None and not isinstance(defaults, TimelineDefaults):
        defaults = TimelineDefaults.from_mapping(defaults)
    return Timeline(name, defaults)


@dataclass
class AnimeInstance:
    """Result of ``anime()``: the raw parameters plus an attached timeline."""

    name: str
    params: dict[str, Any]
    timeline: Timeline = field(repr=False)

    def into_css(self) -> str:
        """Compile the parameters as a single keyframe animation."""
        keyframe = {
            key: value for key, value in self.params.items() if key not in TIMELINE_ONLY_KEYS
        }
        single = timeline(self.name, self.params)
        return single.add(keyframe, 0).into_css()


def anime(name: str, params: Mapping[str, Any]) -> AnimeInstance:
    """Mirror of ``anime(params)`` whose ``timeline`` shares the same defaults."""
    params = dict(params)
    return AnimeInstance(name=name, params=params, timeline=timeline(name, params))


anime.timeline = timeline  # type: ignore[attr-defined]
