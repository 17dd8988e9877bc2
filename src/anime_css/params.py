"""Typed parameter records for timelines and keyframes."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Union

from ._shared import parse_float
from .constants import TARGETS_KEY
from .errors import ParseError, ValidationError

logger = logging.getLogger(__name__)

PropertyValue = Union[str, int, float, None]
Targets = Union[str, tuple[str, ...]]
Loop = Union[bool, int]


def ensure_number(value: str | int | float) -> float | int:
    """Coerce a numeric string to a number, passing numbers through."""
    if isinstance(value, str):
        parsed = parse_float(value)
        if parsed is None:
            raise ParseError(f"Could not parse {value} as a number.")
        return parsed
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Expected a number, got {value!r}.")
    return value


def ensure_string_selector(selector: Any) -> str:
    if not isinstance(selector, str):
        raise ValidationError(
            f"Use CSS selectors for targets instead of {selector!r}. "
            "The DOM is not available here."
        )
    return selector


def ensure_non_function_based(name: str, param: Any) -> Any:
    """Reject per-element callables, which need a live DOM to evaluate."""
    if callable(param):
        raise ValidationError(
            f"Use a number for {name}, function-based parameters "
            "are not available without the DOM."
        )
    return param


@dataclass(frozen=True)
class TimelineDefaults:
    """Timeline-wide settings shared by every keyframe."""

    duration: float | None = None
    easing: str | None = None
    loop: Loop = False
    direction: str | None = None
    autoplay: bool = False

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "TimelineDefaults":
        known = {field.name for field in fields(cls)}
        ignored = sorted(key for key in params if key not in known)
        if ignored:
            logger.debug("Ignoring timeline parameters without CSS meaning: %s", ignored)
        return cls(**{key: value for key, value in params.items() if key in known})


@dataclass(frozen=True)
class KeyframeParams:
    """One ``Timeline.add`` call.

    ``properties`` is the open-ended part: every key except ``targets``, kept
    as ordered ``(name, value)`` pairs. ``duration`` and ``easing`` are also
    read into typed fields, but stay in ``properties`` like any other key.
    """

    targets: Any
    properties: tuple[tuple[str, PropertyValue], ...] = ()
    duration: float | None = None
    easing: str | None = None

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "KeyframeParams":
        """Build params from an anime.js-shaped mapping."""
        targets = params.get(TARGETS_KEY)
        if isinstance(targets, list):
            targets = tuple(targets)
        return cls(
            targets=targets,
            properties=tuple(
                (key, value)
                for key, value in params.items()
                if key != TARGETS_KEY
            ),
            duration=params.get("duration"),
            easing=params.get("easing"),
        )


@dataclass(frozen=True)
class ResolvedKeyframe:
    """A keyframe placed on the timeline clock, in milliseconds."""

    start: float
    end: float
    targets: Any
    properties: tuple[tuple[str, PropertyValue], ...]
    easing: str | None = None

    @property
    def duration(self) -> float:
        return self.end - self.start

    def property_map(self) -> dict[str, PropertyValue]:
        return dict(self.properties)
