"""Compile anime.js-style timelines into static CSS animations."""

from .compiler import compile_timeline
from .css import css
from .errors import (
    AnimeCSSError,
    DefinitionError,
    InvariantViolation,
    ParseError,
    UnsupportedFeatureError,
    ValidationError,
)
from .loader import timeline_from_definition
from .params import KeyframeParams, ResolvedKeyframe, TimelineDefaults
from .timeline import AnimeInstance, Timeline, anime, resolve_timeline_offset, timeline

__all__ = [
    "AnimeCSSError",
    "AnimeInstance",
    "DefinitionError",
    "InvariantViolation",
    "KeyframeParams",
    "ParseError",
    "ResolvedKeyframe",
    "Timeline",
    "TimelineDefaults",
    "UnsupportedFeatureError",
    "ValidationError",
    "anime",
    "compile_timeline",
    "css",
    "resolve_timeline_offset",
    "timeline",
    "timeline_from_definition",
]
