"""Stable ``@keyframes`` identifiers per (timeline, selector)."""

from typing import TYPE_CHECKING

from slugify import slugify

if TYPE_CHECKING:
    from .timeline import Timeline


def selector_slug(selector: str) -> str:
    return slugify(selector, lowercase=False).replace(".", "")


def animation_name(tl: "Timeline", selector: str) -> str:
    """Name of the generated animation, e.g. ``spinner-spinner-N-left``."""
    return f"{tl.name}-{selector_slug(selector)}"
