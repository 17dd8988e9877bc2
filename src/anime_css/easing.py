"""Translation of anime.js easing names into CSS timing functions."""

import re

from .constants import UNSUPPORTED_EASING_PREFIXES
from .errors import UnsupportedFeatureError, ValidationError
from .params import ensure_non_function_based

_CUBIC_BEZIER = re.compile(r"^cubicBezier")


def css_timing_function_of(easing: str) -> str:
    """
    Resolve an easing descriptor to a CSS ``animation-timing-function`` value.

    Raises:
        ValidationError: If the easing is a function
        UnsupportedFeatureError: If the easing has no static CSS equivalent
    """
    func = ensure_non_function_based("easing", easing)
    if not isinstance(func, str):
        raise ValidationError(f"Easing must be a string, got {func!r}.")
    if func.startswith(UNSUPPORTED_EASING_PREFIXES):
        raise UnsupportedFeatureError(
            f"Easing {func!r} is not supported yet: Penner's easing functions and "
            "springs need runtime interpolation. Use CSS timing functions instead."
        )
    return _CUBIC_BEZIER.sub("cubic-bezier", func)
