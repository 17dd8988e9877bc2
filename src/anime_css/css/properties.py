"""Property name and value rendering."""

import re

from .._shared import format_number
from .tree import ScalarValue

_UPPERCASE = re.compile(r"([A-Z])")


def normalize_property_name(name: str) -> str:
    """
    Convert snake_case and camelCase names to CSS kebab-case.

    Every capital starts a new word, so ``WebkitTransform`` gives
    ``-webkit-transform`` and ``fontSizeXL`` gives ``font-size-x-l``. Already
    hyphenated names pass through unchanged.
    """
    name = name.replace("_", "-")
    return _UPPERCASE.sub(r"-\1", name).lower()


def format_value(value: ScalarValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def escape_comment(text: str) -> str:
    # A literal "*/" would terminate the comment early.
    return text.replace("*/", "* /")
