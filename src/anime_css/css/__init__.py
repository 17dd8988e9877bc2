"""CSS tree construction, serialization and formatting."""

from collections.abc import Mapping
from typing import Any

from ..constants import DEFAULT_INDENT
from .formatter import beautify
from .properties import format_value, normalize_property_name
from .serializer import partition_shorthands, render_block
from .tree import Block, Comment, CssNode, Declaration, css_tree


def css(styles: Block | Mapping[str, Any], indent: str = DEFAULT_INDENT) -> str:
    """
    Serialize a CSS tree into formatted CSS text.

    Args:
        styles: A tagged tree or nested mappings (see ``css_tree``)
        indent: Indent unit used by the pretty printer

    Returns:
        Formatted CSS with transform and filter functions grouped into
        shorthand declarations and blank values elided
    """
    tree = styles if isinstance(styles, Block) else css_tree(styles)
    return beautify(render_block(tree), indent)


__all__ = [
    "Block",
    "Comment",
    "CssNode",
    "Declaration",
    "beautify",
    "css",
    "css_tree",
    "format_value",
    "normalize_property_name",
    "partition_shorthands",
    "render_block",
]
