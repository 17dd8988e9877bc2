"""Rendering of CSS trees into raw (unformatted) CSS text."""

from ..constants import FILTER_FUNCTIONS, TRANSFORM_FUNCTIONS
from .properties import escape_comment, format_value, normalize_property_name
from .tree import Block, Comment, CssNode, Declaration

Entry = tuple[str, CssNode]
FunctionEntry = tuple[str, Declaration]


def partition_shorthands(
    entries: tuple[Entry, ...],
) -> tuple[list[FunctionEntry], list[FunctionEntry], list[Entry]]:
    """Split entries into (transform functions, filter functions, everything else)."""
    transforms: list[FunctionEntry] = []
    filters: list[FunctionEntry] = []
    remaining: list[Entry] = []
    for key, node in entries:
        if isinstance(node, Declaration) and key in TRANSFORM_FUNCTIONS:
            transforms.append((key, node))
        elif isinstance(node, Declaration) and key in FILTER_FUNCTIONS:
            filters.append((key, node))
        else:
            remaining.append((key, node))
    return transforms, filters, remaining


def shorthand_value(functions: list[FunctionEntry], explicit: Declaration | None = None) -> str:
    """Join function entries as ``name(value) `` terms, after any explicit value."""
    value = ""
    if explicit is not None and not explicit.is_blank:
        value = f"{format_value(explicit.value)} "
    for key, node in functions:
        if not node.is_blank:
            value += f"{key}({format_value(node.value)}) "
    return value


def render_block(block: Block) -> str:
    """Render a block's entries; shorthand declarations follow the other entries."""
    transforms, filters, remaining = partition_shorthands(block.entries)
    explicit = {
        key: node
        for key, node in remaining
        if key in ("transform", "filter") and isinstance(node, Declaration)
    }
    entries: list[Entry] = [
        (key, node) for key, node in remaining if key not in explicit
    ]
    entries.append(
        ("transform", Declaration(shorthand_value(transforms, explicit.get("transform"))))
    )
    entries.append(
        ("filter", Declaration(shorthand_value(filters, explicit.get("filter"))))
    )
    return "".join(render_entry(key, node) for key, node in entries)


def render_entry(key: str, node: CssNode) -> str:
    if isinstance(node, Block):
        if not node.has_content():
            return ""
        return f"{key} {{\n{render_block(node)}}}\n"
    if isinstance(node, Comment):
        return f"/* {escape_comment(node.text)} */\n"
    if node.is_blank:
        return ""
    return f"{normalize_property_name(key)}: {format_value(node.value)};\n"
