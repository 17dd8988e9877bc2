"""Tagged CSS tree nodes: blocks, declarations and comments."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from ..constants import COMMENT_KEY

ScalarValue = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class Declaration:
    value: ScalarValue

    @property
    def is_blank(self) -> bool:
        """Blank declarations are no-ops and never reach the output."""
        return self.value is None or self.value == ""


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class Block:
    """A selector, at-rule or keyframe stop body."""

    entries: tuple[tuple[str, "CssNode"], ...] = ()

    def has_content(self) -> bool:
        return any(
            not (isinstance(node, Declaration) and node.is_blank)
            for _, node in self.entries
        )


CssNode = Union[Block, Declaration, Comment]


def css_tree(styles: Mapping[str, Any]) -> Block:
    """
    Build a tagged tree from nested mappings.

    Mapping values become blocks, the reserved ``"//"`` key becomes a comment
    and everything else a declaration.
    """
    return Block(tuple((key, _node(key, value)) for key, value in styles.items()))


def _node(key: str, value: Any) -> CssNode:
    if isinstance(value, (Block, Declaration, Comment)):
        return value
    if isinstance(value, Mapping):
        return css_tree(value)
    if key == COMMENT_KEY:
        return Comment(str(value))
    return Declaration(value)
