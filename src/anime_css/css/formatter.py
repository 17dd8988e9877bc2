"""Pretty printer for raw CSS text.

Only layout changes: one declaration per line, nested blocks indented, a
blank line after every closed block. Selectors, property names and values
are re-serialized token by token, so their text is preserved. String tokens
keep the quotes they were written with.
"""

import re
from typing import Any

import tinycss2

from ..constants import DEFAULT_INDENT
from ..errors import ParseError

_NEWLINES = re.compile(r"\r\n|[\r\f]")
_NESTED_TOKENS = {"function": "arguments", "() block": "content", "[] block": "content"}


def beautify(raw_css: str, indent: str = DEFAULT_INDENT) -> str:
    # Same newline normalisation as the tokenizer, so token columns index this text.
    source = _NEWLINES.sub("\n", raw_css)
    lines = _layout(_parse(source), _Source(source), indent, depth=0)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


class _Source:
    """Original text of the parsed CSS, addressed by tinycss2 line/column."""

    def __init__(self, text: str):
        self.text = text
        self.line_starts = [0] + [match.end() for match in re.finditer("\n", text)]

    def quoted_string_at(self, line: int, column: int) -> str:
        start = self.line_starts[line - 1] + column - 1
        quote = self.text[start]
        end = start + 1
        while end < len(self.text) and self.text[end] != quote:
            end += 2 if self.text[end] == "\\" else 1
        return self.text[start:end + 1]

    def restore_quotes(self, tokens: list[Any]) -> list[Any]:
        for token in tokens:
            if token.type == "string":
                token.representation = self.quoted_string_at(
                    token.source_line, token.source_column
                )
            elif token.type in _NESTED_TOKENS:
                self.restore_quotes(getattr(token, _NESTED_TOKENS[token.type]))
        return tokens


def _parse(content: Any) -> list[Any]:
    return tinycss2.parse_blocks_contents(
        content, skip_comments=False, skip_whitespace=True
    )


def _layout(nodes: list[Any], source: _Source, indent: str, depth: int) -> list[str]:
    pad = indent * depth
    lines: list[str] = []
    after_block = False
    for node in nodes:
        if node.type == "error":
            raise ParseError(f"Cannot format invalid CSS: {node.message}")
        if after_block:
            lines.append("")
        after_block = False

        if node.type == "comment":
            lines.append(f"{pad}/*{node.value}*/")
        elif node.type == "declaration":
            lines.append(f"{pad}{_declaration(node, source)}")
        elif node.content is None:
            lines.append(f"{pad}{_rule_header(node, source)};")
        else:
            lines.append(f"{pad}{_rule_header(node, source)} {{")
            lines.extend(_layout(_parse(node.content), source, indent, depth + 1))
            lines.append(f"{pad}}}")
            after_block = True
    return lines


def _declaration(node: Any, source: _Source) -> str:
    value = tinycss2.serialize(source.restore_quotes(node.value)).strip()
    important = " !important" if node.important else ""
    return f"{node.name}: {value}{important};"


def _rule_header(node: Any, source: _Source) -> str:
    prelude = tinycss2.serialize(source.restore_quotes(node.prelude)).strip()
    if node.type == "at-rule":
        return f"@{node.at_keyword} {prelude}".rstrip()
    return prelude
