"""Compose YAML into a comment-aware node tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import yaml

NodeKind = Literal["scalar", "mapping", "sequence"]

YAML_TAG_PREFIX = "tag:yaml.org,2002:"

MAP_TAG = "!!map"
STR_TAG = "!!str"


@dataclass
class YamlNode:
    """A YAML node together with the comment block written above it.

    Attributes:
        kind: Shape of the node.
        tag: Short form tag such as ``!!str`` or ``!!map``.
        value: Scalar text, empty for mappings and sequences.
        column: 1-based column of the node start.
        style: Scalar quoting style as reported by PyYAML.
        head_comment: Comment lines directly above a mapping key.
        content: Alternating key/value nodes for mappings, elements for sequences.
    """

    kind: NodeKind
    tag: str
    value: str = ""
    column: int = 1
    style: str | None = None
    head_comment: str = ""
    content: list["YamlNode"] = field(default_factory=list)

    @property
    def is_scalar(self) -> bool:
        return self.kind == "scalar"


def short_tag(tag: str | None) -> str:
    """Return ``!!name`` for core schema tags and the tag unchanged otherwise."""
    if not tag:
        return ""
    if tag.startswith(YAML_TAG_PREFIX):
        return "!!" + tag[len(YAML_TAG_PREFIX) :]
    return tag


def long_tag(tag: str) -> str:
    """Expand a short ``!!name`` tag back into its core schema form."""
    if tag.startswith("!!"):
        return YAML_TAG_PREFIX + tag[2:]
    return tag


def compose_document(text: str) -> YamlNode | None:
    """Compose a single YAML document into :class:`YamlNode` objects.

    Returns None when the document is empty. ``yaml.YAMLError`` raised by
    PyYAML for malformed input is not caught.
    """
    root = yaml.compose(text, Loader=yaml.SafeLoader)
    if root is None:
        return None
    return _convert(root, text.splitlines(), is_key=False)


def _convert(node: yaml.Node, lines: list[str], *, is_key: bool) -> YamlNode:
    column = node.start_mark.column + 1
    head_comment = _head_comment(lines, node) if is_key else ""
    tag = short_tag(node.tag)

    if isinstance(node, yaml.ScalarNode):
        return YamlNode(
            kind="scalar",
            tag=tag,
            value=node.value,
            column=column,
            style=node.style,
            head_comment=head_comment,
        )

    if isinstance(node, yaml.MappingNode):
        content: list[YamlNode] = []
        for key_node, value_node in node.value:
            content.append(_convert(key_node, lines, is_key=True))
            content.append(_convert(value_node, lines, is_key=False))
        return YamlNode(
            kind="mapping",
            tag=tag,
            column=column,
            head_comment=head_comment,
            content=content,
        )

    return YamlNode(
        kind="sequence",
        tag=tag,
        column=column,
        head_comment=head_comment,
        content=[_convert(item, lines, is_key=False) for item in node.value],
    )


def _head_comment(lines: list[str], node: yaml.Node) -> str:
    """Collect the comment block immediately above ``node``.

    Only nodes that open their line qualify; sequence indicators may precede
    them. The scan stops at a blank line, a non-comment line, or a comment
    indented deeper than the node.
    """
    line_index = node.start_mark.line
    column = node.start_mark.column
    if line_index >= len(lines):
        return ""
    if lines[line_index][:column].replace("-", " ").strip():
        return ""

    block: list[str] = []
    for raw in reversed(lines[:line_index]):
        stripped = raw.strip()
        if not stripped.startswith("#"):
            break
        if len(raw) - len(raw.lstrip()) > column:
            break
        block.append(stripped)
    block.reverse()
    return "\n".join(block)
