"""Parse an annotated values file into a tree of DocNodes."""

from __future__ import annotations

import yaml

from values2md.anchors import html_anchor
from values2md.annotations import extract_annotations
from values2md.exceptions import ParseError, SerializationError
from values2md.schemas import DocNode
from values2md.utils.logging_config import get_logger
from values2md.validation import validate_doc_node
from values2md.yaml_nodes import YAML_TAG_PREFIX, YamlNode, compose_document, long_tag

logger = get_logger(__name__)


def parse(yaml_str: str) -> DocNode:
    """Parse ``yaml_str`` into a validated documentation tree.

    The returned root is synthetic: it has no key and is never rendered.
    Its children are the top-level entries of the document.

    Raises:
        yaml.YAMLError: If the document is not valid YAML.
        ParseError: If the document is not a mapping or nodes cannot be paired.
        ValidationError: If a node breaks the tree invariants.
        SerializationError: If a scalar list cannot be rendered inline.
    """
    document = compose_document(yaml_str)
    if document is None:
        return DocNode(column=0)
    if document.kind != "mapping":
        raise ParseError(f"top-level document must be a mapping, got {document.kind}")

    children = parse_node_content(document.content, "", False)
    logger.debug("Parsed documentation tree", extra={"top_level_nodes": len(children)})
    return DocNode(column=0, kind_tag=document.tag, children=children)


def parse_node_content(
    node_content: list[YamlNode], parent_breadcrumb: str, parent_was_map: bool
) -> list[DocNode]:
    """Build the DocNodes for a flat key/value node sequence.

    Every node is validated against the siblings accepted before it, so a
    single failure aborts the whole parse.
    """
    if is_array_of_maps(node_content):
        return unwrap_array_of_maps(node_content, parent_breadcrumb)

    doc_nodes: list[DocNode] = []
    index = 0
    while index < len(node_content):
        key_node, value_node, index = pair_at(node_content, index, parent_breadcrumb)
        doc_node = build_doc_node(key_node, value_node, parent_breadcrumb, parent_was_map)
        validate_doc_node(doc_node, doc_nodes)
        doc_nodes.append(doc_node)
    return doc_nodes


def pair_at(
    node_content: list[YamlNode], index: int, parent_breadcrumb: str
) -> tuple[YamlNode, YamlNode, int]:
    """Return the key at ``index``, its value, and the next unconsumed index.

    Raises:
        ParseError: If no value follows the key.
    """
    key_node = node_content[index]
    if index + 1 >= len(node_content):
        raise ParseError(
            f"content length incorrect, expected at least {index + 2} nodes, got {len(node_content)}",
            parent_anchor=parent_breadcrumb,
            curr_anchor=key_node.value,
        )
    return key_node, node_content[index + 1], index + 2


def is_array_of_maps(node_content: list[YamlNode]) -> bool:
    """True for the content of a list with a single element.

    The usual case is a list holding one map; a single nested list is
    unwrapped the same way.
    """
    return len(node_content) == 1


def unwrap_array_of_maps(node_content: list[YamlNode], parent_breadcrumb: str) -> list[DocNode]:
    """Document the keys of the single map directly under the list's entry.

    For

    ```yaml
    gateways:
      - name: primary
    ```

    ``name`` becomes a child of ``gateways`` with no anonymous node for the
    map in between.
    """
    return parse_node_content(node_content[0].content, parent_breadcrumb, True)


def build_doc_node(
    key_node: YamlNode,
    value_node: YamlNode,
    parent_breadcrumb: str,
    parent_was_map: bool,
) -> DocNode:
    """Build the DocNode for one key/value pair, recursing into containers."""
    base = {
        "key": key_node.value,
        "comment": key_node.head_comment,
        "column": key_node.column,
        "parent_breadcrumb": parent_breadcrumb,
    }

    # @recurse: false documents the key alone, whatever its value holds.
    if extract_annotations(key_node.head_comment).recurse is False:
        return DocNode(**base)

    base["parent_was_map"] = parent_was_map

    anchor = html_anchor(parent_breadcrumb, key_node.value)

    if value_node.kind == "scalar":
        return DocNode(**base, kind_tag=value_node.tag, default=value_node.value)

    if value_node.kind == "mapping":
        children = parse_node_content(value_node.content, anchor, False)
        return DocNode(**base, kind_tag=value_node.tag, children=children)

    if value_node.kind == "sequence":
        if not value_node.content:
            return DocNode(**base, kind_tag=value_node.tag, default="[]")

        if all_scalars(value_node.content):
            try:
                inline = to_inline_yaml(value_node.content)
            except SerializationError as exc:
                raise SerializationError(f"{anchor}: {exc}") from exc
            return DocNode(**base, kind_tag=value_node.tag, default=inline)

        children = parse_node_content(value_node.content, anchor, False)
        return DocNode(**base, kind_tag=value_node.tag, children=children)

    raise ParseError(
        f"unsupported node kind {value_node.kind!r}",
        parent_anchor=parent_breadcrumb,
        curr_anchor=key_node.value,
    )


def all_scalars(node_content: list[YamlNode]) -> bool:
    """True if every node is a scalar with no children."""
    return all(node.is_scalar and not node.content for node in node_content)


def to_inline_yaml(elements: list[YamlNode]) -> str:
    """Render scalar elements as a flow sequence, e.g. ``["a", "b"]``.

    Quoting styles from the source are preserved.

    Raises:
        SerializationError: If PyYAML cannot emit the sequence.
    """
    sequence = yaml.SequenceNode(
        tag=YAML_TAG_PREFIX + "seq",
        value=[
            yaml.ScalarNode(tag=long_tag(element.tag), value=element.value, style=element.style)
            for element in elements
        ],
        flow_style=True,
    )
    try:
        output = yaml.serialize(
            sequence, Dumper=yaml.SafeDumper, width=float("inf"), allow_unicode=True
        )
    except yaml.YAMLError as exc:
        raise SerializationError(f"failed to render list inline: {exc}") from exc
    return output.strip()
