"""Validation of documentation nodes before they join the tree."""

from __future__ import annotations

from typing import Iterable

from values2md.exceptions import ValidationError
from values2md.schemas import DocNode


def validate_doc_node(node: DocNode, siblings: Iterable[DocNode] = ()) -> None:
    """Check ``node`` against its shape rules and already accepted siblings.

    Raises:
        ValidationError: On the first violated rule.
    """
    anchor = node.html_anchor

    if node.recursion_stopped:
        if node.kind_tag is not None or node.default is not None or node.children:
            raise ValidationError(
                "node with @recurse: false must not carry a kind, default or children",
                anchor=anchor,
            )
    else:
        if not node.key:
            raise ValidationError(
                "key must not be empty; add '@recurse: false' to document "
                "sequences of maps as a single entry",
                anchor=anchor,
            )
        if not node.kind_tag:
            raise ValidationError("kind tag must be set", anchor=anchor)
        if node.children and node.default is not None:
            raise ValidationError(
                f"container node must not carry a default, got {node.default!r}",
                anchor=anchor,
            )
        if node.is_map and node.default is not None:
            raise ValidationError("map node must not carry a default", anchor=anchor)

    for sibling in siblings:
        if sibling.html_anchor == anchor:
            raise ValidationError(
                f"keys {sibling.key!r} and {node.key!r} resolve to the same anchor",
                anchor=anchor,
            )
