"""Tests for node validation."""

from __future__ import annotations

import pytest

from values2md.exceptions import ValidationError
from values2md.schemas import DocNode
from values2md.validation import validate_doc_node


def _leaf(key: str = "name") -> DocNode:
    return DocNode(key=key, kind_tag="!!str", default="x", column=1)


class TestValidateDocNode:
    """Tests for validate_doc_node function."""

    def test_valid_leaf(self) -> None:
        validate_doc_node(_leaf())

    def test_empty_key(self) -> None:
        with pytest.raises(ValidationError, match="key must not be empty"):
            validate_doc_node(_leaf(key=""))

    def test_stopped_node_may_have_empty_key(self) -> None:
        validate_doc_node(DocNode(key="", comment="# @recurse: false", column=1))

    def test_stopped_node_must_not_carry_kind(self) -> None:
        node = DocNode(key="a", comment="# @recurse: false", kind_tag="!!map", column=1)

        with pytest.raises(ValidationError, match="@recurse: false"):
            validate_doc_node(node)

    def test_missing_kind_tag(self) -> None:
        with pytest.raises(ValidationError, match="kind tag"):
            validate_doc_node(DocNode(key="a", column=1))

    def test_container_with_default(self) -> None:
        node = DocNode(key="a", kind_tag="!!seq", default="[]", column=1, children=[_leaf()])

        with pytest.raises(ValidationError, match="container node must not carry a default"):
            validate_doc_node(node)

    def test_map_with_default(self) -> None:
        node = DocNode(key="a", kind_tag="!!map", default="{}", column=1)

        with pytest.raises(ValidationError, match="map node"):
            validate_doc_node(node)

    def test_empty_map_is_valid(self) -> None:
        validate_doc_node(DocNode(key="labels", kind_tag="!!map", column=1))

    def test_anchor_collision_with_sibling(self) -> None:
        siblings = [_leaf(key="Log Level")]

        with pytest.raises(ValidationError) as exc_info:
            validate_doc_node(_leaf(key="log_level"), siblings)

        assert exc_info.value.anchor == "-log-level"
        assert "'Log Level'" in str(exc_info.value)

    def test_distinct_siblings(self) -> None:
        validate_doc_node(_leaf(key="b"), [_leaf(key="a"), _leaf(key="c")])
