"""Documentation tree model."""

from __future__ import annotations

from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field

from values2md.anchors import html_anchor
from values2md.annotations import Annotations, extract_annotations, strip_comment
from values2md.yaml_nodes import MAP_TAG, STR_TAG

_KIND_NAMES = {
    "!!str": "string",
    "!!int": "integer",
    "!!float": "float",
    "!!bool": "boolean",
    "!!map": "map",
    "!!seq": "array",
    "!!null": "null",
}


class DocNode(BaseModel):
    """One documented configuration entry.

    Attributes:
        key: Key as written in the values file.
        comment: Raw head comment, directives included.
        kind_tag: Short YAML tag of the value, None when expansion was stopped.
        default: Default text; None for containers and stopped nodes.
        column: 1-based source column of the key.
        parent_breadcrumb: Anchor of the nearest mapping or sequence ancestor.
        parent_was_map: True when the key belongs to an unwrapped array of maps.
        children: Child entries in document order.
    """

    model_config = ConfigDict(frozen=True)

    key: str = ""
    comment: str = ""
    kind_tag: str | None = None
    default: str | None = None
    column: int = Field(0, ge=0)
    parent_breadcrumb: str = ""
    parent_was_map: bool = False
    children: list["DocNode"] = Field(default_factory=list)

    @cached_property
    def annotations(self) -> Annotations:
        return extract_annotations(self.comment)

    @property
    def recursion_stopped(self) -> bool:
        return self.annotations.recurse is False

    @property
    def html_anchor(self) -> str:
        return html_anchor(self.parent_breadcrumb, self.key)

    @property
    def is_container(self) -> bool:
        """True for entries rendered without a kind/default parenthetical."""
        return bool(self.children) or self.formatted_kind == "map"

    @property
    def leading_indent(self) -> str:
        # Keys of an unwrapped array of maps sit two columns right of "- ".
        indent = self.column - 1
        if self.parent_was_map:
            indent -= 2
        return " " * max(indent, 0)

    @property
    def formatted_kind(self) -> str:
        override = self.annotations.type
        if override is not None:
            return override
        if not self.kind_tag:
            return ""
        return _KIND_NAMES.get(self.kind_tag, self.kind_tag)

    @property
    def formatted_default(self) -> str:
        override = self.annotations.default
        if override is not None:
            return override
        if self.default is None or self.is_container:
            return ""
        if self.default == "" and self.kind_tag == STR_TAG:
            return '""'
        return self.default

    @property
    def formatted_documentation(self) -> str:
        """Documentation text with continuation lines aligned under the bullet."""
        doc = strip_comment(self.comment).strip()
        if not doc:
            return ""
        continuation = " " * (len(self.leading_indent) + 2)
        lines = doc.splitlines()
        rest = [continuation + line.rstrip() if line.strip() else "" for line in lines[1:]]
        return "\n".join([lines[0].rstrip(), *rest])

    @property
    def is_map(self) -> bool:
        return self.kind_tag == MAP_TAG
