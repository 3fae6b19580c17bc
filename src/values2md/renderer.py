"""Render a documentation tree into nested markdown bullets."""

from __future__ import annotations

from typing import Iterable, Mapping

from values2md.config import (
    VALUES2MD_ANCHOR_PREFIX,
    VALUES2MD_SENTINEL,
    VALUES2MD_SENTINEL_REPLACEMENT,
)
from values2md.schemas import DocNode, DocRecord

DEFAULT_SUBSTITUTIONS: Mapping[str, str] = {VALUES2MD_SENTINEL: VALUES2MD_SENTINEL_REPLACEMENT}


def render_docs(
    root: DocNode,
    *,
    anchor_prefix: str = VALUES2MD_ANCHOR_PREFIX,
    substitutions: Mapping[str, str] | None = None,
) -> str:
    """Render every node below ``root`` as one bullet, separated by blank lines."""
    records = build_records(root)
    text = "\n\n".join(format_record(record, anchor_prefix=anchor_prefix) for record in records)
    if substitutions is None:
        substitutions = DEFAULT_SUBSTITUTIONS
    return apply_substitutions(text, substitutions)


def build_records(root: DocNode) -> list[DocRecord]:
    """Flatten the tree pre-order into records; the root itself is skipped."""
    records: list[DocRecord] = []
    for child in root.children:
        records.extend(_records_for(child))
    return records


def count_nodes(nodes: Iterable[DocNode]) -> int:
    """Count documented entries in the tree."""
    total = 0
    for node in nodes:
        total += 1
        total += count_nodes(node.children)
    return total


def format_record(record: DocRecord, *, anchor_prefix: str = VALUES2MD_ANCHOR_PREFIX) -> str:
    """Format one record as ``- `key` ((#anchor)) (`kind: default`) - docs``."""
    line = f"{record.indent}- `{record.key}` ((#{anchor_prefix}{record.anchor}))"
    if record.kind and record.default:
        line += f" (`{record.kind}: {record.default}`)"
    elif record.kind or record.default:
        line += f" (`{record.kind or record.default}`)"
    if record.documentation:
        line += f" - {record.documentation}"
    return line


def apply_substitutions(text: str, substitutions: Mapping[str, str]) -> str:
    """Replace every occurrence of each sentinel with its markup."""
    for sentinel, replacement in substitutions.items():
        if sentinel:
            text = text.replace(sentinel, replacement)
    return text


def _records_for(node: DocNode) -> list[DocRecord]:
    records = [_to_record(node)]
    for child in node.children:
        records.extend(_records_for(child))
    return records


def _to_record(node: DocNode) -> DocRecord:
    kind = None if node.is_container else node.formatted_kind or None
    return DocRecord(
        indent=node.leading_indent,
        key=node.key,
        anchor=node.html_anchor,
        kind=kind,
        default=node.formatted_default or None,
        documentation=node.formatted_documentation or None,
    )
