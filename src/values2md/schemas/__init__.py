"""Shared schemas for values2md."""

from values2md.schemas.doc_node import DocNode
from values2md.schemas.records import DocRecord

__all__ = ["DocNode", "DocRecord"]
