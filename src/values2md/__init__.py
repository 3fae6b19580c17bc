"""values2md: document annotated values.yaml files as Markdown."""

from values2md.annotations import Annotations, extract_annotations
from values2md.exceptions import (
    MarkerNotFoundError,
    ParseError,
    SerializationError,
    ValidationError,
    Values2mdError,
)
from values2md.generator import GenerationOptions, generate_docs, splice_generated_docs
from values2md.parser import parse
from values2md.renderer import render_docs
from values2md.schemas import DocNode, DocRecord

__all__ = [
    "Annotations",
    "DocNode",
    "DocRecord",
    "GenerationOptions",
    "MarkerNotFoundError",
    "ParseError",
    "SerializationError",
    "ValidationError",
    "Values2mdError",
    "extract_annotations",
    "generate_docs",
    "parse",
    "render_docs",
    "splice_generated_docs",
]
