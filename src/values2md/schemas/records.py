"""Rendered record model."""

from __future__ import annotations

from pydantic import BaseModel


class DocRecord(BaseModel):
    """Data needed to print one documentation bullet."""

    indent: str
    key: str
    anchor: str
    kind: str | None = None
    default: str | None = None
    documentation: str | None = None
