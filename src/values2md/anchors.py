"""Anchor and breadcrumb helpers."""

from __future__ import annotations

import re

_NON_ANCHOR_RE = re.compile(r"[^a-z0-9]+")


def normalize_anchor_key(key: str) -> str:
    """Normalize a key into its URL anchor form."""
    return _NON_ANCHOR_RE.sub("-", key.lower()).strip("-")


def html_anchor(parent_breadcrumb: str, key: str) -> str:
    """Derive a node's anchor from its container breadcrumb and key.

    Anchors chain with a ``-`` separator, so ``name`` under ``global`` becomes
    ``-global-name``. The rendered link adds the configured prefix in front.
    """
    return f"{parent_breadcrumb}-{normalize_anchor_key(key)}"
