"""Extract @type, @default and @recurse directives from key comments."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from values2md.utils.logging_config import get_logger

logger = get_logger(__name__)

# A directive owns its whole line: "# @type: map" or "@default: []".
_DIRECTIVE_RE = re.compile(r"^#?[^\S\n]*@(type|default|recurse):[^\S\n]*(.*?)[^\S\n]*$")

# One YAML comment marker with optional leading indent and a single space,
# so "# # yaml comment" inside a code fence keeps its inner marker.
_COMMENT_PREFIX_RE = re.compile(r"^[^\S\n]*#[^\S\n]?")

_FENCE = "```"


@dataclass(frozen=True)
class Annotations:
    """Override values declared in a key's head comment.

    Attributes:
        type: Replacement for the inferred kind.
        default: Replacement for the inferred default text.
        recurse: False when the value must not be expanded, True when
            expansion was requested explicitly, None when unspecified.
    """

    type: str | None = None
    default: str | None = None
    recurse: bool | None = None


def extract_annotations(comment: str) -> Annotations:
    """Return the directives found in ``comment``.

    The first occurrence of each directive wins. Lines inside fenced code
    examples are never treated as directives.
    """
    found: dict[str, str] = {}
    for line, in_fence in _iter_comment_lines(comment):
        if in_fence:
            continue
        match = _DIRECTIVE_RE.match(line.strip())
        if match and match.group(1) not in found:
            found[match.group(1)] = match.group(2)

    recurse: bool | None = None
    if "recurse" in found:
        raw = found["recurse"]
        if raw == "false":
            recurse = False
        elif raw == "true":
            recurse = True
        else:
            logger.warning("Ignoring unrecognised @recurse value %r", raw, extra={"value": raw})

    return Annotations(type=found.get("type"), default=found.get("default"), recurse=recurse)


def strip_comment(comment: str) -> str:
    """Turn a raw comment block into documentation text.

    Directive lines are dropped and each remaining line loses one comment
    marker. Fenced examples are kept verbatim apart from that marker.
    """
    kept: list[str] = []
    for line, in_fence in _iter_comment_lines(comment):
        if not in_fence and _DIRECTIVE_RE.match(line.strip()):
            continue
        kept.append(_COMMENT_PREFIX_RE.sub("", line, count=1))
    return "\n".join(kept)


def _iter_comment_lines(comment: str) -> Iterator[tuple[str, bool]]:
    """Yield each line with a flag telling whether it sits inside a code fence.

    Fence delimiter lines themselves are reported as inside the fence.
    """
    in_fence = False
    for line in comment.splitlines():
        text = _COMMENT_PREFIX_RE.sub("", line, count=1).lstrip()
        if text.startswith(_FENCE):
            yield line, True
            in_fence = not in_fence
            continue
        yield line, in_fence
