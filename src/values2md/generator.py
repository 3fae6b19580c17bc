"""Generation pipeline for values.yaml -> Markdown reference."""

from __future__ import annotations

from dataclasses import dataclass, field

from values2md.config import (
    VALUES2MD_ANCHOR_PREFIX,
    VALUES2MD_CODEGEN_END,
    VALUES2MD_CODEGEN_START,
    VALUES2MD_SENTINEL,
    VALUES2MD_SENTINEL_REPLACEMENT,
)
from values2md.exceptions import MarkerNotFoundError
from values2md.parser import parse
from values2md.renderer import count_nodes, render_docs
from values2md.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class GenerationOptions:
    """Options for documentation generation.

    Attributes:
        anchor_prefix: Text placed between ``#`` and each node anchor.
        substitutions: Sentinel strings replaced in the final output.
        start_marker: Line opening the generated block in a reference page.
        end_marker: Line closing the generated block in a reference page.
    """

    anchor_prefix: str = VALUES2MD_ANCHOR_PREFIX
    substitutions: dict[str, str] = field(
        default_factory=lambda: {VALUES2MD_SENTINEL: VALUES2MD_SENTINEL_REPLACEMENT}
    )
    start_marker: str = VALUES2MD_CODEGEN_START
    end_marker: str = VALUES2MD_CODEGEN_END


def generate_docs(yaml_str: str, options: GenerationOptions | None = None) -> str:
    """Parse an annotated values file and render its markdown reference.

    Args:
        yaml_str: Contents of the values file.
        options: Rendering options. Uses defaults if None.

    Returns:
        The rendered bullets joined by blank lines.

    Raises:
        yaml.YAMLError: If the input is not valid YAML.
        Values2mdError: If the documentation tree cannot be built.
    """
    opts = options or GenerationOptions()
    tree = parse(yaml_str)
    logger.info("Generated documentation", extra={"nodes": count_nodes(tree.children)})
    return render_docs(tree, anchor_prefix=opts.anchor_prefix, substitutions=opts.substitutions)


def splice_generated_docs(
    document: str,
    generated: str,
    *,
    start_marker: str = VALUES2MD_CODEGEN_START,
    end_marker: str = VALUES2MD_CODEGEN_END,
) -> str:
    """Replace the text between the codegen markers of ``document``.

    The markers themselves are kept and the generated block is separated from
    them by blank lines.

    Raises:
        MarkerNotFoundError: If either marker is missing or they are out of order.
    """
    start = document.find(start_marker)
    if start == -1:
        raise MarkerNotFoundError(f"start marker {start_marker!r} not found")
    end = document.find(end_marker, start + len(start_marker))
    if end == -1:
        raise MarkerNotFoundError(f"end marker {end_marker!r} not found after {start_marker!r}")

    head = document[: start + len(start_marker)]
    tail = document[end:]
    return f"{head}\n\n{generated.strip()}\n\n{tail}"
