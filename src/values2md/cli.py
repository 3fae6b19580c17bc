"""Command-line entry point for values2md."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from values2md.config import VALUES2MD_ANCHOR_PREFIX, VALUES2MD_LOG_LEVEL, VALUES2MD_VALUES_PATH
from values2md.exceptions import Values2mdError
from values2md.generator import GenerationOptions, generate_docs, splice_generated_docs
from values2md.parser import parse
from values2md.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="values2md",
        description="Generate a markdown reference from an annotated values.yaml file.",
    )
    parser.add_argument(
        "values",
        nargs="?",
        default=str(VALUES2MD_VALUES_PATH),
        help=f"Path to the values file (default: {VALUES2MD_VALUES_PATH})",
    )
    parser.add_argument(
        "--output",
        help="Reference page to update in place between the codegen markers",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Only build and validate the documentation tree",
    )
    parser.add_argument(
        "--anchor-prefix",
        default=VALUES2MD_ANCHOR_PREFIX,
        help=f"Prefix placed before every anchor (default: {VALUES2MD_ANCHOR_PREFIX!r})",
    )
    parser.add_argument("--log-level", default=VALUES2MD_LOG_LEVEL, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    values_path = Path(args.values)
    if not values_path.is_file():
        logger.error("Values file not found: %s", values_path, extra={"path": str(values_path)})
        return 1
    yaml_str = values_path.read_text(encoding="utf-8-sig")

    try:
        if args.validate:
            parse(yaml_str)
            logger.info("Values file is valid: %s", values_path)
            return 0

        options = GenerationOptions(anchor_prefix=args.anchor_prefix)
        docs = generate_docs(yaml_str, options)
        if args.output:
            output_path = Path(args.output)
            if not output_path.is_file():
                logger.error("Output file not found: %s", output_path, extra={"path": str(output_path)})
                return 1
            updated = splice_generated_docs(
                output_path.read_text(encoding="utf-8"),
                docs,
                start_marker=options.start_marker,
                end_marker=options.end_marker,
            )
            output_path.write_text(updated, encoding="utf-8")
            logger.info("Updated %s", output_path)
        else:
            sys.stdout.write(docs + "\n")
    except (Values2mdError, yaml.YAMLError) as exc:
        logger.error("Failed to generate documentation: %s", exc, extra={"path": str(values_path)})
        return 1
    return 0
