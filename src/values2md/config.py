"""Local configuration for values2md."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_VALUES_PATH = "values.yaml"
DEFAULT_ANCHOR_PREFIX = "v"
DEFAULT_SENTINEL = "[Enterprise Only]"
DEFAULT_SENTINEL_REPLACEMENT = "<EnterpriseAlert inline />"
DEFAULT_CODEGEN_START = "<!-- codegen: start -->"
DEFAULT_CODEGEN_END = "<!-- codegen: end -->"
DEFAULT_LOG_LEVEL = "INFO"

# Values file read by the CLI when no path is given.
VALUES2MD_VALUES_PATH = Path(os.getenv("VALUES2MD_VALUES_PATH", DEFAULT_VALUES_PATH)).expanduser()
VALUES2MD_ANCHOR_PREFIX = os.getenv("VALUES2MD_ANCHOR_PREFIX", DEFAULT_ANCHOR_PREFIX)
VALUES2MD_SENTINEL = os.getenv("VALUES2MD_SENTINEL", DEFAULT_SENTINEL)
VALUES2MD_SENTINEL_REPLACEMENT = os.getenv("VALUES2MD_SENTINEL_REPLACEMENT", DEFAULT_SENTINEL_REPLACEMENT)
VALUES2MD_CODEGEN_START = os.getenv("VALUES2MD_CODEGEN_START", DEFAULT_CODEGEN_START)
VALUES2MD_CODEGEN_END = os.getenv("VALUES2MD_CODEGEN_END", DEFAULT_CODEGEN_END)
VALUES2MD_LOG_LEVEL = os.getenv("VALUES2MD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
