"""Test setup for values2md."""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def values_yaml() -> str:
    """A small values file exercising every value shape."""
    return textwrap.dedent(
        """\
        # Settings shared by every component.
        global:
          # Prefix applied to resource names.
          name: consul
          # Number of replicas.
          replicas: 3
          # [Enterprise Only] License secret name.
          licenseSecret: ""

        # Gateways to deploy.
        gateways:
          # Gateway name.
          - name: primary
            port: 8080

        # Extra labels for every pod.
        # @type: map
        # @recurse: false
        extraLabels:
          team: platform

        # Allowed audiences.
        audiences: ["a", "b"]

        # Extra volumes.
        volumes: []
        """
    )


@pytest.fixture
def values_file(tmp_path: Path, values_yaml: str) -> Path:
    path = tmp_path / "values.yaml"
    path.write_text(values_yaml, encoding="utf-8")
    return path
