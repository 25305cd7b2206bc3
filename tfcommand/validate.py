"""The `validate` command."""

from __future__ import annotations

import json
from typing import Any

from tfcommand.command import Command
from tfcommand.version import V0_12_0, Version, require_version


def validate_command(version: Version) -> Command:
    """Build `terraform validate -json`, which needs Terraform 0.12.0 or later.

    The command exits with 1 when the configuration is invalid; its output
    is still the JSON document to parse.
    """
    require_version(version, V0_12_0, None)
    return Command(["validate", "-no-color", "-json"])


def parse_validate_output(stdout: str | bytes) -> dict[str, Any]:
    """Parse the JSON document that `terraform validate -json` prints."""
    data = json.loads(stdout)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("validate output is not a JSON object")
    return data