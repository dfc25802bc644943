"""YAML loader for pay-period settings files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> Any:
    """Read a UTF-8 settings file written in YAML.

    Unquoted ``startDate: 2024-01-01`` values come back as ``datetime.date``;
    the settings models accept those as well as ISO strings.

    Raises:
        yaml.YAMLError: If the document does not parse.
        UnicodeDecodeError: If the file is not UTF-8.
    """
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def dump_yaml(data: Any) -> str:
    """Serialize plain data to block-style YAML, preserving key order."""
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)
