"""Option defaults, read from ~/.tapr/config.json when present."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path


@dataclass
class Config:
    """Defaults for the command-line options."""

    line_sampling: int = 100
    line_number: bool = False
    header: bool = False
    color: bool = True
    width: int | None = None


def _get_config_path() -> Path:
    config_dir = Path(os.environ.get("TAPR_CONFIG_DIR", Path.home() / ".tapr"))
    return config_dir / "config.json"


def _check_value(name: str, value: object) -> None:
    if name in ("line_number", "header", "color"):
        ok = isinstance(value, bool)
    elif name == "line_sampling":
        ok = isinstance(value, int) and not isinstance(value, bool) and value >= 0
    else:  # width
        ok = value is None or (isinstance(value, int) and not isinstance(value, bool) and value >= 1)
    if not ok:
        raise ValueError(f"invalid value for {name}: {value!r}")


def config_from_dict(data: dict) -> Config:
    """Build a Config, raising ``ValueError`` on values of the wrong type."""
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    known = {f.name for f in fields(Config)}
    values = {k: v for k, v in data.items() if k in known}
    for name, value in values.items():
        _check_value(name, value)
    return Config(**values)


def load_config() -> Config:
    config_path = _get_config_path()
    if not config_path.exists():
        return Config()
    try:
        data = json.loads(config_path.read_text())
        return config_from_dict(data)
    except Exception as e:
        print(f"Error reading config: {e}", file=sys.stderr)
        return Config()
