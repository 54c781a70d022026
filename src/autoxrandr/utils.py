"""Utility helpers: XDG paths and JSON file I/O."""

from __future__ import annotations

import json
import os
from pathlib import Path


APP_NAME = "autoxrandr"
PROFILES_FILE = "xprofile.json"


def config_dir() -> Path:
    """Return ~/.config/autoxrandr, creating it if needed."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    d = base / APP_NAME
    d.mkdir(parents=True, exist_ok=True)
    return d


def profiles_path() -> Path:
    """Return the path of the file holding every saved profile."""
    return config_dir() / PROFILES_FILE


def read_json(path: Path) -> dict | list | None:
    """Read and parse a JSON file, returning None on failure."""
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None


def write_json(path: Path, data: dict | list) -> None:
    """Write data as formatted JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
