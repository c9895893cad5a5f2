"""Basic file IO helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from stylecheck.errors import ConfigError, FileUnreadable, ScanError


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path} is not valid UTF-8 (byte {exc.start})") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc.strerror or exc}") from exc


def read_source_file(path: Path) -> str:
    """Return the file contents as text.

    Raises ``FileUnreadable`` when the path is missing or cannot be opened and
    ``ScanError`` when the bytes are not UTF-8 text.
    """

    if not path.exists():
        raise FileUnreadable(path, "no such file")
    if not path.is_file():
        raise FileUnreadable(path, "not a regular file")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FileUnreadable(path, exc.strerror or str(exc)) from exc
    if b"\x00" in data:
        raise ScanError(path, "binary content")
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ScanError(path, f"not valid UTF-8 (byte {exc.start})") from exc
