from __future__ import annotations

"""Configuration values for the roster manager.

All runtime settings are sourced from the repository root `config.yml` (or the
file named by the `ROSTER_CONFIG` environment variable). This module exposes
them as constants and loads the actual values at import time from YAML.
"""

import os
from pathlib import Path
from typing import Dict

import yaml  # type: ignore[import-not-found]


# Root paths
CONFIG_ROOT = Path(__file__).resolve().parent.parent
CONFIG_PATH = Path(os.environ.get("ROSTER_CONFIG") or CONFIG_ROOT / "config.yml").resolve()

_TEXT_ENCODINGS = ("utf-8-sig", "utf-8", "gbk")


def _load_text(path: Path) -> str:
    """Decode a config or data file, trying UTF-8 (with or without BOM) then GBK."""

    raw_bytes = path.read_bytes()
    for encoding in _TEXT_ENCODINGS:
        try:
            return raw_bytes.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise UnicodeDecodeError(
        "utf-8",
        raw_bytes,
        0,
        len(raw_bytes),
        f"Unable to decode {path.name} as any of: {', '.join(_TEXT_ENCODINGS)}",
    )


def _load_yaml(path: Path) -> Dict:
    """Read the roster settings mapping from *path*."""

    if not path.exists():
        raise FileNotFoundError(f"Roster config not found: {path} (set ROSTER_CONFIG to override)")
    data = yaml.safe_load(_load_text(path)) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a mapping of settings at the top level")
    return data


def _resolve_path(value: object, default: str) -> Path:
    """Resolve a config path relative to the directory holding the config file."""

    raw = str(value) if value else default
    path = Path(raw)
    if not path.is_absolute():
        path = CONFIG_PATH.parent / path
    return path.resolve()


# Read YAML config once
_CFG = _load_yaml(CONFIG_PATH)

# Public values exported for other modules
DATA_PATH: Path = _resolve_path(_CFG.get("data_path"), "data/roster.json")
LOAD_SAMPLE_DATA: bool = bool(_CFG.get("load_sample_data", True))

EXPORT_DIR: Path = _resolve_path(_CFG.get("export_dir"), "exports")
EXPORT_FILENAME_FORMAT: str = str(_CFG.get("export_filename_format", "roster_%Y%m%d_%H%M%S.xlsx"))

EMAIL_DOMAIN: str = str(_CFG.get("email_domain", "@u.nus.edu"))

LOG_LEVEL: str = str(_CFG.get("log_level", "INFO"))
LOG_PATH: Path = _resolve_path(_CFG.get("log_path"), "log.txt")

__all__ = [
    "CONFIG_ROOT",
    "CONFIG_PATH",
    "DATA_PATH",
    "LOAD_SAMPLE_DATA",
    "EXPORT_DIR",
    "EXPORT_FILENAME_FORMAT",
    "EMAIL_DOMAIN",
    "LOG_LEVEL",
    "LOG_PATH",
]
