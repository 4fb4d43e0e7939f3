#!/usr/bin/env python3
"""
Settings
========
Reads the packaged ``configs/app.yaml``: generator flag defaults, the
keyblock bundle, logging setup and CLI display options.

Usage:
    from d20.settings import generator_defaults, get_setting

    length = generator_defaults()["length"]
    level = get_setting("logging.level", "WARNING")
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
APP_CONFIG_PATH = PACKAGE_ROOT / "configs" / "app.yaml"

# Every generator option must have a default in app.yaml
GENERATOR_KEYS = (
    "chars", "custom", "length", "count", "mangle", "base64", "block",
    "blocksize", "keyblock", "pin", "unique", "separator",
)


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    data = yaml.safe_load(APP_CONFIG_PATH.read_text(encoding="utf-8"))
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path, e.g. ``keyblock.blocksize``."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def generator_defaults() -> dict:
    """
    Flag defaults for a generation run.

    Raises:
        ValueError: If app.yaml leaves any generator option unset
    """
    cfg = get_setting("generator", {}) or {}
    missing = [key for key in GENERATOR_KEYS if cfg.get(key) is None]
    if missing:
        raise ValueError(f"generator settings missing in app.yaml: {', '.join(missing)}")
    return {key: cfg[key] for key in GENERATOR_KEYS}


__all__ = [
    "load_app_config",
    "get_setting",
    "generator_defaults",
    "GENERATOR_KEYS",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
