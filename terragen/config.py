"""
terragen configuration loader.

Reads a JSON file (explicit path, or $TERRAGEN_CONFIG) if present,
otherwise uses sane defaults. This drives the CLI's seed, size,
persistence and ASCII preview.
"""

import copy
import json
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_ENV = "TERRAGEN_CONFIG"

DEFAULT_CONFIG = {
    "map_seed": None,
    "size": 64,
    "persistence": 0.5,
    "render": {
        "glyphs": " .:-=+*#%@",
        "colors": ["blue", "cyan", "green", "yellow", "red"],
    },
}


def _read_json(path: str, default):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.info(f"terragen config not found at {path}, using defaults.")
    except (OSError, ValueError) as e:
        logger.error(f"Error reading {path}: {e}")
    return default


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[str] = None) -> dict:
    path = path or os.environ.get(CONFIG_ENV)
    if not path:
        return copy.deepcopy(DEFAULT_CONFIG)

    data = _read_json(path, {})
    if not isinstance(data, dict):
        logger.error(f"{path} must contain a JSON object, got {type(data).__name__}")
        data = {}
    return _merge(DEFAULT_CONFIG, data)
