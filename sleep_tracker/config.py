"""
Application configuration, stored as JSON under config/.

Missing keys fall back to DEFAULT_CONFIG, so an old or hand-edited file
never breaks startup.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from sleep_tracker.data.database import DEFAULT_DB_PATH

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "sleep_tracker.json"

DEFAULT_CONFIG = {
    "db_path": str(DEFAULT_DB_PATH),
    "log_level": "INFO",
    "log_file": "sleep_tracker.log",
}


def load_config(path: Optional[Path] = None) -> dict:
    path = path or CONFIG_PATH
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                cfg = json.load(f)
            if not isinstance(cfg, dict):
                raise KeyError("top-level value must be an object")
            # Merge with defaults for any missing keys
            merged = DEFAULT_CONFIG.copy()
            merged.update(cfg)
            return merged
        except (json.JSONDecodeError, KeyError):
            logger.warning("Bad config at %s, using defaults.", path)
    return DEFAULT_CONFIG.copy()


def save_config(config: dict, path: Optional[Path] = None) -> None:
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)
