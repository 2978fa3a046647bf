# config_manager.py - JSON config manager

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table
from rich import box

from phrase_trie.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "default_limit": 10,  # autocomplete size when no limit is given
    "show_timings": False,  # print per-command latency in the CLI
    "load_demo": False,  # seed demo phrases on start
    "log_path": os.path.join("logs", "phrase_trie.log"),
    "color": True,
    "metrics_path": "",  # empty keeps command latency in memory only
}

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def _coerce(key: str, default: Any, val: Any) -> Any:
    """Convert val to the type of the default for key."""
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ConfigError(f"{key}: expected a boolean, got {val!r}")
    try:
        return type(default)(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key}: cannot convert {val!r} to {type(default).__name__}") from e


def _check(key: str, value: Any) -> Any:
    if key == "default_limit" and value <= 0:
        raise ConfigError("default_limit must be a positive integer")
    return value


class Config:
    """
    Settings with typed defaults. With a path they are loaded from / saved to
    a JSON file; without one they only live in memory.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self._load()

    def _load(self) -> None:
        if not self.path:
            return
        if not os.path.exists(self.path):
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(raw, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        for k, v in raw.items():
            if k not in DEFAULTS:
                logger.warning("config %s: ignoring unknown option %r", self.path, k)
                continue
            try:
                self.data[k] = _check(k, _coerce(k, DEFAULTS[k], v))
            except ConfigError as e:
                logger.warning("config %s: %s, keeping default %r", self.path, e, DEFAULTS[k])

    def save(self) -> None:
        if not self.path:
            return
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        if key not in self.data:
            raise ConfigError(f"No such option: {key}")
        return self.data[key]

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def set(self, key: str, val: Any) -> Any:
        if key not in self.data:
            raise ConfigError(f"No such option: {key}")
        value = _check(key, _coerce(key, DEFAULTS[key], val))
        self.data[key] = value
        self.save()
        return value

    def show(self, console: Optional[Console] = None) -> None:
        table = Table(title="Config", box=box.SIMPLE, show_edge=False)
        table.add_column("Option", style="cyan")
        table.add_column("Value", style="bold")
        for k, v in self.data.items():
            table.add_row(k, str(v))
        (console or Console()).print(table)
