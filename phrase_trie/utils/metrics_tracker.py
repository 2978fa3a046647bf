# metrics_tracker.py - running averages per key (command latency etc)

from __future__ import annotations

import json
import logging
import os
from collections import defaultdict
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class Metrics:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.m: Dict[str, float] = defaultdict(float)
        self.n: Dict[str, int] = defaultdict(int)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                d = json.load(f)
            for k, v in d.items():
                self.m[k] = float(v["sum"])
                self.n[k] = int(v["count"])
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning("metrics %s unreadable, starting empty: %s", self.path, e)
            self.reset()

    def save(self):
        if not self.path:
            return
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.snapshot(raw=True), f, indent=2)

    def record(self, key: str, val: float) -> None:
        self.m[key] += val
        self.n[key] += 1

    def count(self, key: str) -> int:
        return self.n.get(key, 0)

    def avg(self, key: str) -> float:
        if not self.n.get(key):
            return 0.0
        return self.m[key] / self.n[key]

    def snapshot(self, raw: bool = False) -> Dict[str, Dict[str, float]]:
        if raw:
            return {k: {"sum": self.m[k], "count": self.n[k]} for k in sorted(self.n)}
        return {k: {"avg": self.avg(k), "count": self.n[k]} for k in sorted(self.n)}

    def reset(self) -> None:
        self.m.clear()
        self.n.clear()
