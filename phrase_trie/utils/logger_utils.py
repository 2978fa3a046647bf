# logger_utils.py - for logging session messages and performance metrics, timestamps etc

from __future__ import annotations

import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO

# Directory where log files go unless a path is given explicitly
LOG_DIR = "logs"

# Path to the default log file, can be overriden (see Config "log_path")
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "phrase_trie.log")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""

    COLORS = {
        "DEBUG": "\033[90m",  # gray
        "INFO": "\033[94m",  # blue
        "WARNING": "\033[93m",  # yellow
        "ERROR": "\033[91m",  # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        use_color: bool = True,
        echo: bool = False,
        stream: TextIO = sys.stderr,
    ) -> None:
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.echo = echo
        self.stream = stream

    def write(self, level: str, msg: str) -> str:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Returns the line that was written.
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        # echo to console (color enabled etc)
        if self.echo:
            if self.use_color and level in self.COLORS:
                self.stream.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
            else:
                self.stream.write(line + "\n")
        return line

    # Public logging methods
    def debug(self, msg: str) -> str:
        return self.write("DEBUG", msg)

    def info(self, msg: str) -> str:
        return self.write("INFO", msg)

    def warning(self, msg: str) -> str:
        return self.write("WARNING", msg)

    def error(self, msg: str) -> str:
        return self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> str:
        """
        Record a metric (timing, counts...) as an INFO line.
        Example: [2026-01-01 12:45:02] INFO    | words took: 0.123ms
        """
        return self.write("INFO", f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("load_demo"):
                engine.load_demo_phrases()
        It logs how long the block took; the duration is on timer.elapsed_ms.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, log: Log, label: str) -> None:
        self.log = log
        self.label = label
        self.start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self) -> "_Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        """When leaving the 'with' block, record the duration as a metric."""
        self.elapsed_ms = round((time.perf_counter() - self.start) * 1000, 3)
        self.log.metric(f"{self.label} took", self.elapsed_ms, "ms")
