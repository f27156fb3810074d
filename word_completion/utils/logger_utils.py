# logger_utils.py - for logging session messages and timing metrics

import os
import time
from datetime import datetime
from typing import Optional

# Default log file, can be overridden per Log instance (or via Config "log_path")
DEFAULT_LOG_PATH = os.path.join("logs", "word_completion.log")


class Log:
    """Lightweight logger for writing session messages and tracking metrics."""

    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }
    LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

    def __init__(
        self,
        path: Optional[str] = None,
        echo: bool = False,
        use_color: bool = True,
        min_level: str = "INFO",
    ):
        self.path = path or DEFAULT_LOG_PATH
        self.echo = echo
        self.use_color = use_color
        self.min_level = min_level

    def write(self, level: str, msg: str) -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if self.LEVELS.index(level) < self.LEVELS.index(self.min_level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not self.echo:
            return
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    def debug(self, msg: str) -> None:
        self.write("DEBUG", msg)

    def info(self, msg: str) -> None:
        self.write("INFO", msg)

    def warning(self, msg: str) -> None:
        self.write("WARNING", msg)

    def error(self, msg: str) -> None:
        self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timings, counts).
        Example: [2024-05-01 12:45:02] INFO    | save_binary done: 0.012s
        """
        self.info(f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Measure execution time of a code block.
            with log.time_block("save_text"):
                save_text(path, trie)
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = time.perf_counter()

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """Record the duration unless the block raised."""
        if exc_type is None:
            dur = round(time.perf_counter() - self.start, 3)
            self.log.metric(f"{self.label} done", dur, "s")
        return False
