# logger_utils.py - for logging messages and timing metrics with timestamps

import os
import time
from datetime import datetime
from typing import Optional

# Directory where log files are stored unless configured otherwise
LOG_DIR = "logs"
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "guesser.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """
    Lightweight class-level logger shared by every component.
    Lines look like: [YYYY-MM-DD HH:MM:SS] INFO    | [Loader] loaded 1200 words
    Configure once at start-up with Log.configure(...).
    """
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    path: Optional[str] = DEFAULT_LOG_PATH
    level: str = "INFO"
    echo: bool = False
    use_color: bool = True

    @classmethod
    def configure(
        cls,
        path: Optional[str] = None,
        level: Optional[str] = None,
        echo: Optional[bool] = None,
        use_color: Optional[bool] = None,
    ) -> None:
        """Override any of the class-level settings. path="" disables the file sink."""
        if path is not None:
            cls.path = path or None
        if level is not None:
            lvl = level.upper()
            if lvl not in LEVELS:
                raise ValueError(f"unknown log level: {level}")
            cls.level = lvl
        if echo is not None:
            cls.echo = bool(echo)
        if use_color is not None:
            cls.use_color = bool(use_color)

    @classmethod
    def write(cls, msg: str, level: str = "INFO") -> None:
        """
        Append a log message to the log file with a timestamp,
        and echo it to the console when enabled.
        """
        if LEVELS.get(level, 20) < LEVELS[cls.level]:
            return

        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if cls.path:
            folder = os.path.dirname(cls.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(cls.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        if cls.echo:
            if cls.use_color and level in cls.COLORS:
                print(f"{cls.COLORS[level]}{line}{cls.COLORS['RESET']}")
            else:
                print(line)

    # Public logging methods
    @classmethod
    def debug(cls, msg: str) -> None:
        cls.write(msg, "DEBUG")

    @classmethod
    def info(cls, msg: str) -> None:
        cls.write(msg, "INFO")

    @classmethod
    def warning(cls, msg: str) -> None:
        cls.write(msg, "WARNING")

    @classmethod
    def error(cls, msg: str) -> None:
        cls.write(msg, "ERROR")

    @classmethod
    def metric(cls, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timings, counts).
        Example: [Metric] load dictionary done: 0.412s
        """
        cls.write(f"[Metric] {tag}: {value}{unit}", "DEBUG")

    @staticmethod
    def time_block(label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
            with Log.time_block("load dictionary"):
                build_trie()
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to time a code block."""
    def __init__(self, label: str):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
