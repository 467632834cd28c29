# logger_utils.py - levelled log messages, metrics and block timers for the app layer

import os
import time
from datetime import datetime

# Directory where log files are stored (created on first write)
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autocorrecter.log")


class Log:
    """Lightweight logger writing to a file and, optionally, the console."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(self, path: str = None, use_color: bool = True, echo: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.echo = echo

    def _write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        _append(self.path, line)

        if not self.echo:
            return
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    def debug(self, msg: str):
        self._write("DEBUG", msg)

    def info(self, msg: str):
        self._write("INFO", msg)

    def warning(self, msg: str):
        self._write("WARNING", msg)

    def error(self, msg: str):
        self._write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timing, counts) in the log file.
        Example line: [12:45:02] suggest latency: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        _append(self.path, f"[{ts}] {tag}: {value}{unit}")

    def time_block(self, label):
        """
        Measure how long a block takes and record it as a metric:
            with log.time_block("load corpus"):
                load_corpus(...)
        """
        return _Timer(self, label)


def _append(path: str, line: str):
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


class _Timer:
    """Context manager used by Log.time_block."""
    def __init__(self, log, label):
        self.log = log
        self.label = label
        self.start = time.time()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.time() - self.start, 3)
        self.log.metric(f"{self.label} done", self.elapsed, "s")
