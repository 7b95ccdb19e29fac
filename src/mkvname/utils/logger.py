"""
Provides structured logging with thread-safety and log levels.

Every line carries a UTC timestamp, the level, an event name and key=value
pairs, which keeps the output grep-able. Lines are written through
`tqdm.write` so they never tear through an active progress bar.
"""
import threading
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from tqdm import tqdm

_print_lock = threading.Lock()
_separator = " | "


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_current_level = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the current log level."""
    global _current_level
    _current_level = level


def get_log_level() -> LogLevel:
    """Get the current log level."""
    return _current_level


def parse_log_level(name: str) -> LogLevel:
    """
    Resolve a level name such as "debug" or "WARN" to a LogLevel.

    "WARNING" is accepted as an alias of WARN. Raises ValueError for unknown names.
    """
    key = name.strip().upper()
    if key == "WARNING":
        key = "WARN"
    try:
        return LogLevel[key]
    except KeyError:
        choices = ", ".join(level.name.lower() for level in LogLevel)
        raise ValueError(f"unknown log level '{name}' (expected one of: {choices})") from None


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, str):
        # Keep entries on a single line
        escaped = value.replace("\r", "\\r").replace("\n", "\\n").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


def _format_kv(data: Dict[str, Any]) -> str:
    """Format key-value pairs for logging."""
    return _separator.join(f"{key}={_format_value(value)}" for key, value in data.items())


def _should_log(level: LogLevel) -> bool:
    """Check if a message at the given level should be logged."""
    return level.value >= _current_level.value


def get_worker_id() -> str:
    """
    Short identifier of the calling thread.

    Executor threads are named "<prefix>_<n>" with n starting at 0, so they map
    to w1, w2, ... The main thread is "main"; other threads keep their name.
    """
    thread = threading.current_thread()
    if thread is threading.main_thread():
        return "main"
    prefix, _, index = thread.name.rpartition("_")
    if prefix and index.isdigit():
        return f"w{int(index) + 1}"
    return thread.name


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Structured logging function.

    Args:
        event: Event name (e.g., 'search.results', 'rename.failed')
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
        **kwargs: Key-value pairs to log
    """
    if not _should_log(level):
        return

    if "worker" not in kwargs:
        kwargs["worker"] = get_worker_id()

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    line = _separator.join([timestamp, f"[{level.name}]", event])
    if kwargs:
        line = f"{line}{_separator}{_format_kv(kwargs)}"

    with _print_lock:
        tqdm.write(line)


def safe_print(*args, **kwargs) -> None:
    """Thread-safe console output for user-facing messages."""
    with _print_lock:
        tqdm.write(" ".join(str(arg) for arg in args), **kwargs)
