"""
A module providing constants, utility functions, and logging mechanisms
for media renaming tasks.

This module includes the configuration constants read from the environment,
filename sanitizing and directory listing helpers, the TMDb search client and
a structured logging mechanism that plays well with progress bars.
"""

from .constants import (
    FORBIDDEN_CHARS,
    MANUAL_CHOICE,
    MEDIA_EXTENSION,
    REQUEST_TIMEOUT,
    SKIP_CHOICE,
    STATUS_DRY_RUN,
    STATUS_FAILED,
    STATUS_RENAMED,
    STATUS_SKIPPED,
    TMDB_API_KEY,
    TMDB_BASE_URL,
    TMDB_LANGUAGE,
    WORKERS,
)
from .logger import LogLevel

__all__ = [
    "FORBIDDEN_CHARS",
    "MANUAL_CHOICE",
    "MEDIA_EXTENSION",
    "REQUEST_TIMEOUT",
    "SKIP_CHOICE",
    "STATUS_DRY_RUN",
    "STATUS_FAILED",
    "STATUS_RENAMED",
    "STATUS_SKIPPED",
    "TMDB_API_KEY",
    "TMDB_BASE_URL",
    "TMDB_LANGUAGE",
    "WORKERS",
    "LogLevel",
]
