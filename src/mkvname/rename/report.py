"""Progress and outcome sink shared by the steps of one renaming run."""
import threading
from dataclasses import dataclass, field

from mkvname.utils import STATUS_DRY_RUN, STATUS_FAILED, STATUS_RENAMED, STATUS_SKIPPED, LogLevel, logger


@dataclass
class RunReport:
    """
    Append-only record of a run.

    A single instance is passed to every pipeline step. Search progress is
    counted here (safe to call from worker threads) and every per-file outcome
    is appended to `entries` as (status, original, detail) and logged.
    """

    total: int = 0
    searched: int = 0
    entries: list[tuple[str, str, str | None]] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def note(self, event: str, level: LogLevel = LogLevel.INFO, **fields) -> None:
        logger.log(event, level, **fields)

    def advance_search(self) -> int:
        with self._lock:
            self.searched += 1
            return self.searched

    def record(self, status: str, original: str, detail: str | None = None) -> None:
        with self._lock:
            self.entries.append((status, original, detail))

    def renamed(self, original: str, new_name: str) -> None:
        self.record(STATUS_RENAMED, original, new_name)
        self.note("rename.applied", file=original, new_name=new_name)

    def dry_run(self, original: str, new_name: str) -> None:
        self.record(STATUS_DRY_RUN, original, new_name)
        self.note("rename.dry_run", file=original, new_name=new_name)

    def skipped(self, original: str) -> None:
        self.record(STATUS_SKIPPED, original)
        self.note("rename.skipped", LogLevel.DEBUG, file=original)

    def failed(self, original: str, error: str) -> None:
        self.record(STATUS_FAILED, original, error)
        self.note("rename.failed", LogLevel.ERROR, file=original, error=error)

    def count(self, status: str) -> int:
        return sum(1 for entry in self.entries if entry[0] == status)

    def summary(self) -> dict[str, int]:
        return {
            "total": self.total,
            "searched": self.searched,
            "renamed": self.count(STATUS_RENAMED),
            "dry_run": self.count(STATUS_DRY_RUN),
            "skipped": self.count(STATUS_SKIPPED),
            "failed": self.count(STATUS_FAILED),
        }
