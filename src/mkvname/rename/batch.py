"""Batch rename pipeline for a folder of Matroska movie files.

The pipeline runs in four steps:

1. List the `.mkv` files of a folder and parse each filename.
2. Search the title index for every parsed title. Searches may run
   concurrently; all of them finish before the next step starts. A failing
   search only leaves that file without candidates.
3. Review the files one by one, in listing order, to set their final name.
4. Rename every file that received a new name. A failure is reported for
   that file and the batch continues.

All steps report into one RunReport passed in by the caller.
"""
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Iterable

from tqdm import tqdm

from mkvname.rename import parser, review
from mkvname.rename.media import MediaFile
from mkvname.rename.report import RunReport
from mkvname.utils import WORKERS, LogLevel, file_util

SearchFunc = Callable[[str], Iterable[str]]


def parse_files(names: Iterable[str]) -> list[MediaFile]:
    """Parse every filename of `names`, keeping their order."""
    return [parser.parse_filename(name) for name in names]


def _search_one(media: MediaFile, search: SearchFunc, report: RunReport) -> MediaFile:
    try:
        raw_results = list(search(media.name))
    except Exception as e:
        report.note("search.failed", LogLevel.WARN, file=media.original, query=media.name, error=str(e))
        raw_results = []

    sanitized = (file_util.sanitize_filename(result) for result in raw_results if result)
    media.results = [result for result in sanitized if result]
    report.advance_search()

    level = LogLevel.DEBUG if media.results else LogLevel.WARN
    report.note("search.results", level, file=media.original, query=media.name, count=len(media.results))
    return media


def search_files(
        files: list[MediaFile],
        search: SearchFunc,
        report: RunReport,
        workers: int = WORKERS,
        sequential: bool = False,
) -> list[MediaFile]:
    """
    Fill `results` of every file with the candidates found by `search`.

    Args:
        files: Parsed media files; their `name` is the search query.
        search: Callable returning candidate titles for a query.
        report: Run report receiving progress and warnings.
        workers: Maximum number of concurrent searches.
        sequential: Query one file after the other instead of concurrently.

    Returns:
        The same list, once every search has completed.
    """
    with tqdm(total=len(files), desc="Searching titles", unit="file") as bar:
        if sequential or workers <= 1 or len(files) <= 1:
            for media in files:
                _search_one(media, search, report)
                bar.update(1)
            return files

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="search") as executor:
            futures = [executor.submit(_search_one, media, search, report) for media in files]
            for future in as_completed(futures):
                future.result()
                bar.update(1)
    return files


def review_files(files: list[MediaFile], reviewer: review.Reviewer, report: RunReport) -> list[MediaFile]:
    """Review the files one at a time, in order, and set their `chosen_name`."""
    for media in files:
        decision = review.review_file(media, reviewer)
        review.apply_decision(media, decision)
        report.note(
            "review.done",
            LogLevel.DEBUG,
            file=media.original,
            outcome=decision.outcome.value,
        )
    return files


def rename_files(root: Path, files: list[MediaFile], report: RunReport, dry_run: bool = False) -> RunReport:
    """
    Rename every file of `files` inside `root` to its `chosen_name`.

    Files without a chosen name, or whose chosen name equals the current one,
    are skipped. With `dry_run`, renames are only reported.
    """
    root = Path(root)
    for media in files:
        if not media.chosen_name or media.chosen_name == media.original:
            report.skipped(media.original)
            continue

        if dry_run:
            report.dry_run(media.original, media.chosen_name)
            continue

        try:
            file_util.rename_file(root, media.original, media.chosen_name)
        except OSError as e:
            report.failed(media.original, str(e))
        else:
            report.renamed(media.original, media.chosen_name)
    return report


def run(
        root: Path,
        search: SearchFunc,
        reviewer: review.Reviewer,
        report: RunReport,
        workers: int = WORKERS,
        sequential: bool = False,
        dry_run: bool = False,
) -> RunReport:
    """Run the whole pipeline on `root`; returns `report` (total 0 when nothing matched)."""
    names = file_util.list_media_files(root)
    report.total = len(names)
    if not names:
        report.note("scan.empty", LogLevel.WARN, root=str(root))
        return report

    report.note("scan.done", root=str(root), files=len(names))
    files = parse_files(names)
    search_files(files, search, report, workers=workers, sequential=sequential)
    review_files(files, reviewer, report)
    return rename_files(root, files, report, dry_run=dry_run)
