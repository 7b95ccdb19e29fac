"""
File renaming functionality for Matroska movie files.

This package contains utilities to parse release filenames, pick the best title
among search candidates, compose canonical filenames, review the proposals and
rename the files of a folder in one batch.

Package organization:
- media: The MediaFile record and the Quality tiers.
- parser: Ordered filename rules extracting title, year and release flags.
- resolver: Candidate selection (earliest result containing the year, else first).
- formatter: Canonical filename composition with a fixed tag order.
- review: Accept / choose / manual / skip decisions, console and automatic reviewers.
- report: The RunReport progress and outcome sink.
- batch: High-level pipeline from folder listing to renaming.

Public API (top-level exports)
- `parse_filename`: Parse a filename into a MediaFile.
- `resolve_best_match`: Automatically proposed filename, or None without candidates.
- `compose_with_base`: Filename for an explicitly chosen base title.
- `compose`: Canonical filename from a base title and a MediaFile.
- `run`: Full batch pipeline on a folder.

Example:
    from mkvname.rename import parse_filename, resolve_best_match
    media = parse_filename("Movie.Title.2020.1080p.BluRay.x265.mkv")
    media.results = ["Another Movie (2019)", "Movie Title (2020)"]
    resolve_best_match(media)  # "Movie Title (2020) [1080p] [h265].mkv"
"""
from .media import MediaFile, Quality
from .parser import parse_filename
from .resolver import compose_with_base, resolve_best_match, select_candidate
from .formatter import compose
from .review import AutoReviewer, ConsoleReviewer, ReviewDecision, ReviewOutcome, review_file
from .report import RunReport
from .batch import run

__all__ = [
    "MediaFile",
    "Quality",
    "parse_filename",
    "select_candidate",
    "resolve_best_match",
    "compose_with_base",
    "compose",
    "AutoReviewer",
    "ConsoleReviewer",
    "ReviewDecision",
    "ReviewOutcome",
    "review_file",
    "RunReport",
    "run",
]
