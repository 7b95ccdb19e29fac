#!/usr/bin/env python3
"""
mkvnamer: rename Matroska movie files after their canonical title.

Lists the .mkv files of a folder, guesses each title from its filename,
searches TMDb for candidates, proposes "Title (Year) [tags].mkv" names for
review and renames the files that were accepted.
"""

import argparse
import os
import sys
import time
from pathlib import Path

import mkvname as mkvname_module
from mkvname import rename
from mkvname.utils import WORKERS, LogLevel, logger
from mkvname.utils.tmdb import TMDbClient, TMDbError, safe_search


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rename .mkv movie files after their canonical title and release tags. "
                    "Uses the TMDb API (TMDB_API_KEY) to look up titles.",
        epilog="Example: mkvnamer ~/Downloads/Movies --dry-run",
    )
    parser.add_argument("root", nargs="?", default=".", help="Folder containing the .mkv files (default: current folder)")
    parser.add_argument("--dry-run", action="store_true", help="Show the renames without applying them")
    parser.add_argument("--yes", action="store_true", help="Accept every automatic match without prompting")
    parser.add_argument("--workers", type=int, default=WORKERS, help=f"Concurrent title searches (default: {WORKERS})")
    parser.add_argument("--sequential", action="store_true", help="Search titles one file at a time")
    parser.add_argument("--log-level", default="info", help="trace, debug, info, warn or error (default: info)")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {mkvname_module.__version__}")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = LogLevel.DEBUG if args.debug else logger.parse_log_level(args.log_level)
    except ValueError as e:
        parser.error(str(e))
    logger.set_log_level(level)

    root = Path(args.root).expanduser()
    if not root.is_dir():
        logger.safe_print(f"❌ Folder {root} does not exist", file=sys.stderr)
        return 1

    try:
        client = TMDbClient()
    except TMDbError as e:
        logger.safe_print(f"❌ {e}", file=sys.stderr)
        return 2

    start_time = time.time()
    logger.log("mkvnamer.start", LogLevel.INFO, pid=os.getpid(), root=str(root), dry_run=args.dry_run)

    reviewer = rename.AutoReviewer() if args.yes else rename.ConsoleReviewer()
    report = rename.RunReport()
    try:
        rename.run(
            root,
            safe_search(client),
            reviewer,
            report,
            workers=args.workers,
            sequential=args.sequential,
            dry_run=args.dry_run,
        )
    except (KeyboardInterrupt, EOFError):
        logger.safe_print("\n❌ Rename canceled.")
        return 130

    if not report.total:
        logger.safe_print("⚠️ No files to process!")
        return 0

    runtime_seconds = int(time.time() - start_time)
    runtime_str = f"{runtime_seconds // 3600:02d}:{(runtime_seconds % 3600) // 60:02d}:{runtime_seconds % 60:02d}"
    logger.log("mkvnamer.end", LogLevel.INFO, runtime=runtime_str, **report.summary())

    if args.dry_run:
        logger.safe_print("\n🧪 Dry-run mode: no changes were made.")
    else:
        logger.safe_print("\n🎉 Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
