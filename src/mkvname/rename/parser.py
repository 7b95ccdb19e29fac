"""
Module for parsing release filenames into structured media records.

Parsing is a fixed sequence of independent pattern rules. Flag rules are all
applied in order and later rules may overwrite what earlier ones set (quality
detection relies on this). Year rules stop at the first match. Truncation
rules are applied one after another, each cutting the title at its match.
"""

import re
from typing import Callable

from mkvname.rename.media import MediaFile, Quality
from mkvname.utils import MEDIA_EXTENSION, LogLevel, file_util, logger

FlagEffect = Callable[[MediaFile], None]


def _flag(attr: str, value=True) -> FlagEffect:
    def effect(media: MediaFile) -> None:
        setattr(media, attr, value)

    return effect


def _original_version(media: MediaFile) -> None:
    # "VO" only counts when the release is not multi-language
    media.vo = not media.multi


# (pattern, effect) pairs searched in the original filename, applied in order
FLAG_RULES: list[tuple[re.Pattern, FlagEffect]] = [
    (re.compile(r"multi", re.IGNORECASE), _flag("multi")),
    (re.compile(r"VO"), _original_version),
    (re.compile(r"2160p|4k", re.IGNORECASE), _flag("quality", Quality.UHD)),
    (re.compile(r"1080p", re.IGNORECASE), _flag("quality", Quality.FULL_HD)),
    (re.compile(r"720p", re.IGNORECASE), _flag("quality", Quality.HD)),
    (re.compile(r"dts", re.IGNORECASE), _flag("dts")),
    (re.compile(r"bluray", re.IGNORECASE), _flag("bluray_edition")),
    (re.compile(r"atmos", re.IGNORECASE), _flag("atmos")),
    (re.compile(r"10bit", re.IGNORECASE), _flag("hdr")),
    (re.compile(r"x265", re.IGNORECASE), _flag("h265")),
]

# Group 1 is the title part, group 2 the year; first matching rule wins
YEAR_RULES: list[re.Pattern] = [
    re.compile(r"(.*?\((\d{4})\))"),  # Title (2020)
    re.compile(r"(.*? )(\d{4}) "),  # Title 2020 1080p
]

# Each removes its first match and everything after it
TRUNCATE_RULES: list[re.Pattern] = [
    re.compile(r" \(\d*\).*", re.IGNORECASE),
    re.compile(r"2160p.*", re.IGNORECASE),
    re.compile(r"1080p.*", re.IGNORECASE),
    re.compile(r"720p.*", re.IGNORECASE),
    re.compile(r" multi .*", re.IGNORECASE),
    re.compile(r"bluray.*", re.IGNORECASE),
    re.compile(r"x264.*", re.IGNORECASE),
    re.compile(r"x265.*", re.IGNORECASE),
    re.compile(r"hevc.*", re.IGNORECASE),
    re.compile(r"ac3.*", re.IGNORECASE),
]


def detect_flags(media: MediaFile, filename: str) -> None:
    """Apply every flag rule whose pattern occurs in `filename`."""
    for pattern, effect in FLAG_RULES:
        if pattern.search(filename):
            effect(media)


def extract_title_and_year(text: str) -> tuple[str, str | None]:
    """
    Split a normalized release name into a title part and a year.

    Examples:
      "Movie Title (2020) 1080p" -> ("Movie Title (2020)", "2020")
      "Movie Title 2020 1080p" -> ("Movie Title ", "2020")
      "Movie Title 1080p" -> ("Movie Title 1080p", None)
    """
    for pattern in YEAR_RULES:
        match = pattern.search(text)
        if match:
            return match.group(1), match.group(2)
    return text, None


def truncate_title(title: str) -> str:
    """Cut release noise (resolution, codecs, language and source tags) off a title."""
    for pattern in TRUNCATE_RULES:
        title = pattern.sub("", title, count=1)
    return title


def parse_filename(filename: str) -> MediaFile:
    """
    Parse a media filename into a MediaFile.

    Never fails: a filename nothing matches yields its cleaned stem as title,
    no year and no flags.

    Example:
      "Movie.Title.2020.1080p.BluRay.x265.mkv" -> name="Movie Title", year="2020",
      quality=1080, bluray_edition=True, h265=True
    """
    media = MediaFile(original=filename)
    detect_flags(media, filename)

    name = file_util.normalize_text(file_util.strip_extension(filename, MEDIA_EXTENSION))
    name, media.year = extract_title_and_year(name)
    media.name = file_util.sanitize_filename(truncate_title(name)).strip()

    logger.log(
        "parse.file",
        LogLevel.TRACE,
        file=filename,
        name=media.name,
        year=media.year,
        quality=int(media.quality) if media.quality else None,
    )
    return media
