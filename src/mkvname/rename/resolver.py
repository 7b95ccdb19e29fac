"""
Pick the best search candidate for a media file.

The ranking is a heuristic: when the file has a year, the first candidate
whose text contains that year wins, even if a later one matches too.
Otherwise, or when no candidate contains the year, the first candidate wins
since the title index already orders results by relevance.
"""

from mkvname.rename import formatter
from mkvname.rename.media import MediaFile
from mkvname.utils import LogLevel, logger


def select_candidate(media: MediaFile) -> str | None:
    """Return the preferred candidate title of `media`, or None without results."""
    if not media.results:
        return None

    if media.year:
        for candidate in media.results:
            # Substring containment, not equality: "2020" matches "Title (2020)"
            if media.year in candidate:
                return candidate
        logger.log("resolve.no_year_match", LogLevel.DEBUG, file=media.original, year=media.year)

    return media.results[0]


def resolve_best_match(media: MediaFile) -> str | None:
    """
    Compose the automatically proposed filename for `media`.

    Returns None when there is no candidate at all, meaning a human has to
    pick a name or skip the file.
    """
    candidate = select_candidate(media)
    if candidate is None:
        return None
    return formatter.compose(candidate, media)


def compose_with_base(media: MediaFile, base_title: str | None) -> str | None:
    """
    Compose the filename for an explicitly chosen base title.

    `base_title` is a candidate picked by the user or a manual entry. None
    stands for "do not rename" and yields None; candidates are not required.
    """
    if base_title is None:
        return None
    return formatter.compose(base_title, media)
