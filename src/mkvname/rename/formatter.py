"""
Build canonical filenames from a base title and the flags of a media file.

The tag order is fixed and never depends on the order flags were detected:

    <title> [MULTi] [DTS] [VO] [Atmos] [<quality>p( HDR)] [h265].mkv

Tags are separated by single spaces and only appear when their flag is set.

Example:
    compose("Movie Title (2020)", media) -> "Movie Title (2020) [1080p] [h265].mkv"
"""
from mkvname.rename.media import MediaFile
from mkvname.utils import MEDIA_EXTENSION, file_util


def quality_tag(media: MediaFile) -> str | None:
    """Return "[1080p]" style quality tag, "[2160p HDR]" when the file is also HDR."""
    if not media.quality:
        return None
    hdr = " HDR" if media.hdr else ""
    return f"[{int(media.quality)}p{hdr}]"


def build_tags(media: MediaFile) -> list[str]:
    """List the tags of `media` in canonical order."""
    tags = []
    if media.multi:
        tags.append("[MULTi]")
    if media.dts:
        tags.append("[DTS]")
    if media.vo:
        tags.append("[VO]")
    if media.atmos:
        tags.append("[Atmos]")
    quality = quality_tag(media)
    if quality:
        tags.append(quality)
    if media.h265:
        tags.append("[h265]")
    return tags


def compose(base_title: str, media: MediaFile) -> str:
    """
    Compose the final filename for `media` using `base_title`.

    The base title is sanitized first. An empty title is allowed and yields
    the tags and extension only.
    """
    parts = [file_util.sanitize_filename(base_title or "")] + build_tags(media)
    return " ".join(part for part in parts if part) + MEDIA_EXTENSION
