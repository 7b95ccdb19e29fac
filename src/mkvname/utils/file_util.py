"""
Filename helpers shared by the parser, the composer and the rename step.

This module contains the title sanitizer used for every string that may end up
in a filename, the cosmetic normalization applied to release names, and the
directory helpers used to enumerate and rename media files.
"""
import os
from pathlib import Path

from mkvname.utils import FORBIDDEN_CHARS, MEDIA_EXTENSION

_FORBIDDEN_TABLE = str.maketrans("", "", FORBIDDEN_CHARS)


def sanitize_filename(name: str) -> str:
    """
    Make a title safe to use as a filename.

    Colons become " -", the characters / * ? " < > | are removed and the
    result is trimmed. Sanitizing twice gives the same result as sanitizing once.

    Examples:
      "Colon: Subtitle (2001)" -> "Colon - Subtitle (2001)"
      'What? "Really"' -> "What Really"
    """
    return name.replace(":", " -").translate(_FORBIDDEN_TABLE).strip()


def normalize_text(text: str) -> str:
    """Replace dot and underscore separators with spaces and drop square brackets."""
    return text.replace(".", " ").replace("_", " ").replace("[", "").replace("]", "")


def strip_extension(filename: str, extension: str = MEDIA_EXTENSION) -> str:
    """Remove `extension` from the end of `filename` when present (case-sensitive)."""
    if extension and filename.endswith(extension):
        return filename[: -len(extension)]
    return filename


def list_media_files(root: Path, extension: str = MEDIA_EXTENSION) -> list[str]:
    """
    List the media filenames directly inside `root`, sorted by name.

    Only regular files whose name ends with `extension` are returned; the
    match is case-sensitive, so "movie.MKV" is ignored.
    """
    root = Path(root)
    return sorted(p.name for p in root.iterdir() if p.is_file() and p.name.endswith(extension))


def rename_file(root: Path, original: str, new_name: str) -> Path:
    """
    Rename `root/original` to `root/new_name` and return the new path.

    Raises:
        FileExistsError: When the target already exists.
        OSError: When the filesystem refuses the rename.
    """
    root = Path(root)
    source = root / original
    target = root / new_name
    # Case-only renames on case-insensitive filesystems resolve to the source itself
    if target.exists() and not target.samefile(source):
        raise FileExistsError(f"target already exists: {target}")
    os.rename(source, target)
    return target
