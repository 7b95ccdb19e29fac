"""Structured description of a media file inferred from its filename."""

from dataclasses import dataclass, field
from enum import IntEnum


class Quality(IntEnum):
    """Resolution tiers detected in release names; higher means higher fidelity."""
    HD = 720
    FULL_HD = 1080
    UHD = 2160


@dataclass
class MediaFile:
    """
    One media file of a batch.

    Created by the parser. The pipeline later fills `results` with the
    sanitized search candidates (in source order) and `chosen_name` with the
    final filename, or leaves `chosen_name` as None to keep the file as it is.
    """

    original: str
    name: str = ""
    year: str | None = None
    multi: bool = False
    vo: bool = False
    dts: bool = False
    atmos: bool = False
    bluray_edition: bool = False
    hdr: bool = False
    h265: bool = False
    quality: Quality | None = None
    results: list[str] = field(default_factory=list)
    chosen_name: str | None = None
