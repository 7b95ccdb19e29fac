"""
A media renaming module for Matroska movie files.

This module turns loosely-structured release filenames such as
"Movie.Title.2020.1080p.BluRay.x265.mkv" into clean, consistent names such as
"Movie Title (2020) [1080p] [h265].mkv". It parses the filename, searches a
title index (TMDb) for the canonical title, picks the best candidate and lets a
human confirm or override the choice before renaming.

The module is organized into several categories:
- Parsing filenames into structured media records.
- Resolving search candidates and composing canonical filenames.
- Interactive review of proposed names.
- Utility functions for configuration, logging, TMDb lookup and file handling.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
