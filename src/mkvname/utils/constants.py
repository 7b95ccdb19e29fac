"""
Constants and configuration settings for media renaming.

This module contains the constants shared by the parser, the resolver and the
batch pipeline: the media file extension, TMDb API configuration, worker
count and the sentinel labels offered to the user during review. Values that
depend on the environment are read after loading a local `.env` file.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Media file extension (case-sensitive suffix match)
MEDIA_EXTENSION = ".mkv"

# Run settings
WORKERS = int(os.getenv("MKVNAME_WORKERS", "4"))

# Characters removed from titles before they are used in filenames
FORBIDDEN_CHARS = '/*?"<>|'

# TMDb API configuration
TMDB_API_KEY = os.getenv("TMDB_API_KEY")
TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_LANGUAGE = os.getenv("TMDB_LANGUAGE", "en-US")
REQUEST_TIMEOUT = 10

# Review choices
SKIP_CHOICE = ">> Do not rename"
MANUAL_CHOICE = ">> Enter a name manually"

# Rename status codes
STATUS_RENAMED = "RENAMED"
STATUS_SKIPPED = "SKIPPED"
STATUS_FAILED = "FAILED"
STATUS_DRY_RUN = "DRY-RUN"
