"""Local configuration for lecturenotes."""

from __future__ import annotations

import os


DEFAULT_ENCODING = "utf-8"
DEFAULT_GLOB = "*.md"
DEFAULT_MAX_FILE_BYTES = 1_000_000
DEFAULT_LOG_LEVEL = "WARNING"

# Heading level of the first section of every document.
TITLE_LEVEL = 1
MAX_HEADING_LEVEL = 6

LECTURENOTES_ENCODING = os.getenv("LECTURENOTES_ENCODING", DEFAULT_ENCODING)
LECTURENOTES_GLOB = os.getenv("LECTURENOTES_GLOB", DEFAULT_GLOB)
LECTURENOTES_MAX_FILE_BYTES = int(os.getenv("LECTURENOTES_MAX_FILE_BYTES", str(DEFAULT_MAX_FILE_BYTES)))
LECTURENOTES_LOG_LEVEL = os.getenv("LECTURENOTES_LOG_LEVEL", DEFAULT_LOG_LEVEL)
