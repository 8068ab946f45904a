"""Constants used across the guide-markdown package."""

from __future__ import annotations

import re

from .config import GuideConfig

DEFAULT_CONFIG = GuideConfig()

# Section structure
MAX_SECTION_DEPTH = 4
EMPTY_SLUG_FALLBACK = "section"

# Paragraph patterns
ADMONITION_KEYWORDS = ("TIP", "IMPORTANT", "CAUTION", "WARNING", "NOTE", "INFO", "TODO")
_KEYWORDS = "|".join(ADMONITION_KEYWORDS)
ADMONITION_PATTERN = re.compile(rf"^({_KEYWORDS})[.:]", re.MULTILINE)
# Consumes a single newline at most so a following block is not swallowed.
ADMONITION_BLOCK_PATTERN = re.compile(
    rf"^({_KEYWORDS})[.:](.*?)(\n(?=\n)|\Z)", re.MULTILINE | re.DOTALL
)
ADMONITION_STYLES = {"CAUTION": "warning", "IMPORTANT": "warning", "TIP": "info"}

FOOTNOTE_DEFINITION_PATTERN = re.compile(r"^\[<sup>(\d+)\]:</sup> (.+)$", re.MULTILINE)
FOOTNOTE_REFERENCE_PATTERN = re.compile(r"\[<sup>(\d+)\]</sup>", re.IGNORECASE)

# Code block brushes
PASSTHROUGH_BRUSHES = ("ruby", "sql", "plain")
BRUSH_ALIASES = {"erb": "ruby; html-script: true", "html": "xml"}
DEFAULT_BRUSH = "plain"

# Files
MARKDOWN_EXTENSIONS = (".md", ".markdown")
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
