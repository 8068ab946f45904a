"""
guide-markdown: numbered, indexed HTML pages from markdown guides.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    guide-markdown source/getting_started.md -o getting_started.html

Library Usage:
    from pathlib import Path
    from guide_markdown import render_document, render_page

    page = render_document(Path("source/getting_started.md").read_text())
    html = render_page(page)
"""

from .anchors import AnchorAllocator
from .config import ConfigError, GuideConfig
from .document import extract_title, render_document, split_document
from .exceptions import DocumentError, ReadFileError, TooManyHeadingsError
from .index import build_index
from .layout import render_page
from .models import Document, HeadingDepth, IndexEntry, RenderedPage, WalkResult
from .numbering import SectionNumberer
from .renderer import GuideRenderer, create_markdown, render_markdown
from .slugify import generate_slug
from .walker import walk_document

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "render_document",
    "render_markdown",
    "walk_document",
    "build_index",
    "render_page",
    # Building blocks
    "AnchorAllocator",
    "SectionNumberer",
    "GuideRenderer",
    "create_markdown",
    "generate_slug",
    "split_document",
    "extract_title",
    # Data models
    "Document",
    "HeadingDepth",
    "IndexEntry",
    "RenderedPage",
    "WalkResult",
    # Configuration
    "GuideConfig",
    # Exceptions
    "ConfigError",
    "DocumentError",
    "ReadFileError",
    "TooManyHeadingsError",
    # Version
    "__version__",
]
