"""Chapters index generation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from html import escape

from bs4 import BeautifulSoup

from .config import GuideConfig
from .models import IndexEntry
from .renderer import render_markdown

logger = logging.getLogger(__name__)

INDEX_INDENT = "    "


def generate_index_markdown(entries: Sequence[IndexEntry]) -> str:
    """Render index entries as a nested markdown list.

    Chapters become ordered items and sections become bullets nested under
    the preceding chapter. Sections that appear before any chapter are not
    indented.

    Examples:
        generate_index_markdown([IndexEntry(1, "setup", "Setup")])
        # "1. [Setup](#setup)\\n"
    """
    lines = []
    seen_chapter = False

    for entry in entries:
        link = f"[{entry.label}](#{entry.anchor_id})"
        if entry.level == 1:
            seen_chapter = True
            lines.append(f"1. {link}\n")
        else:
            indent = INDEX_INDENT if seen_chapter else ""
            lines.append(f"{indent}* {link}\n")

    return "".join(lines)


def build_index(
    entries: Sequence[IndexEntry],
    render: Callable[[str], str] = render_markdown,
    config: GuideConfig | None = None,
) -> str | None:
    """Build the chapters index fragment.

    Args:
        entries: Index entries in document order.
        render: Markdown renderer used for the generated list.
        config: Configuration for the surrounding markup. Defaults to a new
            `GuideConfig` when omitted.

    Returns:
        str | None: HTML fragment, or None when `entries` is empty.

    Examples:
        build_index([IndexEntry(1, "setup", "Setup")])
    """
    if not entries:
        return None

    config = config or GuideConfig()
    soup = BeautifulSoup(render(generate_index_markdown(entries)), "html.parser")
    chapters = soup.find("ol")
    if chapters is not None:
        chapters["class"] = config.index_list_class

    logger.debug("Built chapters index with %d entries", len(entries))
    return _wrap_index(str(soup), config)


def _wrap_index(index_html: str, config: GuideConfig) -> str:
    icon = f'<img src="{escape(config.index_icon)}" alt="" />' if config.index_icon else ""
    return (
        f'<div id="{escape(config.index_container_id)}">\n'
        f'  <h3 class="chapter">{icon}{escape(config.index_heading)}</h3>\n'
        f"  {index_html}\n"
        "</div>\n"
    )
