"""Guide rendering: header, title, numbered body, and chapters index."""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from .config import GuideConfig, validate_config
from .index import build_index
from .models import Document, RenderedPage, WalkResult
from .renderer import create_markdown
from .walker import walk_document

logger = logging.getLogger(__name__)


def separator_pattern(min_length: int) -> re.Pattern[str]:
    return re.compile(rf"^-{{{min_length},}}$", re.MULTILINE)


def split_document(text: str, config: GuideConfig | None = None) -> Document:
    """Split guide text into its header block and body.

    The header is everything above the first line made only of hyphens (40 or
    more by default). Without such a line the whole text is the body.

    Examples:
        split_document("Intro\\n" + "-" * 40 + "\\n## Setup").raw_header  # "Intro"
        split_document("## Setup").raw_header  # ""
    """
    config = config or GuideConfig()
    match = separator_pattern(config.separator_min_length).search(text)
    if match is None:
        return Document(raw_header="", raw_body=text.strip())

    logger.debug("Header separator found at offset %d", match.start())
    return Document(
        raw_header=text[: match.start()].strip(),
        raw_body=text[match.end() :].strip(),
    )


def extract_title(header_html: str, config: GuideConfig | None = None) -> str:
    """Derive the page title from the first ``h2`` of the rendered header.

    Examples:
        extract_title("<h2>Getting Started</h2>")  # "Getting Started — Guides"
        extract_title("")  # "Guides"
    """
    config = config or GuideConfig()
    heading = BeautifulSoup(header_html, "html.parser").find("h2")
    if heading is None:
        return config.site_title
    return f"{heading.get_text()} — {config.site_title}"


def render_document(text: str, config: GuideConfig | None = None) -> RenderedPage:
    """Render a guide into the pieces of a page.

    Every call builds its own markdown engine, anchor registry, and section
    counters, so documents never share state.

    Args:
        text: Full guide source, optionally with a header block.
        config: Rendering configuration. Defaults to a new `GuideConfig` when
            omitted.

    Returns:
        RenderedPage: Header HTML, title, annotated body HTML, and the chapters
            index (None when the body has no chapters or sections).

    Raises:
        ConfigError: If the configuration fails validation.
        TooManyHeadingsError: If the body has more headings than allowed.

    Examples:
        page = render_document("## Setup\\n\\nInstall it.")
        page.body  # '<h3 id="setup">1 Setup</h3>\\n<p>Install it.</p>\\n'
    """
    config = config or GuideConfig()
    validate_config(config)

    document = split_document(text, config)
    markdown = create_markdown()

    header = markdown(document.raw_header)
    title = extract_title(header, config)

    body = markdown(document.raw_body)
    if body.strip():
        result = walk_document(body, config)
    else:
        result = WalkResult(html=body)

    index = build_index(result.index, markdown, config)
    return RenderedPage(header=header, title=title, body=result.html, index=index)
