"""Section numbering and anchors for a rendered guide body."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, NavigableString
from bs4.element import Tag

from .anchors import AnchorAllocator
from .config import GuideConfig
from .exceptions import TooManyHeadingsError
from .models import HeadingDepth, IndexEntry, WalkResult, classify_heading
from .numbering import SectionNumberer

logger = logging.getLogger(__name__)


def walk_document(body_html: str, config: GuideConfig | None = None) -> WalkResult:
    """Number and anchor the section headings of a rendered body.

    Only top-level elements of the fragment are inspected. Each ``h3``..``h6``
    heading receives a unique ``id`` and has its section number prepended to
    its content; chapters and sections (``h3`` and ``h4``) are collected for
    the chapters index. Other elements are left untouched.

    The hierarchy is positional: a heading of depth *d* keeps the first *d*-1
    entries of the current hierarchy and appends itself. When levels are
    missing the hierarchy is shorter than the depth, and numbers and anchors
    follow whatever it holds.

    Args:
        body_html: HTML fragment produced by the markdown renderer.
        config: Configuration providing the heading limit. Defaults to a new
            `GuideConfig` when omitted.

    Returns:
        WalkResult: Serialized body and index entries in document order.

    Raises:
        TooManyHeadingsError: If the body has more headings than
            `config.max_headings`.

    Examples:
        result = walk_document("<h3>Setup</h3><p>text</p>")
        result.html  # '<h3 id="setup">1 Setup</h3><p>text</p>'
    """
    config = config or GuideConfig()
    soup = BeautifulSoup(body_html, "html.parser")

    allocator = AnchorAllocator()
    numberer = SectionNumberer()
    hierarchy: list[Tag] = []
    collected: list[tuple[HeadingDepth, Tag, str]] = []
    heading_count = 0

    for node in list(soup.children):
        if not isinstance(node, Tag):
            continue

        depth = classify_heading(node.name)
        if depth is HeadingDepth.OTHER:
            continue

        heading_count += 1
        if heading_count > config.max_headings:
            raise TooManyHeadingsError(config.max_headings)

        hierarchy = hierarchy[: depth.value - 1] + [node]
        label = node.decode_contents()

        node["id"] = allocator.allocate(hierarchy)
        number = numberer.number_for(len(hierarchy))
        node.insert(0, NavigableString(f"{number} "))

        if depth.indexed:
            collected.append((depth, node, label))

    # Ids are read after the walk since later collisions may re-key earlier headings.
    index = [IndexEntry(depth.value, node["id"], label) for depth, node, label in collected]

    logger.debug("Numbered %d headings, %d indexed", heading_count, len(index))
    return WalkResult(html=str(soup), index=index)
