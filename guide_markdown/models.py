"""Data models for guide-markdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class HeadingDepth(Enum):
    """Section depth of a rendered heading tag.

    Markdown headings are shifted down one level by the renderer, so the four
    numbered section levels are ``h3`` through ``h6``. Anything else,
    including the ``h2`` page title, is ``OTHER``.

    Attributes:
        DEPTH_1: Chapter headings (``h3``).
        DEPTH_2: Section headings (``h4``).
        DEPTH_3: Subsection headings (``h5``).
        DEPTH_4: Innermost numbered headings (``h6``).
        OTHER: Any tag that is not a numbered section heading.
    """

    DEPTH_1 = 1
    DEPTH_2 = 2
    DEPTH_3 = 3
    DEPTH_4 = 4
    OTHER = 0

    @property
    def indexed(self) -> bool:
        """Whether headings at this depth appear in the chapters index."""
        return self in (HeadingDepth.DEPTH_1, HeadingDepth.DEPTH_2)


_TAG_DEPTHS = {
    "h3": HeadingDepth.DEPTH_1,
    "h4": HeadingDepth.DEPTH_2,
    "h5": HeadingDepth.DEPTH_3,
    "h6": HeadingDepth.DEPTH_4,
}


def classify_heading(tag_name: str | None) -> HeadingDepth:
    """Map an HTML tag name to its section depth.

    Examples:
        classify_heading("h4")  # HeadingDepth.DEPTH_2
        classify_heading("p")  # HeadingDepth.OTHER
    """
    if not tag_name:
        return HeadingDepth.OTHER
    return _TAG_DEPTHS.get(tag_name.lower(), HeadingDepth.OTHER)


@dataclass(frozen=True)
class Document:
    """Raw guide text split into its header block and body.

    Attributes:
        raw_header: Markdown above the separator line, stripped. Empty when the
            document has no separator.
        raw_body: Markdown below the separator line, stripped.
    """

    raw_header: str
    raw_body: str


@dataclass(frozen=True)
class IndexEntry:
    """A heading listed in the chapters index.

    Attributes:
        level: 1 for chapters, 2 for sections.
        anchor_id: Final identifier of the heading node.
        label: Inner HTML of the heading before its number was prepended.
    """

    level: int
    anchor_id: str
    label: str


@dataclass
class WalkResult:
    """Output of walking a rendered body.

    Attributes:
        html: Serialized body with ids and numbers applied.
        index: Index entries in document order.
    """

    html: str
    index: list[IndexEntry] = field(default_factory=list)


@dataclass
class RenderedPage:
    """Pieces handed to the view layer.

    Attributes:
        header: Rendered header fragment.
        title: Page title.
        body: Rendered and annotated body.
        index: Chapters index fragment, or None when there is nothing to list.
    """

    header: str
    title: str
    body: str
    index: str | None = None
