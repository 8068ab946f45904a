"""Markdown to HTML rendering with guide-specific block rules."""

from __future__ import annotations

import html
import re
from collections.abc import Callable

import mistune

from .constants import (
    ADMONITION_BLOCK_PATTERN,
    ADMONITION_PATTERN,
    ADMONITION_STYLES,
    BRUSH_ALIASES,
    DEFAULT_BRUSH,
    FOOTNOTE_DEFINITION_PATTERN,
    FOOTNOTE_REFERENCE_PATTERN,
    PASSTHROUGH_BRUSHES,
)

# A run of * or _ with a letter or digit on both sides, as in foo*bar*baz.
INTRAWORD_EMPHASIS = r"(?<=[A-Za-z0-9])[*_]+(?=[A-Za-z0-9])"


def parse_intraword_emphasis(inline, m: re.Match[str], state) -> int:
    # Marked so mistune never pairs the run as an emphasis delimiter.
    state.append_token({"type": "text", "raw": m.group(0), "_emphasis": False})
    return m.end()


def no_intraword_emphasis(md: mistune.Markdown) -> None:
    """mistune plugin that keeps emphasis markers inside words literal."""
    md.inline.register(
        "intraword_emphasis",
        INTRAWORD_EMPHASIS,
        parse_intraword_emphasis,
        before="emphasis",
    )


PLUGINS = ["strikethrough", "table", "url", "superscript", no_intraword_emphasis]



def brush_for(language: str | None) -> str:
    """Return the syntax highlighter brush for a fenced code block language.

    Examples:
        brush_for("ruby")  # "ruby"
        brush_for("erb")  # "ruby; html-script: true"
        brush_for("html")  # "xml"
        brush_for("python")  # "plain"
    """
    if not language:
        return DEFAULT_BRUSH
    if language in PASSTHROUGH_BRUSHES:
        return language
    return BRUSH_ALIASES.get(language, DEFAULT_BRUSH)


def admonition_style(keyword: str) -> str:
    return ADMONITION_STYLES.get(keyword, keyword.lower())


def convert_admonitions(text: str) -> str:
    """Wrap every admonition in `text` in a styled box.

    Each keyword paragraph runs up to the next blank line or the end of the
    text. The blank line itself is left in place so that a list or paragraph
    that follows keeps its own markup.

    Examples:
        convert_admonitions("TIP: Remember this.")
        # '<div class="info"><p>Remember this.</p></div>'
    """

    def _box(match: re.Match[str]) -> str:
        style = admonition_style(match.group(1))
        return f'<div class="{style}"><p>{match.group(2).strip()}</p></div>'

    return ADMONITION_BLOCK_PATTERN.sub(_box, text)


def convert_footnote_references(text: str) -> str:
    """Turn inline ``[<sup>N]</sup>`` markers into links to footnote N."""
    return FOOTNOTE_REFERENCE_PATTERN.sub(
        lambda match: (
            f'<sup class="footnote" id="footnote-{match.group(1)}-ref">'
            f'<a href="#footnote-{match.group(1)}">{match.group(1)}</a></sup>'
        ),
        text,
    )


def _render_admonition(text: str, match: re.Match[str]) -> str:
    return convert_admonitions(text)


def _render_footnote(text: str, match: re.Match[str]) -> str:
    number, body = match.group(1), match.group(2)
    linkback = f'<a href="#footnote-{number}-ref"><sup>{number}</sup></a>'
    return f'<p class="footnote" id="footnote-{number}">{linkback} {body}</p>'


ParagraphRule = tuple[re.Pattern[str], Callable[[str, re.Match[str]], str]]

# First match wins; paragraphs matching none are plain text with footnote refs.
PARAGRAPH_RULES: list[ParagraphRule] = [
    (ADMONITION_PATTERN, _render_admonition),
    (FOOTNOTE_DEFINITION_PATTERN, _render_footnote),
]


class GuideRenderer(mistune.HTMLRenderer):
    """HTML renderer for guides.

    * Code blocks are wrapped for the client-side highlighter with a brush
      derived from the fence language.
    * Headings are shifted one level down, leaving ``h1`` and ``h2`` to the
      page chrome.
    * Paragraphs are checked against `PARAGRAPH_RULES` for admonitions and
      footnote definitions.
    """

    def __init__(self) -> None:
        super().__init__(escape=False)

    def block_code(self, code: str, info: str | None = None) -> str:
        language = info.split(None, 1)[0] if info and info.strip() else None
        return (
            '<div class="code_container">\n'
            f'<pre class="brush: {brush_for(language)}; gutter: false; toolbar: false">\n'
            f"{html.escape(code)}\n"
            "</pre>\n"
            "</div>\n"
        )

    def heading(self, text: str, level: int, **attrs) -> str:
        tag = f"h{level + 1}"
        return f"<{tag}>{text}</{tag}>\n"

    def paragraph(self, text: str) -> str:
        for pattern, transform in PARAGRAPH_RULES:
            match = pattern.search(text)
            if match:
                return transform(text, match) + "\n"
        return f"<p>{convert_footnote_references(text)}</p>\n"


def create_markdown() -> mistune.Markdown:
    """Build a markdown engine configured for guides.

    Returns a new engine on every call so renders never share state.
    """
    return mistune.create_markdown(renderer=GuideRenderer(), plugins=PLUGINS)


def render_markdown(text: str) -> str:
    """Render markdown `text` to an HTML fragment.

    Errors raised by the markdown engine propagate unchanged.

    Examples:
        render_markdown("## Setup")  # "<h3>Setup</h3>\\n"
    """
    return create_markdown()(text)
