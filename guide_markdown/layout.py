"""Page layout for rendered guides."""

from __future__ import annotations

from html import escape
from string import Template

from .models import RenderedPage

DEFAULT_LAYOUT = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>$title</title>
</head>
<body>
<div id="header">
$header
</div>
<div id="container">
$index
<div id="mainCol">
$body
</div>
</div>
</body>
</html>
"""
)


def render_page(page: RenderedPage, layout: Template | str | None = None) -> str:
    """Place the rendered pieces into a layout.

    The layout may reference ``$title``, ``$header``, ``$index`` and ``$body``.
    The title is HTML-escaped; the other pieces are inserted as-is. A missing
    index is inserted as an empty string.

    Args:
        page: Rendered guide pieces.
        layout: Layout template or template text. Defaults to `DEFAULT_LAYOUT`.

    Returns:
        str: Complete page.

    Raises:
        KeyError: If the layout references an unknown placeholder.
    """
    if layout is None:
        layout = DEFAULT_LAYOUT
    elif isinstance(layout, str):
        layout = Template(layout)

    return layout.substitute(
        title=escape(page.title, quote=False),
        header=page.header,
        index=page.index or "",
        body=page.body,
    )
