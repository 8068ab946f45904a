"""Slug generation for section anchors."""

from __future__ import annotations

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")
_WHITESPACE = re.compile(r"\s+")


def generate_slug(title: str) -> str:
    """Generate a URL-safe anchor base from heading text.

    Lowercases the title, spells out question marks and exclamation marks,
    turns every run of characters outside ``[a-z0-9]`` into a single space,
    trims, and joins the remaining words with hyphens. Non-ASCII letters are
    dropped. May return an empty string for punctuation-only titles.

    Args:
        title: Plain text of the heading.

    Returns:
        str: Lowercase, hyphen-separated slug.

    Examples:
        generate_slug("Hello World")  # "hello-world"
        generate_slug("Why Rails?")  # "why-rails-questionmark"
        generate_slug("save!")  # "save-bang"
    """
    slug = title.lower()
    slug = slug.replace("?", "-questionmark").replace("!", "-bang")
    slug = _NON_ALPHANUMERIC.sub(" ", slug)
    return _WHITESPACE.sub("-", slug.strip())
