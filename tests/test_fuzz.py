from __future__ import annotations

import os

import pytest
from guide_markdown.document import render_document
from guide_markdown.slugify import generate_slug

atheris = pytest.importorskip("atheris")


def test_generate_slug_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    generated = set()

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        text = provider.ConsumeUnicodeNoSurrogates(64)
        slug = generate_slug(text)
        slug.encode("ascii")
        assert slug == slug.lower()
        generated.add(slug)

    assert generated  # ensure we exercised the loop


def test_render_document_with_fuzzed_headings():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    lines: list[str] = []

    while provider.remaining_bytes() > 0 and len(lines) < 32:
        level = provider.ConsumeIntInRange(2, 5)
        title = provider.ConsumeUnicodeNoSurrogates(32).replace("\n", " ") or "Section"
        lines.append(f"{'#' * level} {title}\n\ntext\n")

    page = render_document("\n".join(lines))
    assert page.title == "Guides"
