from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from guide_markdown.renderer import (
    GuideRenderer,
    brush_for,
    convert_admonitions,
    convert_footnote_references,
    render_markdown,
)


@pytest.mark.parametrize(
    ("language", "expected"),
    [
        ("ruby", "ruby"),
        ("sql", "sql"),
        ("plain", "plain"),
        ("erb", "ruby; html-script: true"),
        ("html", "xml"),
        ("python", "plain"),
        ("", "plain"),
        (None, "plain"),
    ],
)
def test_brush_for(language, expected):
    assert brush_for(language) == expected


def test_headings_are_shifted_one_level():
    html = render_markdown("# Title\n\n## Chapter\n\n### Section\n")

    soup = BeautifulSoup(html, "html.parser")
    assert [tag.name for tag in soup.find_all(True)] == ["h2", "h3", "h4"]
    assert soup.find("h3").get("id") is None


def test_erb_code_block_uses_html_script_brush():
    html = render_markdown("```erb\n<%= link_to 'Home', root_path %>\n```\n")

    assert '<div class="code_container">' in html
    assert '<pre class="brush: ruby; html-script: true; gutter: false; toolbar: false">' in html
    assert "&lt;%= link_to &#x27;Home&#x27;, root_path %&gt;" in html


def test_html_code_block_uses_xml_brush():
    html = render_markdown("```html\n<p>hi</p>\n```\n")

    assert "brush: xml; gutter: false; toolbar: false" in html
    assert "&lt;p&gt;hi&lt;/p&gt;" in html


def test_unknown_and_missing_languages_use_plain_brush():
    assert "brush: plain;" in render_markdown("```python\nprint(1)\n```\n")
    assert "brush: plain;" in render_markdown("```\nplain text\n```\n")


def test_tip_paragraph_becomes_info_box():
    html = render_markdown("TIP: Remember this.\n\nNext paragraph.")

    assert '<div class="info"><p>Remember this.</p></div>' in html
    assert "<p>Next paragraph.</p>" in html
    assert html.index("Remember this.") < html.index("Next paragraph.")


def test_admonition_does_not_absorb_following_list():
    html = render_markdown("TIP: Remember this.\n\n* first\n* second\n")

    soup = BeautifulSoup(html, "html.parser")
    box = soup.find("div", class_="info")
    assert box.get_text() == "Remember this."
    assert box.find("li") is None
    assert [item.get_text() for item in soup.find_all("li")] == ["first", "second"]


@pytest.mark.parametrize(
    ("keyword", "style"),
    [
        ("CAUTION", "warning"),
        ("IMPORTANT", "warning"),
        ("TIP", "info"),
        ("WARNING", "warning"),
        ("NOTE", "note"),
        ("INFO", "info"),
        ("TODO", "todo"),
    ],
)
def test_admonition_styles(keyword: str, style: str):
    assert convert_admonitions(f"{keyword}. Body text") == (
        f'<div class="{style}"><p>Body text</p></div>'
    )


def test_convert_admonitions_stops_at_blank_line():
    converted = convert_admonitions("TIP: first line\ncontinues\n\n* item")

    assert converted == '<div class="info"><p>first line\ncontinues</p></div>\n* item'


def test_convert_admonitions_handles_consecutive_boxes():
    converted = convert_admonitions("NOTE: a\n\nWARNING: b")

    assert converted == '<div class="note"><p>a</p></div>\n<div class="warning"><p>b</p></div>'


def test_keyword_without_separator_is_plain_paragraph():
    html = render_markdown("NOTES are kept here.")

    assert "<p>NOTES are kept here.</p>" in html


def test_footnote_definition_paragraph():
    paragraph = GuideRenderer().paragraph("[<sup>2]:</sup> See the API docs.")

    assert paragraph == (
        '<p class="footnote" id="footnote-2">'
        '<a href="#footnote-2-ref"><sup>2</sup></a> See the API docs.</p>\n'
    )


def test_footnote_definition_survives_block_parsing():
    html = render_markdown("Routing[<sup>1]</sup> rules.\n\n[<sup>1]:</sup> See the routing guide.")

    assert '<p class="footnote" id="footnote-1">' in html
    assert '<a href="#footnote-1-ref"><sup>1</sup></a> See the routing guide.</p>' in html


def test_admonition_rule_takes_precedence_over_footnote():
    paragraph = GuideRenderer().paragraph("NOTE: see below\n[<sup>1]:</sup> text")

    assert paragraph.startswith('<div class="note">')


def test_inline_footnote_reference_in_paragraph():
    paragraph = GuideRenderer().paragraph("Routing is explained later[<sup>3]</sup>.")

    assert paragraph == (
        '<p>Routing is explained later<sup class="footnote" id="footnote-3-ref">'
        '<a href="#footnote-3">3</a></sup>.</p>\n'
    )


def test_convert_footnote_references_leaves_other_text():
    assert convert_footnote_references("no refs [here]") == "no refs [here]"


def test_emphasis_markers_inside_words_stay_literal():
    html = render_markdown("foo*bar*baz and snake_case_name")

    assert "<em>" not in html
    assert "foo*bar*baz and snake_case_name" in html


def test_emphasis_between_words_is_rendered():
    html = render_markdown("an *emphasized* word and __strong__ text")

    assert "<em>emphasized</em>" in html
    assert "<strong>strong</strong>" in html


def test_tables_and_strikethrough_are_enabled():
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n\n~~gone~~\n")

    assert "<table>" in html
    assert "<del>gone</del>" in html


def test_bare_urls_are_linked():
    html = render_markdown("Visit https://rubyonrails.org today.")

    assert '<a href="https://rubyonrails.org">' in html


def test_inline_html_passes_through():
    html = render_markdown("Some <kbd>Ctrl</kbd> text.")

    assert "<kbd>Ctrl</kbd>" in html
