from __future__ import annotations

import pytest

from guide_markdown.numbering import SectionNumberer


def test_numbers_follow_document_order():
    numberer = SectionNumberer()

    assert [numberer.number_for(depth) for depth in (1, 2, 2, 3, 4, 4, 3, 1, 2)] == [
        "1",
        "1.1",
        "1.2",
        "1.2.1",
        "1.2.1.1",
        "1.2.1.2",
        "1.2.2",
        "2",
        "2.1",
    ]


def test_shallower_heading_resets_deeper_counters():
    numberer = SectionNumberer()
    for depth in (1, 2, 3, 4):
        numberer.number_for(depth)

    assert numberer.number_for(2) == "1.2"
    assert numberer.counters == (1, 2, 0, 0)
    assert numberer.number_for(4) == "1.2.0.1"


def test_only_chapters_and_sections_never_touch_deeper_counters():
    numberer = SectionNumberer()
    labels = [numberer.number_for(depth) for depth in (1, 2, 1, 2, 2)]

    assert labels == ["1", "1.1", "2", "2.1", "2.2"]
    assert numberer.counters[2:] == (0, 0)


def test_deep_heading_without_parents_uses_zero_counters():
    numberer = SectionNumberer()

    assert numberer.number_for(3) == "0.0.1"


@pytest.mark.parametrize("depth", [0, 5, -1])
def test_rejects_unknown_depth(depth: int):
    with pytest.raises(ValueError):
        SectionNumberer().number_for(depth)


def test_instances_do_not_share_counters():
    first = SectionNumberer()
    first.number_for(1)
    first.number_for(1)

    assert SectionNumberer().number_for(1) == "1"
