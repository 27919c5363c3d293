from __future__ import annotations

import pytest

from fsmsim.errors import DuplicateSection, MissingSection, UnexpectedContent
from fsmsim.parser.sections import split_sections


def test_sections_grouped_with_line_numbers(example_text: str) -> None:
    sections = split_sections(example_text)

    assert set(sections) == {"states", "transitions", "start"}
    assert sections["states"].line == 1
    assert sections["states"].lines == [(2, "A"), (3, "B"), (4, "final: C")]
    assert len(sections["transitions"].lines) == 6
    assert sections["start"].lines == [(14, "A")]


def test_sections_in_any_order() -> None:
    text = "start: A\ntransitions:\n  0: A -> A\nstates:\n  final: A\n"

    sections = split_sections(text)

    assert [s.name for s in sections.values()] == ["start", "transitions", "states"]


def test_start_name_on_following_line() -> None:
    text = "states:\n final: A\ntransitions:\n 0: A -> A\nstart:\n  A\n"

    sections = split_sections(text)

    assert sections["start"].tokens() == [(6, "A")]


@pytest.mark.parametrize("missing", ["states", "transitions", "start"])
def test_missing_section(missing: str) -> None:
    parts = {
        "states": "states:\n final: A\n",
        "transitions": "transitions:\n 0: A -> A\n",
        "start": "start: A\n",
    }
    text = "".join(body for name, body in parts.items() if name != missing)

    with pytest.raises(MissingSection) as excinfo:
        split_sections(text)

    assert excinfo.value.section == missing


def test_missing_sections_reported_in_fixed_order() -> None:
    with pytest.raises(MissingSection) as excinfo:
        split_sections("start: A\n")

    assert excinfo.value.section == "states"


def test_empty_text_is_missing_states() -> None:
    with pytest.raises(MissingSection):
        split_sections("")


def test_duplicate_section() -> None:
    text = "states:\n final: A\nstates:\n B\ntransitions:\n 0: A -> A\nstart: A\n"

    with pytest.raises(DuplicateSection) as excinfo:
        split_sections(text)

    assert excinfo.value.section == "states"
    assert excinfo.value.line == 3


def test_content_before_first_header() -> None:
    with pytest.raises(UnexpectedContent) as excinfo:
        split_sections("hello\nstates:\n final: A\n")

    assert excinfo.value.line == 1
