"""Split definition text into its keyword-headed sections."""

from __future__ import annotations

from dataclasses import dataclass, field

from fsmsim.errors import DuplicateSection, MissingSection, UnexpectedContent

STATES = "states"
TRANSITIONS = "transitions"
START = "start"

# Order in which absent sections are reported
SECTION_NAMES: tuple[str, ...] = (STATES, TRANSITIONS, START)


@dataclass
class Section:
    """
    Body of one section.

    Attributes:
        name: Section keyword without the colon
        line: 1-based line number of the header
        lines: Non-blank content as (line number, stripped text) pairs,
            including any text following the header on its own line
    """

    name: str
    line: int
    lines: list[tuple[int, str]] = field(default_factory=list)

    def tokens(self) -> list[tuple[int, str]]:
        """Whitespace-separated tokens with their line numbers."""
        return [
            (lineno, token)
            for lineno, text in self.lines
            for token in text.split()
        ]


def _match_header(text: str) -> tuple[str, str] | None:
    for name in SECTION_NAMES:
        keyword = name + ":"
        if text.startswith(keyword):
            return name, text[len(keyword):].strip()
    return None


def split_sections(text: str) -> dict[str, Section]:
    """
    Group lines under the most recent section header.

    Sections may appear in any order, each at most once.

    Raises:
        UnexpectedContent: Non-blank text before the first header
        DuplicateSection: A header appears twice
        MissingSection: One of the three sections is absent
    """
    sections: dict[str, Section] = {}
    current: Section | None = None

    for lineno, raw in enumerate(text.splitlines(), start=1):
        stripped = raw.strip()
        if not stripped:
            continue

        header = _match_header(stripped)
        if header is not None:
            name, rest = header
            if name in sections:
                raise DuplicateSection(name, lineno)
            current = Section(name=name, line=lineno)
            sections[name] = current
            if rest:
                current.lines.append((lineno, rest))
            continue

        if current is None:
            raise UnexpectedContent(stripped, lineno)
        current.lines.append((lineno, stripped))

    for name in SECTION_NAMES:
        if name not in sections:
            raise MissingSection(name)

    return sections
