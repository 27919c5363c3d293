"""Definition parser for the line-oriented FSM text format.

A definition has three sections, in any order::

    states:
        A
        B
        final: C

    transitions:
        0: A -> B
        1: A -> C
        ...

    start: A
"""

from fsmsim.parser.definition import parse_definition
from fsmsim.parser.sections import Section, split_sections

__all__ = [
    "parse_definition",
    "split_sections",
    "Section",
]
