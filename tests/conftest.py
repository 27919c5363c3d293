"""
Pytest configuration and fixtures for fsmsim tests.

Provides the three-state example machine as text, as a parsed Machine and
as a file on disk.
"""

import sys

import pytest

EXAMPLE_DEFINITION = (
    "states:\n"
    "\tA\n"
    "\tB\n"
    "\tfinal: C\n"
    "\n"
    "transitions:\n"
    "\t0: A -> B\n"
    "\t0: B -> C\n"
    "\t0: C -> A\n"
    "\t1: B -> A\n"
    "\t1: C -> B\n"
    "\t1: A -> C\n"
    "\n"
    "start: A\n"
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Point logging back at the real stderr; CLI tests swap the stream."""
    from fsmsim.utils.logging import configure_logging

    configure_logging(level="warn", format_type="json", stream=sys.stderr)
    yield


@pytest.fixture
def example_text():
    return EXAMPLE_DEFINITION


@pytest.fixture
def example_machine(example_text):
    from fsmsim.parser import parse_definition

    return parse_definition(example_text)


@pytest.fixture
def example_file(tmp_path, example_text):
    path = tmp_path / "example.fsm"
    path.write_text(example_text)
    return path
