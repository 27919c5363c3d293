"""Definition parser: text in, validated Machine out.

Validation runs in a fixed order so the same bad definition always yields
the same error: sections, states, transition lines, totality, start.
"""

from __future__ import annotations

import re

from fsmsim.errors import (
    AmbiguousStart,
    DuplicateState,
    DuplicateTransition,
    MalformedState,
    MalformedTransition,
    MissingStart,
    MissingTransition,
    NoFinalState,
    UnknownStartState,
    UnknownState,
)
from fsmsim.models.machine import Machine, Transition
from fsmsim.parser.sections import START, STATES, TRANSITIONS, Section, split_sections
from fsmsim.utils.logging import get_logger

logger = get_logger("parser.definition")

FINAL_KEYWORD = "final:"

TRANSITION_PATTERN = re.compile(
    r"^(?P<symbol>[^\s:]):\s*(?P<source>[^\s:]+?)\s*->\s*(?P<destination>[^\s:]+)$"
)


def _parse_states(section: Section) -> tuple[list[str], set[str]]:
    """
    Collect declared states and the subset marked final.

    ``final:`` applies to the single token that follows it and may be
    repeated; ``final:C`` without a space is accepted too.
    """
    states: list[str] = []
    finals: set[str] = set()
    seen: set[str] = set()

    def declare(name: str, lineno: int) -> None:
        if name in seen:
            raise DuplicateState(name, lineno)
        seen.add(name)
        states.append(name)

    for lineno, text in section.lines:
        tokens = text.split()
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.startswith(FINAL_KEYWORD):
                name = token[len(FINAL_KEYWORD):]
                if not name:
                    if i + 1 >= len(tokens):
                        raise MalformedState(text, lineno)
                    i += 1
                    name = tokens[i]
                if ":" in name:
                    raise MalformedState(text, lineno)
                declare(name, lineno)
                finals.add(name)
            elif ":" in token:
                raise MalformedState(text, lineno)
            else:
                declare(token, lineno)
            i += 1

    if not finals:
        raise NoFinalState()

    return states, finals


def _parse_transitions(
    section: Section,
    known: set[str],
) -> list[tuple[int, Transition]]:
    rules: list[tuple[int, Transition]] = []

    for lineno, text in section.lines:
        match = TRANSITION_PATTERN.match(text)
        if match is None:
            raise MalformedTransition(text, lineno)

        for name in (match["source"], match["destination"]):
            if name not in known:
                raise UnknownState(name, lineno)

        rules.append((
            lineno,
            Transition(match["symbol"], match["source"], match["destination"]),
        ))

    return rules


def _derive_alphabet(rules: list[tuple[int, Transition]]) -> list[str]:
    """Distinct symbols in order of first use."""
    return list(dict.fromkeys(rule.symbol for _, rule in rules))


def _build_table(
    states: list[str],
    alphabet: list[str],
    rules: list[tuple[int, Transition]],
) -> tuple[tuple[int, ...], ...]:
    """
    Check that every (state, symbol) pair has exactly one rule and index it.

    Raises:
        MissingTransition: A pair has no rule
        DuplicateTransition: A pair has more than one rule
    """
    by_pair: dict[tuple[str, str], list[tuple[int, Transition]]] = {}
    for lineno, rule in rules:
        by_pair.setdefault((rule.source, rule.symbol), []).append((lineno, rule))

    index = {name: i for i, name in enumerate(states)}
    table = []
    for state in states:
        row = []
        for symbol in alphabet:
            found = by_pair.get((state, symbol), [])
            if not found:
                raise MissingTransition(symbol, state)
            if len(found) > 1:
                (_, first), (lineno, second) = found[0], found[1]
                raise DuplicateTransition(str(first), str(second), lineno)
            row.append(index[found[0][1].destination])
        table.append(tuple(row))

    return tuple(table)


def _resolve_start(section: Section, known: set[str]) -> str:
    names = [token for _, token in section.tokens()]
    if not names:
        raise MissingStart()
    if len(names) > 1:
        raise AmbiguousStart(names)
    if names[0] not in known:
        raise UnknownStartState(names[0])
    return names[0]


def parse_definition(text: str) -> Machine:
    """
    Parse FSM definition text into a validated Machine.

    Args:
        text: Raw definition text (no file access happens here)

    Returns:
        Immutable Machine with a total transition table

    Raises:
        ParseError: One of its subclasses, naming the first problem found
    """
    sections = split_sections(text)

    states, finals = _parse_states(sections[STATES])
    known = set(states)

    rules = _parse_transitions(sections[TRANSITIONS], known)
    alphabet = _derive_alphabet(rules)
    table = _build_table(states, alphabet, rules)

    start = _resolve_start(sections[START], known)

    machine = Machine(
        states=tuple(states),
        alphabet=tuple(alphabet),
        final_states=frozenset(finals),
        start=start,
        table=table,
    )

    logger.debug(
        "definition_parsed",
        states=len(machine.states),
        final_states=len(machine.final_states),
        alphabet="".join(machine.alphabet),
        start=machine.start,
    )
    return machine
