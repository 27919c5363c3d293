"""Immutable finite-state-machine model."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional


@dataclass(frozen=True)
class Transition:
    """A single rule: on ``symbol`` move from ``source`` to ``destination``."""

    symbol: str
    source: str
    destination: str

    def __str__(self) -> str:
        return f"{self.symbol}: {self.source} -> {self.destination}"


@dataclass(frozen=True)
class Machine:
    """
    Deterministic FSM with a total transition table.

    States and symbols are kept in declaration order and mapped to dense
    indices, so ``table[state_index][symbol_index]`` is the index of the
    destination state.

    Attributes:
        states: Declared state names, in declaration order
        alphabet: Distinct transition symbols, in order of first use
        final_states: Names of accepting states
        start: Name of the initial state
        table: Destination state index per (state, symbol) index pair
    """

    states: tuple[str, ...]
    alphabet: tuple[str, ...]
    final_states: frozenset[str]
    start: str
    table: tuple[tuple[int, ...], ...]

    state_index: Mapping[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )
    symbol_index: Mapping[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if len(self.table) != len(self.states):
            raise ValueError("table must have one row per state")
        for row in self.table:
            if len(row) != len(self.alphabet):
                raise ValueError("table rows must have one entry per symbol")
        if self.start not in self.states:
            raise ValueError("start must be in states")
        if not self.final_states.issubset(self.states):
            raise ValueError("final_states must be a subset of states")

        object.__setattr__(
            self,
            "state_index",
            MappingProxyType({name: i for i, name in enumerate(self.states)}),
        )
        object.__setattr__(
            self,
            "symbol_index",
            MappingProxyType({sym: i for i, sym in enumerate(self.alphabet)}),
        )

    def next_state(self, state: str, symbol: str) -> str:
        """Destination of ``state`` on ``symbol``. Raises KeyError if either is unknown."""
        row = self.table[self.state_index[state]]
        return self.states[row[self.symbol_index[symbol]]]

    def lookup(self, state: int, symbol: str) -> Optional[int]:
        """Index-level step used by the simulator; None when ``symbol`` is outside the alphabet."""
        column = self.symbol_index.get(symbol)
        if column is None:
            return None
        return self.table[state][column]

    def is_final(self, state: str) -> bool:
        return state in self.final_states

    def transitions(self) -> Iterator[Transition]:
        """Iterate every rule, state-major in declaration order."""
        for source, row in zip(self.states, self.table):
            for symbol, dest in zip(self.alphabet, row):
                yield Transition(symbol, source, self.states[dest])

    def to_definition(self) -> str:
        """Render canonical definition text that parses back to an equal machine."""
        lines = ["states:"]
        for name in self.states:
            if name in self.final_states:
                lines.append(f"\tfinal: {name}")
            else:
                lines.append(f"\t{name}")
        lines.append("")
        lines.append("transitions:")
        lines.extend(f"\t{t}" for t in self.transitions())
        lines.append("")
        lines.append(f"start: {self.start}")
        return "\n".join(lines) + "\n"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "states": list(self.states),
            "final_states": [s for s in self.states if s in self.final_states],
            "alphabet": list(self.alphabet),
            "start": self.start,
            "transitions": [str(t) for t in self.transitions()],
        }
