"""Lifecycle of a single simulation pass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class RunPhase(Enum):
    """Phases a Run moves through."""

    IDLE = auto()
    RUNNING = auto()

    # Terminal phases
    HALTED = auto()
    FAILED = auto()

    def is_terminal(self) -> bool:
        return self in (RunPhase.HALTED, RunPhase.FAILED)


# Valid phase transitions
PHASE_TRANSITIONS: dict[RunPhase, set[RunPhase]] = {
    RunPhase.IDLE: {RunPhase.RUNNING, RunPhase.HALTED},  # empty input halts at once
    RunPhase.RUNNING: {RunPhase.RUNNING, RunPhase.HALTED, RunPhase.FAILED},
    RunPhase.HALTED: set(),
    RunPhase.FAILED: set(),
}


class PhaseTransitionError(Exception):
    """Invalid phase transition."""

    def __init__(self, from_phase: RunPhase, to_phase: RunPhase) -> None:
        self.from_phase = from_phase
        self.to_phase = to_phase
        super().__init__(
            f"Invalid transition: {from_phase.name} -> {to_phase.name}"
        )


@dataclass
class Run:
    """
    Transient cursor over one input string.

    Attributes:
        state: Index of the current state in the machine
        position: Index of the next symbol to consume
        phase: Current lifecycle phase
        error_position: Where the run failed, if it did
    """

    state: int
    position: int = 0
    phase: RunPhase = RunPhase.IDLE
    error_position: Optional[int] = None

    def can_transition_to(self, new_phase: RunPhase) -> bool:
        return new_phase in PHASE_TRANSITIONS.get(self.phase, set())

    def transition_to(self, new_phase: RunPhase) -> None:
        """
        Move to a new phase.

        Raises:
            PhaseTransitionError: If the move is not allowed
        """
        if not self.can_transition_to(new_phase):
            raise PhaseTransitionError(self.phase, new_phase)
        self.phase = new_phase

    def advance(self, destination: int) -> None:
        """Consume one symbol, moving to ``destination``."""
        self.transition_to(RunPhase.RUNNING)
        self.state = destination
        self.position += 1

    def halt(self) -> None:
        self.transition_to(RunPhase.HALTED)

    def fail(self) -> None:
        # A failure on the very first symbol still passes through RUNNING
        if self.phase == RunPhase.IDLE:
            self.transition_to(RunPhase.RUNNING)
        self.transition_to(RunPhase.FAILED)
        self.error_position = self.position
