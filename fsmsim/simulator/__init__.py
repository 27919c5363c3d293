"""Simulation engine.

Each run moves through explicit phases:

    IDLE -> RUNNING (per symbol) -> HALTED
                   |
                   v
                 FAILED (unknown symbol)

An empty input goes straight from IDLE to HALTED.
"""

from fsmsim.simulator.engine import Simulator, simulate
from fsmsim.simulator.states import (
    PHASE_TRANSITIONS,
    PhaseTransitionError,
    Run,
    RunPhase,
)

__all__ = [
    "Simulator",
    "simulate",
    "Run",
    "RunPhase",
    "PhaseTransitionError",
    "PHASE_TRANSITIONS",
]
