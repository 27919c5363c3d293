"""Data models for simulation results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Step:
    """One consumed input symbol."""

    position: int
    symbol: str
    source: str
    destination: str

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "symbol": self.symbol,
            "source": self.source,
            "destination": self.destination,
        }


@dataclass(frozen=True)
class RunResult:
    """
    Verdict of a completed simulation.

    Attributes:
        input: The input string that was consumed
        final_state: State the machine halted in
        accepted: Whether final_state is a final state
        steps: Number of symbols consumed
        trace: Per-symbol steps, only recorded when tracing was requested
    """

    input: str
    final_state: str
    accepted: bool
    steps: int
    trace: Optional[tuple[Step, ...]] = None

    @property
    def verdict(self) -> str:
        return "accepted" if self.accepted else "rejected"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = {
            "input": self.input,
            "final_state": self.final_state,
            "accepted": self.accepted,
            "steps": self.steps,
        }
        if self.trace is not None:
            data["trace"] = [step.to_dict() for step in self.trace]
        return data
