"""Data models for fsmsim."""

from fsmsim.models.machine import Machine, Transition
from fsmsim.models.results import RunResult, Step

__all__ = [
    "Machine",
    "Transition",
    "RunResult",
    "Step",
]
