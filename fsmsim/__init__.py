"""fsmsim - deterministic finite state machine simulator."""

from fsmsim.errors import FSMError, ParseError, RunError
from fsmsim.models import Machine, RunResult, Step, Transition
from fsmsim.parser import parse_definition
from fsmsim.simulator import Simulator, simulate

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "parse_definition",
    "simulate",
    "Simulator",
    "Machine",
    "Transition",
    "RunResult",
    "Step",
    "FSMError",
    "ParseError",
    "RunError",
]
