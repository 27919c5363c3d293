"""Deterministic single-pass simulation of a Machine over an input string."""

from __future__ import annotations

from typing import Optional

from fsmsim.errors import UnknownSymbol
from fsmsim.models.machine import Machine
from fsmsim.models.results import RunResult, Step
from fsmsim.simulator.states import Run
from fsmsim.utils.logging import get_logger

logger = get_logger("simulator.engine")


class Simulator:
    """
    Runs input strings against one Machine.

    The machine is never mutated, so a single Simulator (or Machine) can
    serve any number of runs, including concurrent ones.
    """

    def __init__(self, machine: Machine) -> None:
        self.machine = machine

    def run(self, text: str, trace: bool = False) -> RunResult:
        """
        Consume ``text`` symbol by symbol from the start state.

        Args:
            text: Input string; each character is one symbol
            trace: Record every step in the result

        Returns:
            RunResult with the final state and verdict

        Raises:
            UnknownSymbol: A character is outside the machine's alphabet
        """
        machine = self.machine
        run = Run(state=machine.state_index[machine.start])
        steps: Optional[list[Step]] = [] if trace else None

        logger.debug("run_started", start=machine.start, length=len(text))

        for symbol in text:
            destination = machine.lookup(run.state, symbol)
            if destination is None:
                run.fail()
                current = machine.states[run.state]
                logger.debug(
                    "run_failed",
                    symbol=symbol,
                    position=run.error_position,
                    state=current,
                )
                raise UnknownSymbol(symbol, run.position, current)

            if steps is not None:
                steps.append(Step(
                    position=run.position,
                    symbol=symbol,
                    source=machine.states[run.state],
                    destination=machine.states[destination],
                ))
            run.advance(destination)

        run.halt()
        final_state = machine.states[run.state]
        accepted = machine.is_final(final_state)

        logger.debug(
            "run_halted",
            final_state=final_state,
            accepted=accepted,
            steps=run.position,
        )

        return RunResult(
            input=text,
            final_state=final_state,
            accepted=accepted,
            steps=run.position,
            trace=tuple(steps) if steps is not None else None,
        )


def simulate(machine: Machine, text: str, trace: bool = False) -> RunResult:
    """Convenience wrapper: run ``text`` against ``machine`` once."""
    return Simulator(machine).run(text, trace=trace)
