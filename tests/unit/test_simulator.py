from __future__ import annotations

import pytest

from fsmsim.errors import RunError, UnknownSymbol
from fsmsim.models import Machine, Step
from fsmsim.parser import parse_definition
from fsmsim.simulator import (
    PhaseTransitionError,
    Run,
    RunPhase,
    Simulator,
    simulate,
)


@pytest.mark.parametrize(
    "text,final_state,accepted",
    [
        ("0", "B", False),
        ("00", "C", True),
        ("01", "A", False),
        ("1", "C", True),
        ("000", "A", False),
        ("", "A", False),
    ],
)
def test_example_runs(
    example_machine: Machine, text: str, final_state: str, accepted: bool
) -> None:
    result = simulate(example_machine, text)

    assert result.final_state == final_state
    assert result.accepted is accepted
    assert result.steps == len(text)
    assert result.trace is None


def test_unknown_symbol_reports_position(example_machine: Machine) -> None:
    with pytest.raises(UnknownSymbol) as excinfo:
        simulate(example_machine, "2")

    assert excinfo.value.symbol == "2"
    assert excinfo.value.position == 0
    assert excinfo.value.state == "A"


def test_unknown_symbol_mid_input(example_machine: Machine) -> None:
    with pytest.raises(RunError) as excinfo:
        simulate(example_machine, "00x1")

    assert excinfo.value.position == 2
    assert excinfo.value.state == "C"


def test_trailing_newline_is_a_symbol(example_machine: Machine) -> None:
    with pytest.raises(UnknownSymbol):
        simulate(example_machine, "00\n")


def test_empty_input_accepted_when_start_is_final() -> None:
    m = parse_definition("states:\n final: A\ntransitions:\n 0: A -> A\nstart: A\n")

    assert simulate(m, "").accepted is True


def test_trace_records_every_step(example_machine: Machine) -> None:
    result = simulate(example_machine, "01", trace=True)

    assert result.trace == (
        Step(position=0, symbol="0", source="A", destination="B"),
        Step(position=1, symbol="1", source="B", destination="A"),
    )
    assert result.to_dict()["trace"][1]["destination"] == "A"


def test_runs_are_deterministic_and_leave_machine_untouched(
    example_machine: Machine, example_text: str
) -> None:
    sim = Simulator(example_machine)

    first = sim.run("0110100")
    second = sim.run("0110100")

    assert first == second
    assert example_machine == parse_definition(example_text)


def test_result_to_dict(example_machine: Machine) -> None:
    data = simulate(example_machine, "00").to_dict()

    assert data == {"input": "00", "final_state": "C", "accepted": True, "steps": 2}


def test_run_phases() -> None:
    run = Run(state=0)
    assert run.phase is RunPhase.IDLE

    run.advance(1)
    assert run.phase is RunPhase.RUNNING
    assert (run.state, run.position) == (1, 1)

    run.halt()
    assert run.phase is RunPhase.HALTED
    assert run.phase.is_terminal()


def test_empty_run_halts_from_idle() -> None:
    run = Run(state=0)

    run.halt()

    assert run.phase is RunPhase.HALTED


def test_failure_records_position() -> None:
    run = Run(state=0)

    run.fail()

    assert run.phase is RunPhase.FAILED
    assert run.error_position == 0


def test_halted_run_cannot_continue() -> None:
    run = Run(state=0)
    run.halt()

    with pytest.raises(PhaseTransitionError):
        run.advance(0)
