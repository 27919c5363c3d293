from __future__ import annotations

import pytest

from fsmsim.models import Machine, Transition


def _two_state() -> Machine:
    return Machine(
        states=("even", "odd"),
        alphabet=("1",),
        final_states=frozenset({"even"}),
        start="even",
        table=((1,), (0,)),
    )


def test_transition_renders_as_rule() -> None:
    assert str(Transition("0", "A", "B")) == "0: A -> B"


def test_lookup_by_index() -> None:
    m = _two_state()

    assert m.lookup(0, "1") == 1
    assert m.lookup(1, "1") == 0
    assert m.lookup(0, "2") is None


def test_next_state_unknown_symbol_raises() -> None:
    with pytest.raises(KeyError):
        _two_state().next_state("even", "x")


def test_equality_ignores_derived_indices() -> None:
    assert _two_state() == _two_state()
    assert hash(_two_state()) == hash(_two_state())


def test_machine_is_immutable() -> None:
    m = _two_state()

    with pytest.raises(AttributeError):
        m.start = "odd"  # type: ignore[misc]


INVALID_SHAPES = {
    "too_few_rows": dict(states=("a", "b"), table=((0,),)),
    "row_too_short": dict(states=("a", "b"), table=((0,), ())),
    "unknown_start": dict(states=("a",), table=((0,),), start="z"),
    "unknown_final": dict(states=("a",), table=((0,),), final_states=frozenset({"q"})),
}


@pytest.mark.parametrize("case", sorted(INVALID_SHAPES))
def test_invalid_construction_rejected(case: str) -> None:
    kwargs = {
        "alphabet": ("x",),
        "final_states": frozenset({"a"}),
        "start": "a",
        **INVALID_SHAPES[case],
    }

    with pytest.raises(ValueError):
        Machine(**kwargs)


def test_indices_are_read_only() -> None:
    m = _two_state()

    with pytest.raises(TypeError):
        m.state_index["odd"] = 0  # type: ignore[index]
    with pytest.raises(TypeError):
        m.symbol_index["2"] = 0  # type: ignore[index]
    assert m.lookup(1, "1") == 0


def test_to_dict(example_machine: Machine) -> None:
    data = example_machine.to_dict()

    assert data["states"] == ["A", "B", "C"]
    assert data["final_states"] == ["C"]
    assert data["alphabet"] == ["0", "1"]
    assert data["start"] == "A"
    assert data["transitions"][:2] == ["0: A -> B", "1: A -> C"]


def test_to_definition_marks_finals(example_machine: Machine) -> None:
    text = example_machine.to_definition()

    assert "\tfinal: C\n" in text
    assert text.endswith("start: A\n")
