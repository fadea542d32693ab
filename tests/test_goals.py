from __future__ import annotations

import pytest

from blockworld.interpreter.goals import (
    NoInterpretationError,
    build_goal,
    format_formula,
    format_interpretation,
    format_literal,
    interpret,
)
from blockworld.io import command_from_dict
from blockworld.tracing import MemoryTrace
from blockworld.types import Literal


def _take(**obj):
    return command_from_dict({"command": "take", "entity": {"quantifier": "any", "object": obj}})


def _put(obj: dict, relation: str, dest: dict, command: str = "put"):
    return command_from_dict(
        {
            "command": command,
            "entity": {"quantifier": "the", "object": obj},
            "location": {"relation": relation, "entity": {"quantifier": "any", "object": dest}},
        }
    )


def test_take_a_blue_object(small_world):
    formula = build_goal(_take(form="anyform", color="blue"), small_world)
    assert formula == [[Literal(True, "holding", ("g",))], [Literal(True, "holding", ("m",))]]
    assert format_formula(formula) == "holding(g) | holding(m)"


def test_take_the_floor_is_not_possible(small_world):
    with pytest.raises(NoInterpretationError):
        build_goal(_take(form="floor"), small_world)


def test_put_ball_in_box_respects_physics(small_world):
    formula = build_goal(_put({"form": "ball"}, "inside", {"form": "box"}), small_world)
    # The large ball does not fit in the small box.
    assert format_formula(formula) == "inside(e,l) | inside(e,k) | inside(f,l) | inside(f,k) | inside(f,m)"
    assert all(len(conj) == 1 for conj in formula)


def test_put_on_floor_uses_floor_literal(small_world):
    formula = build_goal(_put({"form": "box"}, "ontop", {"form": "floor"}, command="move"), small_world)
    assert format_formula(formula) == "ontop(l,floor) | ontop(k,floor) | ontop(m,floor)"


def test_inside_the_floor_has_no_interpretation(small_world):
    with pytest.raises(NoInterpretationError):
        build_goal(_put({"form": "box"}, "inside", {"form": "floor"}), small_world)


def test_destination_absent_from_world(tableless_world):
    with pytest.raises(NoInterpretationError):
        build_goal(_put({"form": "ball"}, "ontop", {"form": "table"}), tableless_world)


def test_nothing_goes_ontop_of_a_box(small_world):
    with pytest.raises(NoInterpretationError):
        build_goal(_put({"form": "anyform"}, "ontop", {"form": "box"}), small_world)


def test_relative_destination(small_world):
    # "put the white ball in the box that is on the floor"
    dest = {"object": {"form": "box"}, "location": {"relation": "ontop", "entity": {"object": {"form": "floor"}}}}
    formula = build_goal(_put({"form": "ball", "color": "white"}, "inside", dest), small_world)
    assert format_formula(formula) == "inside(e,k)"


def test_interpret_keeps_successful_parses(small_world):
    good = _take(form="ball", color="white")
    bad = _put({"form": "ball"}, "ontop", {"form": "box"})
    results = interpret([bad, good], small_world)
    assert len(results) == 1
    assert results[0].parse is good
    assert format_interpretation(results[0]) == "holding(e)"


def test_interpret_raises_first_error_when_all_fail(small_world):
    bad1 = _put({"form": "ball"}, "ontop", {"form": "box"})
    bad2 = _take(form="pyramid", color="blue")
    with pytest.raises(NoInterpretationError) as exc:
        interpret([bad1, bad2], small_world)
    assert "put" in str(exc.value)


def test_negative_literal_rendering():
    assert format_literal(Literal(False, "ontop", ("a", "floor"))) == "-ontop(a,floor)"
    formula = [[Literal(True, "holding", ("b",)), Literal(False, "ontop", ("a", "floor"))]]
    assert format_formula(formula) == "holding(b) & -ontop(a,floor)"


def test_goal_events(small_world):
    trace = MemoryTrace(kinds={"goal.built", "goal.failed", "interpret.summary"})
    interpret([_take(color="blue"), _take(form="pyramid", color="blue")], small_world, trace=trace)
    assert [e.kind for e in trace.events] == ["goal.built", "goal.failed", "interpret.summary"]
    assert trace.events[-1].data == {"parses": 2, "interpretations": 1, "failures": 1}
