"""Turn a parsed command into a goal formula in disjunctive normal form."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from ..tracing import TraceSink, emit
from ..types import FLOOR, HOLDING, Command, DNFFormula, Literal, Relation, WorldState
from .physics import is_legal
from .resolver import resolve_entity


class NoInterpretationError(ValueError):
    """The command has no legal reading in the current world."""


def _in_world_order(ids: Iterable[str], world: WorldState) -> list[str]:
    order = {obj_id: i for i, obj_id in enumerate(world.present_ids())}
    order[FLOOR] = len(order)
    return sorted(ids, key=lambda obj_id: order.get(obj_id, len(order)))


def build_goal(cmd: Command, world: WorldState, *, trace: TraceSink | None = None) -> DNFFormula:
    """Every way of satisfying `cmd`, one single-literal conjunction per reading.

    Raises NoInterpretationError when nothing in the world fits.
    """
    # The floor can never be picked up.
    movable = _in_world_order(resolve_entity(cmd.entity, world, trace=trace) - {FLOOR}, world)
    formula: DNFFormula = []

    if cmd.command == "take":
        formula = [[Literal(True, HOLDING, (obj_id,))] for obj_id in movable]
    else:
        assert cmd.location is not None
        relation = Relation(cmd.location.relation)
        dests = _in_world_order(resolve_entity(cmd.location.entity, world, trace=trace), world)
        for m in movable:
            for d in dests:
                if is_legal(m, relation, d, world, trace=trace):
                    formula.append([Literal(True, relation.value, (m, FLOOR if d == FLOOR else d))])

    if not formula:
        emit(trace, "goal.failed", command=cmd.command)
        raise NoInterpretationError(f"No legal interpretation of '{cmd.command}' in this world")
    emit(trace, "goal.built", command=cmd.command, formula=format_formula(formula))
    return formula


@dataclass(frozen=True)
class Interpretation:
    parse: Any
    formula: DNFFormula


def interpret(
    parses: Sequence[Command],
    world: WorldState,
    *,
    trace: TraceSink | None = None,
) -> list[Interpretation]:
    """Interpret every candidate parse; a parse that fails is dropped.

    Raises the first collected error only when every parse failed.
    """
    errors: list[NoInterpretationError] = []
    out: list[Interpretation] = []
    for parse in parses:
        try:
            out.append(Interpretation(parse=parse, formula=build_goal(parse, world, trace=trace)))
        except NoInterpretationError as e:
            errors.append(e)
    emit(trace, "interpret.summary", parses=len(parses), interpretations=len(out), failures=len(errors))
    if out:
        return out
    if errors:
        raise errors[0]
    raise NoInterpretationError("Nothing to interpret")


def format_literal(lit: Literal) -> str:
    return str(lit)


def format_formula(formula: DNFFormula) -> str:
    return " | ".join(" & ".join(format_literal(lit) for lit in conj) for conj in formula)


def format_interpretation(result: Interpretation) -> str:
    return format_formula(result.formula)
