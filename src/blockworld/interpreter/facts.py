"""Check goal formulas against a world snapshot.

A planner uses :func:`satisfies` as its goal test.
"""

from __future__ import annotations

from ..types import HOLDING, DNFFormula, Literal, Relation, WorldState
from .resolver import neighbors


def holds(lit: Literal, world: WorldState) -> bool:
    if lit.relation == HOLDING:
        (obj_id,) = lit.args
        value = world.holding == obj_id
    else:
        subject, anchor = lit.args
        value = subject in neighbors(world, anchor, Relation(lit.relation))
    return value if lit.polarity else not value


def satisfies(formula: DNFFormula, world: WorldState) -> bool:
    """True if at least one conjunction has all its literals holding."""
    return any(all(holds(lit, world) for lit in conj) for conj in formula)
