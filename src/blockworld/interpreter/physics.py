"""Physical laws of the stacking world.

Rules are checked in order and the first violated rule decides. Each rule
receives the moving object, the relation and the destination definitions.
"""

from __future__ import annotations

from collections.abc import Callable

from ..tracing import TraceSink, emit
from ..types import FLOOR, Form, ObjectDefinition, Relation, Size, WorldState

_Rule = Callable[[ObjectDefinition, Relation, ObjectDefinition], bool]

_SUPPORTED = (Relation.ONTOP, Relation.INSIDE, Relation.ABOVE)


def _small_supports_large(m: ObjectDefinition, rel: Relation, d: ObjectDefinition) -> bool:
    return m.size == Size.LARGE and d.size == Size.SMALL and rel in _SUPPORTED


def _small_under_large(m: ObjectDefinition, rel: Relation, d: ObjectDefinition) -> bool:
    return m.size == Size.SMALL and d.size == Size.LARGE and rel == Relation.UNDER


def _ball_rolls_away(m: ObjectDefinition, rel: Relation, d: ObjectDefinition) -> bool:
    if m.form != Form.BALL:
        return False
    unsupported = d.form not in (Form.FLOOR, Form.BOX) and rel in (Relation.ONTOP, Relation.INSIDE)
    return unsupported or rel == Relation.UNDER


def _box_contents(m: ObjectDefinition, rel: Relation, d: ObjectDefinition) -> bool:
    if d.form != Form.BOX:
        return False
    if rel == Relation.ONTOP:
        return True
    return m.form in (Form.BOX, Form.PYRAMID, Form.PLANK) and m.size == d.size


def _ball_supports_nothing(m: ObjectDefinition, rel: Relation, d: ObjectDefinition) -> bool:
    return d.form == Form.BALL and rel in (Relation.ONTOP, Relation.ABOVE)


def _box_on_pyramid(m: ObjectDefinition, rel: Relation, d: ObjectDefinition) -> bool:
    return d.form == Form.PYRAMID and m.form == Form.BOX and m.size == d.size


def _box_on_small_brick(m: ObjectDefinition, rel: Relation, d: ObjectDefinition) -> bool:
    return d.form == Form.BRICK and m.form == Form.BOX and d.size == Size.SMALL


RULES: list[tuple[str, _Rule]] = [
    ("small_supports_large", _small_supports_large),
    ("small_under_large", _small_under_large),
    ("ball_rolls_away", _ball_rolls_away),
    ("box_contents", _box_contents),
    ("ball_supports_nothing", _ball_supports_nothing),
    ("box_on_pyramid", _box_on_pyramid),
    ("box_on_small_brick", _box_on_small_brick),
]


def violated_rule(move_id: str, relation: Relation, dest_id: str, world: WorldState) -> str | None:
    """Name of the first law broken by placing `move_id` in `relation` to `dest_id`, else None."""
    if move_id == dest_id:
        return "self_relation"
    if dest_id == FLOOR and relation not in (Relation.ONTOP, Relation.ABOVE):
        return "floor_relation"
    move = world.definition(move_id)
    dest = world.definition(dest_id)
    for name, rule in RULES:
        if rule(move, relation, dest):
            return name
    return None


def is_legal(
    move_id: str,
    relation: Relation,
    dest_id: str,
    world: WorldState,
    *,
    trace: TraceSink | None = None,
) -> bool:
    rule = violated_rule(move_id, relation, dest_id, world)
    if rule is not None:
        emit(trace, "physics.reject", move=move_id, relation=relation, dest=dest_id, rule=rule)
        return False
    return True
