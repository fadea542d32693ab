"""Resolve nested object/location/entity descriptions to sets of world identifiers.

All three resolvers are mutually recursive and pure over a fixed WorldState. An
empty set is a valid answer and is passed upward unchanged.
"""

from __future__ import annotations

from ..tracing import TraceSink, emit
from ..types import FLOOR, Entity, Form, Location, ObjectDescription, ObjectFilter, Relation, WorldState
from .matcher import matches


def neighbors(world: WorldState, anchor: str, relation: Relation) -> set[str]:
    """Objects standing in `relation` to `anchor`."""
    if anchor == FLOOR:
        if relation in (Relation.ONTOP, Relation.INSIDE):
            return {stack[0] for stack in world.stacks if stack}
        if relation == Relation.ABOVE:
            return {obj_id for stack in world.stacks for obj_id in stack}
        return set()

    pos = world.position(anchor)
    if pos is None:
        # Held objects have no neighbours.
        return set()
    s, p = pos
    stack = world.stacks[s]

    if relation in (Relation.ONTOP, Relation.INSIDE):
        return {stack[p + 1]} if p + 1 < len(stack) else set()
    if relation == Relation.ABOVE:
        return set(stack[p + 1:])
    if relation == Relation.UNDER:
        return set(stack[:p])
    if relation == Relation.LEFTOF:
        return set(world.stacks[s - 1]) if s > 0 else set()
    if relation == Relation.RIGHTOF:
        return set(world.stacks[s + 1]) if s + 1 < len(world.stacks) else set()
    if relation == Relation.BESIDE:
        return neighbors(world, anchor, Relation.LEFTOF) | neighbors(world, anchor, Relation.RIGHTOF)
    raise ValueError(f"Unknown relation: {relation!r}")


def resolve_object(desc: ObjectDescription, world: WorldState, *, trace: TraceSink | None = None) -> set[str]:
    if isinstance(desc, ObjectFilter):
        if desc.form == Form.FLOOR:
            found = {FLOOR}
        else:
            found = {obj_id for obj_id in world.present_ids() if matches(world.definition(obj_id), desc)}
    else:
        base = resolve_object(desc.base, world, trace=trace)
        found = base & resolve_location(desc.location, world, trace=trace)
    emit(trace, "resolve.object", description=desc, found=found)
    return found


def resolve_location(loc: Location, world: WorldState, *, trace: TraceSink | None = None) -> set[str]:
    anchors = resolve_entity(loc.entity, world, trace=trace)
    found: set[str] = set()
    for anchor in anchors:
        found |= neighbors(world, anchor, loc.relation)
    emit(trace, "resolve.location", relation=loc.relation, anchors=anchors, found=found)
    return found


def resolve_entity(entity: Entity, world: WorldState, *, trace: TraceSink | None = None) -> set[str]:
    return resolve_object(entity.description, world, trace=trace)
