"""Loaders for the two external inputs (world snapshots, parse trees) and a JSON
form of goal formulas.

World JSON::

    {"stacks": [["e"], ["a", "l"]], "holding": null,
     "objects": {"a": {"form": "brick", "size": "large", "color": "green"}, ...}}

Parse JSON mirrors the parser output: ``{"command": "move", "entity": {"quantifier":
"the", "object": {...}}, "location": {"relation": "inside", "entity": {...}}}`` where
an object is either ``{"form", "size", "color"}`` or ``{"object": ..., "location": ...}``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .types import (
    Color,
    Command,
    DNFFormula,
    Entity,
    Form,
    Literal,
    Location,
    ObjectDefinition,
    ObjectDescription,
    ObjectFilter,
    Relation,
    RelativeObject,
    Size,
    WorldState,
)

_LEAF_FIELDS = {"form", "size", "color"}


def _enum(cls, value: Any):
    if value is None:
        return None
    try:
        return cls(str(value))
    except ValueError as e:
        raise ValueError(f"Unknown {cls.__name__.lower()}: {value!r}") from e


def world_from_dict(data: Mapping[str, Any]) -> WorldState:
    missing = {"stacks", "objects"}.difference(data.keys())
    if missing:
        raise ValueError(f"Missing required world fields: {sorted(missing)}")
    objects: dict[str, ObjectDefinition] = {}
    for obj_id, row in dict(data["objects"]).items():
        if "form" not in row:
            raise ValueError(f"Object {obj_id!r} has no form")
        objects[str(obj_id)] = ObjectDefinition(
            form=_enum(Form, row["form"]),
            size=_enum(Size, row.get("size")),
            color=_enum(Color, row.get("color")),
        )
    stacks = [[str(obj_id) for obj_id in stack] for stack in data["stacks"]]
    holding = data.get("holding")
    return WorldState(objects=objects, stacks=stacks, holding=str(holding) if holding else None)


def world_to_dict(world: WorldState) -> dict[str, Any]:
    return {
        "stacks": [list(stack) for stack in world.stacks],
        "holding": world.holding,
        "objects": {
            obj_id: {
                "form": d.form.value,
                "size": d.size.value if d.size else None,
                "color": d.color.value if d.color else None,
            }
            for obj_id, d in world.objects.items()
        },
    }


def load_world(path: str | Path) -> WorldState:
    return world_from_dict(json.loads(Path(path).read_text(encoding="utf-8")))


def description_from_dict(data: Mapping[str, Any]) -> ObjectDescription:
    if "object" in data or "location" in data:
        if "object" not in data or "location" not in data:
            raise ValueError("A relative object needs both 'object' and 'location'")
        if _LEAF_FIELDS.intersection(data.keys()):
            raise ValueError("A relative object cannot also carry form/size/color")
        return RelativeObject(base=description_from_dict(data["object"]), location=location_from_dict(data["location"]))
    unknown = set(data.keys()) - _LEAF_FIELDS
    if unknown:
        raise ValueError(f"Unknown object fields: {sorted(unknown)}")
    if all(data.get(name) is None for name in _LEAF_FIELDS):
        raise ValueError("An object needs at least one of form, size or color")
    return ObjectFilter(
        form=_enum(Form, data.get("form")),
        size=_enum(Size, data.get("size")),
        color=_enum(Color, data.get("color")),
    )


def entity_from_dict(data: Mapping[str, Any]) -> Entity:
    if "object" not in data:
        raise ValueError("An entity needs an 'object'")
    return Entity(description=description_from_dict(data["object"]), quantifier=str(data.get("quantifier", "any")))


def location_from_dict(data: Mapping[str, Any]) -> Location:
    if "relation" not in data or "entity" not in data:
        raise ValueError("A location needs 'relation' and 'entity'")
    return Location(relation=_enum(Relation, data["relation"]), entity=entity_from_dict(data["entity"]))


def command_from_dict(data: Mapping[str, Any]) -> Command:
    if "command" not in data or "entity" not in data:
        raise ValueError("A command needs 'command' and 'entity'")
    location = data.get("location")
    return Command(
        command=str(data["command"]),
        entity=entity_from_dict(data["entity"]),
        location=location_from_dict(location) if location is not None else None,
    )


def load_parses(path: str | Path) -> list[Command]:
    """Load a JSON list of parse trees (a single object is accepted too)."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = [data]
    return [command_from_dict(row) for row in data]


def formula_to_json(formula: DNFFormula) -> list[list[dict[str, Any]]]:
    return [[{"polarity": lit.polarity, "relation": lit.relation, "args": list(lit.args)} for lit in conj] for conj in formula]


def formula_from_json(data: list[list[Mapping[str, Any]]]) -> DNFFormula:
    return [
        [Literal(bool(lit["polarity"]), str(lit["relation"]), tuple(str(a) for a in lit["args"])) for lit in conj]
        for conj in data
    ]
