from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Union

FLOOR = "floor"


class Form(str, Enum):
    BRICK = "brick"
    PLANK = "plank"
    BALL = "ball"
    PYRAMID = "pyramid"
    BOX = "box"
    TABLE = "table"
    FLOOR = "floor"
    # Wildcard accepted in descriptions only ("an object").
    ANYFORM = "anyform"


class Size(str, Enum):
    SMALL = "small"
    LARGE = "large"


class Color(str, Enum):
    RED = "red"
    BLACK = "black"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    WHITE = "white"


class Relation(str, Enum):
    ONTOP = "ontop"
    INSIDE = "inside"
    ABOVE = "above"
    UNDER = "under"
    BESIDE = "beside"
    LEFTOF = "leftof"
    RIGHTOF = "rightof"


HOLDING = "holding"


@dataclass(frozen=True)
class ObjectDefinition:
    """Physical attributes of one object. The floor has no size or color."""
    form: Form
    size: Size | None = None
    color: Color | None = None


FLOOR_DEFINITION = ObjectDefinition(Form.FLOOR)


@dataclass(frozen=True)
class WorldState:
    """Read-only snapshot: object definitions, stacks (bottom first) and the held object.

    `objects` may define more identifiers than are placed; only identifiers that sit
    in a stack or are held belong to the world.
    """
    objects: Mapping[str, ObjectDefinition]
    stacks: Sequence[Sequence[str]]
    holding: str | None = None

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for stack in self.stacks:
            for obj_id in stack:
                if obj_id == FLOOR:
                    raise ValueError("'floor' cannot be placed inside a stack")
                if obj_id in seen:
                    raise ValueError(f"Object {obj_id!r} appears more than once in the stacks")
                if obj_id not in self.objects:
                    raise ValueError(f"Object {obj_id!r} has no definition")
                seen.add(obj_id)
        if self.holding is not None:
            if self.holding in seen:
                raise ValueError(f"Held object {self.holding!r} is also stacked")
            if self.holding not in self.objects:
                raise ValueError(f"Held object {self.holding!r} has no definition")

    @cached_property
    def _positions(self) -> dict[str, tuple[int, int]]:
        return {obj_id: (s, p) for s, stack in enumerate(self.stacks) for p, obj_id in enumerate(stack)}

    def position(self, obj_id: str) -> tuple[int, int] | None:
        """(stack index, height in stack) of a stacked object, or None."""
        return self._positions.get(obj_id)

    def present_ids(self) -> list[str]:
        """Identifiers in world order: stacks left to right, bottom to top, then the held one."""
        ids = [obj_id for stack in self.stacks for obj_id in stack]
        if self.holding is not None:
            ids.append(self.holding)
        return ids

    def definition(self, obj_id: str) -> ObjectDefinition:
        if obj_id == FLOOR:
            return FLOOR_DEFINITION
        return self.objects[obj_id]


# ---------------------------------------------------------------------------
# Command trees as produced by the parser


@dataclass(frozen=True)
class ObjectFilter:
    """Leaf description: every attribute that is set must match."""
    form: Form | None = None
    size: Size | None = None
    color: Color | None = None


@dataclass(frozen=True)
class RelativeObject:
    """Composite description: an object matching `base` that also stands in `location`."""
    base: ObjectDescription
    location: Location


ObjectDescription = Union[ObjectFilter, RelativeObject]


@dataclass(frozen=True)
class Entity:
    description: ObjectDescription
    # Carried from the parse; does not change resolution.
    quantifier: str = "any"


@dataclass(frozen=True)
class Location:
    relation: Relation
    entity: Entity


@dataclass(frozen=True)
class Command:
    command: str  # take|put|move
    entity: Entity
    location: Location | None = None

    def __post_init__(self) -> None:
        if self.command not in ("take", "put", "move"):
            raise ValueError(f"Unknown command: {self.command!r}")
        if self.command == "take" and self.location is not None:
            raise ValueError("'take' does not accept a location")
        if self.command != "take" and self.location is None:
            raise ValueError(f"'{self.command}' requires a location")


# ---------------------------------------------------------------------------
# Goal formulas


@dataclass(frozen=True)
class Literal:
    """A relation that should (polarity=True) or should not hold among `args`."""
    polarity: bool
    relation: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return ("" if self.polarity else "-") + f"{self.relation}({','.join(self.args)})"


Conjunction = list[Literal]
DNFFormula = list[Conjunction]
