from __future__ import annotations

from blockworld.interpreter.resolver import neighbors, resolve_entity, resolve_location, resolve_object
from blockworld.io import description_from_dict, location_from_dict
from blockworld.tracing import MemoryTrace
from blockworld.types import FLOOR, Entity, Form, Location, ObjectFilter, Relation, RelativeObject, WorldState


def _loc(relation: str, **obj) -> Location:
    return location_from_dict({"relation": relation, "entity": {"quantifier": "any", "object": obj}})


def test_leaf_description_resolves_by_attributes(small_world):
    assert resolve_object(ObjectFilter(form=Form.BOX), small_world) == {"k", "l", "m"}
    assert resolve_object(description_from_dict({"form": "anyform", "color": "blue"}), small_world) == {"g", "m"}
    assert resolve_object(ObjectFilter(form=Form.TABLE, size=None), small_world) == {"g", "h"}


def test_floor_resolves_to_virtual_identifier(small_world):
    assert resolve_object(ObjectFilter(form=Form.FLOOR), small_world) == {FLOOR}


def test_unplaced_objects_never_resolve(tableless_world):
    assert resolve_object(ObjectFilter(form=Form.TABLE), tableless_world) == set()


def test_held_object_resolves(small_world):
    stacks = [list(s) for s in small_world.stacks]
    stacks[0] = []
    world = WorldState(objects=small_world.objects, stacks=stacks, holding="e")
    assert resolve_object(ObjectFilter(form=Form.BALL), world) == {"e", "f"}
    assert neighbors(world, "e", Relation.BESIDE) == set()


def test_vertical_relations(small_world):
    assert neighbors(small_world, "g", Relation.ONTOP) == {"c"}
    assert neighbors(small_world, "m", Relation.INSIDE) == {"f"}
    assert neighbors(small_world, "b", Relation.ONTOP) == set()
    assert neighbors(small_world, "k", Relation.ABOVE) == {"g", "c", "b"}
    assert neighbors(small_world, "b", Relation.UNDER) == {"k", "g", "c"}
    assert neighbors(small_world, "k", Relation.UNDER) == set()


def test_horizontal_relations_use_adjacent_stack_only(small_world):
    assert neighbors(small_world, "a", Relation.LEFTOF) == {"e"}
    assert neighbors(small_world, "l", Relation.RIGHTOF) == set()
    assert neighbors(small_world, "k", Relation.BESIDE) == set()
    assert neighbors(small_world, "e", Relation.BESIDE) == {"a", "l"}


def test_horizontal_relations_empty_at_boundaries(small_world):
    assert neighbors(small_world, "e", Relation.LEFTOF) == set()
    assert neighbors(small_world, "f", Relation.RIGHTOF) == set()


def test_floor_as_anchor(small_world):
    assert neighbors(small_world, FLOOR, Relation.ONTOP) == {"e", "a", "i", "k", "d"}
    assert len(neighbors(small_world, FLOOR, Relation.ABOVE)) == 13
    assert neighbors(small_world, FLOOR, Relation.UNDER) == set()
    assert neighbors(small_world, FLOOR, Relation.BESIDE) == set()


def test_location_unions_over_anchors(small_world):
    # Objects directly on top of any table.
    assert resolve_location(_loc("ontop", form="table"), small_world) == {"c", "j"}
    # Objects inside any box.
    assert resolve_location(_loc("inside", form="box"), small_world) == {"g", "f"}


def test_relative_object_intersects_base_and_location(small_world):
    ball_in_box = RelativeObject(ObjectFilter(form=Form.BALL), _loc("inside", form="box"))
    assert resolve_object(ball_in_box, small_world) == {"f"}

    box_under_ball = description_from_dict(
        {"object": {"form": "box"}, "location": {"relation": "under", "entity": {"object": {"form": "ball"}}}}
    )
    assert resolve_object(box_under_ball, small_world) == {"m"}


def test_nested_relative_objects(small_world):
    # "the plank on the table that is on the box"
    table_on_box = {"object": {"form": "table"}, "location": {"relation": "ontop", "entity": {"object": {"form": "box"}}}}
    plank_on_that = description_from_dict(
        {"object": {"form": "plank"}, "location": {"relation": "ontop", "entity": {"object": table_on_box}}}
    )
    assert resolve_object(plank_on_that, small_world) == {"c"}
    assert resolve_entity(Entity(plank_on_that), small_world) == {"c"}


def test_object_on_floor(small_world):
    on_floor = RelativeObject(ObjectFilter(form=Form.BOX), _loc("ontop", form="floor"))
    assert resolve_object(on_floor, small_world) == {"k"}


def test_empty_results_propagate(small_world):
    nothing = RelativeObject(ObjectFilter(form=Form.PYRAMID), _loc("inside", form="ball"))
    assert resolve_object(nothing, small_world) == set()


def test_resolution_is_traced(small_world):
    trace = MemoryTrace()
    resolve_location(_loc("ontop", form="table"), small_world, trace=trace)
    events = trace.of_kind("resolve.location")
    assert len(events) == 1
    assert events[0].data["relation"] == "ontop"
    assert events[0].data["anchors"] == ["g", "h"]
    assert events[0].data["found"] == ["c", "j"]
