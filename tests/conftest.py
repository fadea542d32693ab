from __future__ import annotations

import copy

import pytest

from blockworld.io import world_from_dict
from blockworld.types import WorldState

SMALL_WORLD = {
    "stacks": [["e"], ["a", "l"], [], [], ["i", "h", "j"], [], [], ["k", "g", "c", "b"], [], ["d", "m", "f"]],
    "holding": None,
    "objects": {
        "a": {"form": "brick", "size": "large", "color": "green"},
        "b": {"form": "brick", "size": "small", "color": "white"},
        "c": {"form": "plank", "size": "large", "color": "red"},
        "d": {"form": "plank", "size": "small", "color": "green"},
        "e": {"form": "ball", "size": "large", "color": "white"},
        "f": {"form": "ball", "size": "small", "color": "black"},
        "g": {"form": "table", "size": "large", "color": "blue"},
        "h": {"form": "table", "size": "small", "color": "red"},
        "i": {"form": "pyramid", "size": "large", "color": "yellow"},
        "j": {"form": "pyramid", "size": "small", "color": "red"},
        "k": {"form": "box", "size": "large", "color": "yellow"},
        "l": {"form": "box", "size": "large", "color": "red"},
        "m": {"form": "box", "size": "small", "color": "blue"},
    },
}


@pytest.fixture
def small_world() -> WorldState:
    return world_from_dict(SMALL_WORLD)


@pytest.fixture
def tableless_world() -> WorldState:
    # "t" is defined but placed nowhere, so it is not part of the world.
    return world_from_dict(
        {
            "stacks": [["e"], ["k"], []],
            "holding": None,
            "objects": {
                "e": {"form": "ball", "size": "large", "color": "white"},
                "k": {"form": "box", "size": "large", "color": "yellow"},
                "t": {"form": "table", "size": "large", "color": "blue"},
            },
        }
    )


@pytest.fixture
def small_world_dict() -> dict:
    return copy.deepcopy(SMALL_WORLD)
