"""Blocks-world command interpretation and generic A* search."""

from .interpreter import NoInterpretationError, build_goal, format_formula, interpret, satisfies
from .search import Edge, NoPath, SearchResult, search
from .types import Command, Literal, ObjectDefinition, WorldState

__all__ = [
    "Command",
    "Edge",
    "Literal",
    "NoInterpretationError",
    "NoPath",
    "ObjectDefinition",
    "SearchResult",
    "WorldState",
    "build_goal",
    "format_formula",
    "interpret",
    "satisfies",
    "search",
]
