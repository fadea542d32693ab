"""Command interpretation: from parse trees to DNF goal formulas.

- matcher: attribute matching of one object against a leaf description
- resolver: nested object/location/entity resolution to identifier sets
- physics: the fixed table of placement laws
- goals: goal construction, multi-parse interpretation and text rendering
- facts: evaluating literals and formulas against a world
"""

from .facts import holds, satisfies
from .goals import (
    Interpretation,
    NoInterpretationError,
    build_goal,
    format_formula,
    format_interpretation,
    format_literal,
    interpret,
)
from .matcher import matches
from .physics import is_legal, violated_rule
from .resolver import neighbors, resolve_entity, resolve_location, resolve_object

__all__ = [
    "Interpretation",
    "NoInterpretationError",
    "build_goal",
    "format_formula",
    "format_interpretation",
    "format_literal",
    "holds",
    "interpret",
    "is_legal",
    "matches",
    "neighbors",
    "resolve_entity",
    "resolve_location",
    "resolve_object",
    "satisfies",
    "violated_rule",
]
