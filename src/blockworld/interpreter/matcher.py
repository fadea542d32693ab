from __future__ import annotations

from ..types import Form, ObjectDefinition, ObjectFilter


def matches(candidate: ObjectDefinition, description: ObjectFilter) -> bool:
    """True if every attribute set in `description` equals the candidate's.

    The "anyform" wildcard matches any form. Floor descriptions are resolved by the
    caller and never reach this function.
    """
    if description.form is not None and description.form != Form.ANYFORM:
        if candidate.form != description.form:
            return False
    if description.size is not None and candidate.size != description.size:
        return False
    if description.color is not None and candidate.color != description.color:
        return False
    return True
