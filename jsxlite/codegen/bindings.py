"""
Binding expression processing

With per-field hooks every state field is its own local variable, so
``state.count`` has to become ``count``. The single-object strategies bind a
local ``state`` object and need no rewriting.
"""

import re

from ..config import ReactOptions
from ..core.types import StateType

_STATE_REF = re.compile(r"(?<![\w$.])state\s*\.\s*")
_PROPS_REF = re.compile(r"(?<![\w$.])props\s*\.\s*")


def strip_state_and_props_refs(
    code: str,
    include_state: bool = True,
    include_props: bool = True,
) -> str:
    """
    Turn ``state.x`` / ``props.x`` references into bare ``x``

    Args:
        code: JavaScript fragment
        include_state: Strip ``state.`` references
        include_props: Strip ``props.`` references

    Returns:
        Rewritten fragment
    """
    if include_props:
        code = _PROPS_REF.sub("", code)
    if include_state:
        code = _STATE_REF.sub("", code)
    return code


def process_binding(code: str, options: ReactOptions) -> str:
    """Rewrite a binding for the selected state strategy"""
    if options.state_type is not StateType.USE_STATE:
        return code
    return strip_state_and_props_refs(code, include_state=True, include_props=False)
