"""
Core type definitions
"""

from .types import (
    NodeKind,
    StateType,
    StylesType,
    FUNCTION_LITERAL_PREFIX,
    METHOD_LITERAL_PREFIX,
    SELF_CLOSING_TAGS,
)

__all__ = [
    "NodeKind",
    "StateType",
    "StylesType",
    "FUNCTION_LITERAL_PREFIX",
    "METHOD_LITERAL_PREFIX",
    "SELF_CLOSING_TAGS",
]
