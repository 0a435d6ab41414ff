"""
Style map helpers for jsxlite components

A style map is the value of a node's ``css`` binding: a JSON5 object whose
string values are CSS declarations and whose object values are nested rules
(pseudo selectors, ``@media`` queries).
"""

import re
from typing import Any, Dict, List

import json5

__all__ = [
    "capitalize",
    "camel_case",
    "dash_case",
    "parse_style_map",
    "style_map_to_css",
    "has_style_declarations",
]


def capitalize(name: str) -> str:
    """Upper-case the first character only (``count`` -> ``Count``)"""
    return name[:1].upper() + name[1:]


def camel_case(name: str) -> str:
    """
    Convert dash or snake separated words to camelCase

    Args:
        name: Name such as ``my-button`` or ``my_button``

    Returns:
        camelCase name
    """
    parts = [part for part in re.split(r"[-_\s]+", name) if part]
    if not parts:
        return ""
    return parts[0] + "".join(capitalize(part) for part in parts[1:])


def dash_case(name: str) -> str:
    """Convert camelCase to dash-case (``fontSize`` -> ``font-size``)"""
    return re.sub(r"([A-Z])", r"-\1", name).lower().lstrip("-")


def parse_style_map(code: str) -> Dict[str, Any]:
    """
    Parse a ``css`` binding into a style map

    Args:
        code: JSON5 object literal

    Returns:
        Style map
    """
    value = json5.loads(code)
    if not isinstance(value, dict):
        raise ValueError(f"css binding is not an object literal: {code!r}")
    return value


def has_style_declarations(code: str) -> bool:
    """Whether a ``css`` binding holds anything besides an empty object"""
    return re.sub(r"\s+", "", code) not in ("", "{}")


def style_map_to_css(style_map: Dict[str, Any]) -> List[str]:
    """
    Render the flat declarations of a style map

    Nested maps are left to the caller; non-string scalars are skipped.

    Args:
        style_map: Parsed style map

    Returns:
        Declaration lines such as ``font-size: 12px;``
    """
    return [
        f"{dash_case(key)}: {value};"
        for key, value in style_map.items()
        if isinstance(value, str)
    ]
