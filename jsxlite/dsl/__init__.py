"""
Python DSL for building jsxlite components by hand
"""

from .nodes import (
    Node,
    Component,
    Hooks,
    JSImport,
    Text,
    Fragment,
    For,
    Show,
    walk_nodes,
)

from .styles import capitalize, camel_case, dash_case, parse_style_map, style_map_to_css

__all__ = [
    # IR
    "Node", "Component", "Hooks", "JSImport",
    "Text", "Fragment", "For", "Show",
    "walk_nodes",

    # Style helpers
    "capitalize", "camel_case", "dash_case", "parse_style_map", "style_map_to_css",
]
