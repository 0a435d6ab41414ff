"""
Parser utilities
"""

from .component_parser import ComponentParser, from_json, load_component
from .expressions import parse_expression, transform_expression, rename_identifiers

__all__ = [
    "ComponentParser", "from_json", "load_component",
    "parse_expression", "transform_expression", "rename_identifiers",
]
