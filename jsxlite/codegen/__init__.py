"""
Code generation utilities
"""

from .react import ReactGenerator, component_to_react
from .serializer import ComponentSerializer, save_component
from .plugins import Plugin
from .formatting import PrettierFormatter

__all__ = [
    "ReactGenerator", "component_to_react",
    "ComponentSerializer", "save_component",
    "Plugin",
    "PrettierFormatter",
]
