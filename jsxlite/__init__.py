"""
jsxlite
Describe a UI component once, emit it for React

Example usage:
    import jsxlite
    from jsxlite.dsl import Component, Node, Text

    counter = Component(
        name="Counter",
        state={"count": 0},
        children=[
            Node(
                name="button",
                bindings={"onClick": "state.count = state.count + 1"},
                children=[Text(binding="state.count")],
            ),
        ],
    )

    # Per-field hooks instead of the default mobx observable
    code = jsxlite.component_to_react(
        counter,
        jsxlite.ReactOptions(state_type="useState", prettier=False),
    )

    # Save as JSON IR and load it back
    jsxlite.save_component(counter, "counter.json")
    loaded = jsxlite.load_component("counter.json")
"""

# Export IR
from jsxlite.dsl.nodes import (
    Component,
    Node,
    Hooks,
    JSImport,
    Text,
    Fragment,
    For,
    Show,
    walk_nodes,
)

# Export generator and configuration
from jsxlite.config import ReactOptions
from jsxlite.codegen.react import ReactGenerator, component_to_react
from jsxlite.codegen.plugins import Plugin
from jsxlite.codegen.formatting import PrettierFormatter

# Export IR loading and saving
from jsxlite.codegen.serializer import ComponentSerializer, save_component
from jsxlite.parser.component_parser import ComponentParser, from_json, load_component

# Export core types and errors
from jsxlite.core.types import NodeKind, StateType, StylesType
from jsxlite.errors import (
    JsxLiteError,
    ExpressionSyntaxError,
    MissingBindingError,
    InvalidComponentError,
    ConfigurationError,
    FormatError,
    PluginError,
)

__version__ = "0.1.0"
__all__ = [
    # IR
    "Component", "Node", "Hooks", "JSImport",
    "Text", "Fragment", "For", "Show", "walk_nodes",

    # Codegen
    "ReactOptions", "ReactGenerator", "component_to_react",
    "Plugin", "PrettierFormatter",

    # Loading and saving
    "ComponentSerializer", "save_component",
    "ComponentParser", "from_json", "load_component",

    # Types
    "NodeKind", "StateType", "StylesType",

    # Errors
    "JsxLiteError", "ExpressionSyntaxError", "MissingBindingError",
    "InvalidComponentError", "ConfigurationError", "FormatError", "PluginError",
]
