"""
State declarations for the React generator

Two families of strategies exist. ``useState`` splits state into one
value/setter hook pair per field, which requires rewriting every
``state.x = value`` assignment into ``setX(value)``. The single-object
strategies (mobx, valtio, solid, builder) keep one ``state`` object created
by a library-specific hook.
"""

import logging
import re
from typing import Optional

import json5
from tree_sitter import Node as SyntaxNode

from ..config import ReactOptions
from ..core.types import FUNCTION_LITERAL_PREFIX, METHOD_LITERAL_PREFIX, StateType
from ..dsl.nodes import Component
from ..dsl.styles import capitalize
from ..parser.expressions import Render, node_text, transform_expression
from .bindings import process_binding

logger = logging.getLogger(__name__)

_METHOD_HEAD = re.compile(r"^(get )?")

# strategy -> (declaration template, import line)
_OBJECT_STRATEGIES = {
    StateType.MOBX: (
        "const state = useLocalObservable(() => ({state}));",
        "import { useLocalObservable } from 'mobx-react-lite';",
    ),
    StateType.VALTIO: (
        "const state = useLocalProxy({state});",
        "import { useLocalProxy } from 'valtio/utils';",
    ),
    StateType.SOLID: (
        "const state = useMutable({state});",
        "import { useMutable } from 'react-solid-state';",
    ),
    # useBuilderState is provided by the host application
    StateType.BUILDER: (
        "const state = useBuilderState({state});",
        None,
    ),
}


def _method_source(value: str) -> str:
    """Method literal code without its prefix or surrounding whitespace"""
    return value[len(METHOD_LITERAL_PREFIX):].strip()

# ============================================================================
# Mutation rewriting
# ============================================================================

def _setter_call(node: SyntaxNode, render: Render) -> Optional[str]:
    """``state.<field> = <expr>`` -> ``set<Field>(<expr>)``"""
    if node.type != "assignment_expression":
        return None
    left = node.child_by_field_name("left")
    if left is None or left.type != "member_expression":
        return None
    target = left.child_by_field_name("object")
    field = left.child_by_field_name("property")
    if target is None or target.type != "identifier" or node_text(target) != "state":
        return None
    if field is None or field.type != "property_identifier":
        return None
    right = node.child_by_field_name("right")
    return f"set{capitalize(node_text(field))}({render(right)})"


def update_state_setters_in_code(code: str) -> str:
    """
    Replace assignments to state fields with setter calls

    Only plain ``=`` assignments are rewritten; compound assignments and
    ``++``/``--`` are left as written.

    Args:
        code: JavaScript fragment

    Returns:
        Rewritten fragment
    """
    return transform_expression(code, _setter_call)


def update_state_setters(component: Component) -> None:
    """Run the mutation rewrite over every binding of the tree, in place"""
    for node in component.walk():
        for key, value in node.bindings.items():
            new_value = update_state_setters_in_code(value)
            if new_value != value:
                node.bindings[key] = new_value

# ============================================================================
# Getter conversion
# ============================================================================

def getters_to_functions(component: Component) -> None:
    """
    Turn reads of getter state entries into calls, in place

    ``get fullName() {...}`` becomes a plain function with per-field hooks,
    so ``state.fullName`` must read ``state.fullName()``.

    Args:
        component: Component to rewrite (mutated)
    """
    getter_keys = [
        key for key, value in component.state.items()
        if isinstance(value, str)
        and value.startswith(METHOD_LITERAL_PREFIX)
        and _method_source(value).startswith("get ")
    ]
    if not getter_keys:
        return

    patterns = [
        re.compile(r"(?<![\w$.])state\s*\.\s*" + re.escape(key) + r"(?![\w$])(?!\s*\()")
        for key in getter_keys
    ]

    def convert(code: str) -> str:
        for key, pattern in zip(getter_keys, patterns):
            code = pattern.sub(f"state.{key}()", code)
        return code

    for key, value in component.state.items():
        if isinstance(value, str):
            for prefix in (FUNCTION_LITERAL_PREFIX, METHOD_LITERAL_PREFIX):
                if value.startswith(prefix):
                    component.state[key] = prefix + convert(value[len(prefix):])
                    break

    for node in component.walk():
        for key, value in node.bindings.items():
            node.bindings[key] = convert(value)

    hooks = component.hooks
    if hooks.init:
        hooks.init = convert(hooks.init)
    if hooks.on_mount:
        hooks.on_mount = convert(hooks.on_mount)

# ============================================================================
# Declarations
# ============================================================================

def get_use_state_code(component: Component, options: ReactOptions) -> str:
    """
    Per-field ``useState`` declarations

    Function literals become lazily initialised values, method literals
    become standalone function declarations, and everything else is
    serialized as a JSON5 literal.

    Args:
        component: Component whose state is declared
        options: Generator options

    Returns:
        Declaration lines
    """
    lines = []
    for key, value in component.state.items():
        if isinstance(value, str) and value.startswith(METHOD_LITERAL_PREFIX):
            method = _method_source(value)
            lines.append(process_binding(_METHOD_HEAD.sub("function ", method, count=1), options))
            continue

        if isinstance(value, str) and value.startswith(FUNCTION_LITERAL_PREFIX):
            initial = value[len(FUNCTION_LITERAL_PREFIX):]
        else:
            initial = json5.dumps(value)
        lines.append(
            f"const [{key}, set{capitalize(key)}] = "
            f"useState(() => ({process_binding(initial, options)}));"
        )
    return "\n".join(lines)


def get_state_object_string(component: Component) -> str:
    """
    Serialize the whole state mapping as one object literal

    Args:
        component: Component whose state is serialized

    Returns:
        Object literal source
    """
    members = []
    for key, value in component.state.items():
        if isinstance(value, str) and value.startswith(FUNCTION_LITERAL_PREFIX):
            members.append(f"{key}: {value[len(FUNCTION_LITERAL_PREFIX):]}")
        elif isinstance(value, str) and value.startswith(METHOD_LITERAL_PREFIX):
            members.append(_method_source(value))
        else:
            members.append(f"{key}: {json5.dumps(value)}")
    if not members:
        return "{}"
    return "{ " + ", ".join(members) + " }"


def get_state_code(component: Component, options: ReactOptions) -> str:
    """
    State declaration block for the selected strategy

    Args:
        component: Component whose state is declared
        options: Generator options

    Returns:
        Declaration source, empty when the component has no state
    """
    if not component.state:
        return ""
    if options.state_type is StateType.USE_STATE:
        return get_use_state_code(component, options)
    template, _ = _OBJECT_STRATEGIES[options.state_type]
    return template.format(state=get_state_object_string(component))


def get_state_import(options: ReactOptions) -> Optional[str]:
    """Import line needed by a single-object strategy, if any"""
    if options.state_type is StateType.USE_STATE:
        return None
    return _OBJECT_STRATEGIES[options.state_type][1]
