"""
Lifecycle hook translation

React function components have no constructor. ``init`` therefore runs
during render behind a ``firstRender`` flag: flipping the flag schedules a
re-render in which it is false, so the body runs once per mounted instance
before the tree is first returned. ``onMount`` maps to an effect with an
empty dependency list.
"""

import textwrap

from ..config import ReactOptions
from ..core.types import StateType
from ..dsl.nodes import Component
from .bindings import process_binding
from .state import update_state_setters_in_code


def get_init_code(component: Component) -> str:
    """Guarded one-shot block for the ``init`` hook, empty without one"""
    init = component.hooks.init
    if not init:
        return ""
    return "\n".join([
        "const [firstRender, setFirstRender] = useState(true);",
        "if (firstRender) {",
        "  setFirstRender(false);",
        textwrap.indent(init.strip(), "  "),
        "}",
    ])


def get_mount_code(component: Component, options: ReactOptions) -> str:
    """
    Effect running the ``onMount`` hook after the first commit

    Args:
        component: Component whose hook is translated
        options: Generator options

    Returns:
        ``useEffect`` call, empty without an ``onMount`` hook
    """
    on_mount = component.hooks.on_mount
    if not on_mount:
        return ""
    if options.state_type is StateType.USE_STATE:
        on_mount = update_state_setters_in_code(on_mount)
    body = process_binding(on_mount, options).strip()
    return "\n".join([
        "useEffect(() => {",
        textwrap.indent(body, "  "),
        "}, []);",
    ])
