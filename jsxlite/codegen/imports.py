"""
Import statement rendering
"""

from typing import Iterable, List

from ..core.types import CORE_PACKAGE_PATH
from ..dsl.nodes import Component, JSImport

# Order in which react hooks are listed in the generated import
REACT_HOOKS = ("useState", "useRef", "useEffect")


def render_import(item: JSImport) -> str:
    """
    Render one import statement

    Args:
        item: Import description

    Returns:
        ``import ... from '...';`` source
    """
    default = [local for local, imported in item.imports.items() if imported == "default"]
    namespace = [local for local, imported in item.imports.items() if imported == "*"]
    named = [
        local if local == imported else f"{imported} as {local}"
        for local, imported in item.imports.items()
        if imported not in ("default", "*")
    ]

    clauses = list(default)
    clauses.extend(f"* as {local}" for local in namespace)
    if named:
        clauses.append("{ " + ", ".join(named) + " }")
    if not clauses:
        return f"import '{item.path}';"
    return f"import {', '.join(clauses)} from '{item.path}';"


def render_component_imports(component: Component) -> str:
    """Imports declared by the component, minus the IR's own package"""
    return "\n".join(
        render_import(item)
        for item in component.imports
        if item.path != CORE_PACKAGE_PATH
    )


def render_react_import(hooks: Iterable[str]) -> str:
    """
    Import of the react hooks in use

    Args:
        hooks: Hook names

    Returns:
        Import line, empty when no hook is used
    """
    used = set(hooks)
    names: List[str] = [hook for hook in REACT_HOOKS if hook in used]
    if not names:
        return ""
    return f"import {{ {', '.join(names)} }} from 'react';"
