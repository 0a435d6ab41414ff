"""
Reference (DOM handle) discovery and accessor rewriting
"""

import logging
from typing import Callable, List

from ..core.types import FUNCTION_LITERAL_PREFIX, METHOD_LITERAL_PREFIX, REF_KEY
from ..dsl.nodes import Component
from ..parser.expressions import rename_identifiers

logger = logging.getLogger(__name__)


def get_refs(component: Component) -> List[str]:
    """
    Collect the reference names declared through ``ref`` bindings

    Args:
        component: Component to inspect

    Returns:
        Reference names in first-seen order, without duplicates
    """
    refs: List[str] = []
    for node in component.walk():
        ref = node.bindings.get(REF_KEY)
        if isinstance(ref, str) and ref.strip() and ref.strip() not in refs:
            refs.append(ref.strip())
    return refs


def map_refs(component: Component, mapper: Callable[[str], str]) -> None:
    """
    Rewrite every use of a reference name in place

    Covers all bindings except ``ref`` itself, both lifecycle hooks, and
    function or method state values.

    Args:
        component: Component to rewrite (mutated)
        mapper: Produces the accessor text for a reference name
    """
    refs = get_refs(component)
    if not refs:
        return
    logger.debug("Mapping refs %s in %s", refs, component.name)

    for key, value in component.state.items():
        if not isinstance(value, str):
            continue
        for prefix in (FUNCTION_LITERAL_PREFIX, METHOD_LITERAL_PREFIX):
            if value.startswith(prefix):
                code = value[len(prefix):]
                component.state[key] = prefix + rename_identifiers(code, refs, mapper)
                break

    for node in component.walk():
        for key, value in node.bindings.items():
            if key != REF_KEY:
                node.bindings[key] = rename_identifiers(value, refs, mapper)

    hooks = component.hooks
    if hooks.init:
        hooks.init = rename_identifiers(hooks.init, refs, mapper)
    if hooks.on_mount:
        hooks.on_mount = rename_identifiers(hooks.on_mount, refs, mapper)


def get_refs_code(refs: List[str]) -> str:
    """Handle declarations, one ``useRef()`` per reference"""
    return "\n".join(f"const {ref} = useRef();" for ref in refs)
