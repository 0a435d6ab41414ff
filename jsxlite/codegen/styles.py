"""
Style collection for the React generator

The ``css`` binding of a node holds a JSON5 style map. Depending on the
styling strategy it is either left in place (emotion renders it through its
``jsx`` pragma), turned into class rules for one ``<style jsx>`` block, or
turned into styled-components declarations that replace the node's tag.
"""

import logging
import textwrap
from typing import Any, Dict, List

from ..core.types import CSS_KEY
from ..dsl.nodes import Component, Node
from ..dsl.styles import (
    camel_case,
    capitalize,
    dash_case,
    has_style_declarations,
    parse_style_map,
    style_map_to_css,
)

logger = logging.getLogger(__name__)


def node_has_styles(node: Node) -> bool:
    css = node.bindings.get(CSS_KEY)
    return isinstance(css, str) and has_style_declarations(css)


def has_styles(component: Component) -> bool:
    """Whether any node of the tree carries a non-empty ``css`` binding"""
    return any(node_has_styles(node) for node in component.walk())


def _next_name(indexes: Dict[str, int], base: str, separator: str) -> str:
    index = indexes[base] = indexes.get(base, 0) + 1
    return base if index == 1 else f"{base}{separator}{index}"


def _nested_selector(selector: str, key: str) -> str:
    if "&" in key:
        return key.replace("&", selector)
    if key.startswith(":"):
        return selector + key
    return f"{selector} {key}"


def _rule(selector: str, body: List[str]) -> str:
    return f"{selector} {{\n" + textwrap.indent("\n".join(body), "  ") + "\n}"

# ============================================================================
# styled-jsx
# ============================================================================

def collect_styles(component: Component, class_property: str = "class") -> Dict[str, Dict[str, Any]]:
    """
    Move ``css`` bindings into a class name -> style map table

    Every styled node gets a generated class name appended to
    ``class_property``. All ``css`` bindings are removed, empty ones included.

    Args:
        component: Component to rewrite (mutated)
        class_property: Attribute receiving the class name

    Returns:
        Style maps keyed by class name
    """
    styles: Dict[str, Dict[str, Any]] = {}
    indexes: Dict[str, int] = {}
    for node in component.walk():
        css = node.bindings.pop(CSS_KEY, None)
        if not isinstance(css, str) or not has_style_declarations(css):
            continue
        class_name = _next_name(indexes, dash_case(node.name), "-")
        existing = node.properties.get(class_property, "")
        node.properties[class_property] = f"{existing} {class_name}".strip()
        styles[class_name] = parse_style_map(css)
    return styles


def _css_rules(selector: str, style_map: Dict[str, Any]) -> List[str]:
    rules = []
    declarations = style_map_to_css(style_map)
    if declarations:
        rules.append(_rule(selector, declarations))
    for key, value in style_map.items():
        if not isinstance(value, dict):
            continue
        if key.startswith("@"):
            rules.append(_rule(key, _css_rules(selector, value)))
        else:
            rules.extend(_css_rules(_nested_selector(selector, key), value))
    return rules


def collect_css(component: Component, class_property: str = "class") -> str:
    """
    Collect every style map into one stylesheet

    Args:
        component: Component to rewrite (mutated)
        class_property: Attribute receiving the class names

    Returns:
        CSS source
    """
    rules = []
    for class_name, style_map in collect_styles(component, class_property).items():
        rules.extend(_css_rules(f".{class_name}", style_map))
    return "\n".join(rules)

# ============================================================================
# styled-components
# ============================================================================

def _styled_body(style_map: Dict[str, Any]) -> List[str]:
    lines = style_map_to_css(style_map)
    for key, value in style_map.items():
        if not isinstance(value, dict):
            continue
        selector = key if key.startswith("@") or "&" in key else f"&{key}"
        lines.append(_rule(selector, _styled_body(value)))
    return lines


def collect_styled_components(component: Component) -> str:
    """
    Replace styled nodes with styled-components declarations

    ``<div css={{color: 'red'}}>`` becomes ``<Div>`` plus
    ``const Div = styled.div`...`;``.

    Args:
        component: Component to rewrite (mutated)

    Returns:
        Declarations to place ahead of the component
    """
    declarations = []
    indexes: Dict[str, int] = {}
    for node in component.walk():
        css = node.bindings.pop(CSS_KEY, None)
        if not isinstance(css, str) or not has_style_declarations(css):
            continue
        if node.name[:1].isupper():
            base = f"Styled{node.name}"
            target = f"styled({node.name})"
        else:
            base = capitalize(camel_case(node.name))
            target = f"styled.{node.name}"
        styled_name = _next_name(indexes, base, "")
        body = textwrap.indent("\n".join(_styled_body(parse_style_map(css))), "  ")
        declarations.append(f"const {styled_name} = {target}`\n{body}\n`;")
        logger.debug("Styled <%s> as %s", node.name, styled_name)
        node.name = styled_name
    return "\n\n".join(declarations)
