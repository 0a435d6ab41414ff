"""
React Generator - Emit React function components from jsxlite IR
"""

import copy
import logging
import re
import textwrap
from typing import Callable, Dict, List, Optional, Tuple

from ..config import ReactOptions
from ..core.types import (
    CSS_KEY,
    FOR_NAME_KEY,
    SELF_CLOSING_TAGS,
    SPREAD_KEY,
    TEXT_KEY,
    NodeKind,
    StateType,
    StylesType,
)
from ..dsl.nodes import Component, Node, is_empty_text_node
from ..dsl.styles import has_style_declarations
from ..errors import InvalidComponentError, MissingBindingError
from .bindings import process_binding
from .formatting import PrettierFormatter, collapse_import_gaps
from .imports import render_component_imports, render_react_import
from .lifecycle import get_init_code, get_mount_code
from .plugins import (
    run_post_code_plugins,
    run_post_json_plugins,
    run_pre_code_plugins,
    run_pre_json_plugins,
)
from .refs import get_refs, get_refs_code, map_refs
from .serializer import ComponentSerializer
from .state import get_state_code, get_state_import, getters_to_functions, update_state_setters
from .styles import collect_css, collect_styled_components, has_styles

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")

EMOTION_IMPORT = "/** @jsx jsx */\nimport { jsx } from '@emotion/react';"
STYLED_COMPONENTS_IMPORT = "import styled from 'styled-components';"


def _escape_attribute(value) -> str:
    return str(value).replace('"', "&quot;")


def _map_inner_html(key: str, value: str) -> Tuple[str, str]:
    return "dangerouslySetInnerHTML", f'{{"__html": {value}}}'


# binding key -> (key, processed value) -> (attribute, attribute value)
BINDING_MAPPERS: Dict[str, Callable[[str, str], Tuple[str, str]]] = {
    "innerHTML": _map_inner_html,
}


class ReactGenerator:
    """
    Generate React function component source from a jsxlite component

    The caller's component is never modified: every pass runs on a private
    deep copy.
    """

    def __init__(self, options: Optional[ReactOptions] = None):
        """
        Initialize generator

        Args:
            options: Generator options, defaults when omitted
        """
        self.options = options or ReactOptions()
        self._node_emitters: Dict[NodeKind, Callable[[Node], str]] = {
            NodeKind.FRAGMENT: self._emit_fragment,
            NodeKind.FOR: self._emit_for,
            NodeKind.SHOW: self._emit_show,
            NodeKind.TEXT: self._emit_text,
            NodeKind.ELEMENT: self._emit_element,
        }

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------
    def generate(self, component: Component) -> str:
        """
        Generate component source

        Args:
            component: Component to compile (left untouched)

        Returns:
            React source code
        """
        options = self.options
        ir = copy.deepcopy(component)
        logger.debug(
            "Generating %s (state=%s, styles=%s)",
            ir.name, options.state_type.value, options.styles_type.value,
        )

        if options.plugins:
            ir = run_pre_json_plugins(ir, options.plugins)
        self._validate(ir)

        component_has_styles = has_styles(ir)
        if options.state_type is StateType.USE_STATE:
            getters_to_functions(ir)
            update_state_setters(ir)

        refs = get_refs(ir)
        has_state = bool(ir.state)
        map_refs(ir, lambda ref: f"{ref}.current")

        css = ""
        styled_components_code = ""
        if options.styles_type is StylesType.STYLED_JSX:
            css = collect_css(ir, class_property="className")
        elif options.styles_type is StylesType.STYLED_COMPONENTS and component_has_styles:
            styled_components_code = collect_styled_components(ir)

        state_code = get_state_code(ir, options)

        if options.plugins:
            ir = run_post_json_plugins(ir, options.plugins)

        hooks = []
        if options.state_type is StateType.USE_STATE and state_code.strip():
            hooks.append("useState")
        if ir.hooks.init:
            hooks.append("useState")
        if refs:
            hooks.append("useRef")
        if ir.hooks.on_mount:
            hooks.append("useEffect")

        header = [
            render_react_import(hooks),
            EMOTION_IMPORT if component_has_styles and options.styles_type is StylesType.EMOTION else "",
            STYLED_COMPONENTS_IMPORT if styled_components_code else "",
            (get_state_import(options) or "") if has_state else "",
            render_component_imports(ir),
            styled_components_code,
        ]

        style_element = ""
        if component_has_styles and options.styles_type is StylesType.STYLED_JSX:
            style_element = f"<style jsx>{{`{css}`}}</style>"

        body = [
            state_code,
            get_refs_code(refs),
            get_init_code(ir),
            get_mount_code(ir, options),
            self._generate_return(ir, style_element),
        ]

        source = "\n\n".join(filter(None, [
            "\n".join(filter(None, header)),
            f"export default function {ir.name}(props) {{\n"
            + textwrap.indent("\n\n".join(filter(None, body)), "  ")
            + "\n}",
        ])) + "\n"

        if options.plugins:
            source = run_pre_code_plugins(source, options.plugins)
        if options.prettier:
            source = self._format(source, ir)
        if options.plugins:
            source = run_post_code_plugins(source, options.plugins)
        return source

    def _generate_return(self, component: Component, style_element: str) -> str:
        content = "\n".join(filter(None, [
            style_element,
            self._emit_children(component.children),
        ]))
        return "return (\n  <>\n" + textwrap.indent(content, "    ") + "\n  </>\n);"

    def _format(self, source: str, component: Component) -> str:
        formatter = self.options.formatter or PrettierFormatter()
        try:
            formatted = formatter(source)
        except Exception:
            logger.error(
                "Format error for component %s\n--- source ---\n%s\n--- component ---\n%s",
                component.name, source, ComponentSerializer().serialize(component),
            )
            raise
        return collapse_import_gaps(formatted)

    @staticmethod
    def _validate(component: Component) -> None:
        if not isinstance(component.name, str) or not _IDENTIFIER.match(component.name):
            raise InvalidComponentError(
                f"Component name {component.name!r} is not a valid identifier"
            )

    # ------------------------------------------------------------------
    # Node emission
    # ------------------------------------------------------------------
    def emit_node(self, node: Node) -> str:
        """
        Serialize a node and its subtree to JSX

        Args:
            node: Node to emit

        Returns:
            JSX source
        """
        return self._node_emitters[node.kind](node)

    def _emit_children(self, children: List[Node], skip_empty_text: bool = False) -> str:
        if skip_empty_text:
            children = [child for child in children if not is_empty_text_node(child)]
        return "\n".join(self.emit_node(child) for child in children)

    def _binding(self, code: str) -> str:
        return process_binding(code, self.options)

    @staticmethod
    def _required_binding(node: Node, key: str) -> str:
        value = node.bindings.get(key)
        if not isinstance(value, str) or not value.strip():
            raise MissingBindingError(node.name, key)
        return value

    def _emit_fragment(self, node: Node) -> str:
        return f"<>{self._emit_children(node.children)}</>"

    def _emit_for(self, node: Node) -> str:
        each = self._binding(self._required_binding(node, "each"))
        for_name = self._required_binding(node, FOR_NAME_KEY)
        children = self._emit_children(node.children, skip_empty_text=True)
        return f"{{{each}.map({for_name} => (<>{children}</>))}}"

    def _emit_show(self, node: Node) -> str:
        when = self._binding(self._required_binding(node, "when"))
        children = self._emit_children(node.children, skip_empty_text=True)
        return f"{{Boolean({when}) && (<>{children}</>)}}"

    def _emit_text(self, node: Node) -> str:
        if TEXT_KEY in node.properties:
            return str(node.properties[TEXT_KEY])
        return f"{{{self._binding(node.bindings[TEXT_KEY])}}}"

    def _emit_element(self, node: Node) -> str:
        parts = [f"<{node.name}"]

        for key, value in node.properties.items():
            parts.append(f'{key}="{_escape_attribute(value)}"')

        if SPREAD_KEY in node.bindings:
            parts.append(f"{{...({self._binding(node.bindings[SPREAD_KEY])})}}")

        for key, value in node.bindings.items():
            if key == SPREAD_KEY:
                continue
            processed = self._binding(value)
            if key == CSS_KEY and not has_style_declarations(processed):
                continue
            if key.startswith("on"):
                parts.append(f"{key}={{event => ({processed})}}")
            elif key in BINDING_MAPPERS:
                attribute, attribute_value = BINDING_MAPPERS[key](key, processed)
                parts.append(f"{attribute}={{{attribute_value}}}")
            else:
                parts.append(f"{key}={{{processed}}}")

        opening = " ".join(parts)
        if node.name in SELF_CLOSING_TAGS:
            return f"{opening} />"
        return f"{opening}>{self._emit_children(node.children)}</{node.name}>"


def component_to_react(component: Component, options: Optional[ReactOptions] = None) -> str:
    """
    Convenience function to compile a component to React source

    Args:
        component: Component to compile
        options: Generator options

    Returns:
        React source code
    """
    generator = ReactGenerator(options)
    return generator.generate(component)
