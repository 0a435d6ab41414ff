"""
Component Parser - Load jsxlite components from their JSON-shaped IR
"""

import json
from typing import Any, Dict, List

from ..dsl.nodes import Component, Hooks, JSImport, Node
from ..errors import InvalidComponentError


class ComponentParser:
    """
    Parse JSON-shaped IR into jsxlite components

    Accepts the same structure ``Component.to_dict()`` produces. Missing
    collections default to empty ones.
    """

    def parse(self, data: Dict[str, Any]) -> Component:
        """
        Parse an IR dictionary into a component

        Args:
            data: Component dictionary

        Returns:
            Component instance
        """
        if "name" not in data:
            raise InvalidComponentError("Component IR has no 'name'")

        hooks_dict = data.get("hooks") or {}
        return Component(
            name=data["name"],
            state=dict(data.get("state") or {}),
            hooks=Hooks(
                init=hooks_dict.get("init"),
                on_mount=hooks_dict.get("onMount"),
            ),
            imports=[self._parse_import(item) for item in data.get("imports") or []],
            children=self._parse_children(data.get("children")),
        )

    def parse_file(self, filepath: str) -> Component:
        """
        Parse a component JSON file

        Args:
            filepath: Path to the JSON file

        Returns:
            Component instance
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return self.parse(data)

    def parse_json(self, json_str: str) -> Component:
        """
        Parse a component JSON string

        Args:
            json_str: Component JSON

        Returns:
            Component instance
        """
        return self.parse(json.loads(json_str))

    def _parse_children(self, children: Any) -> List[Node]:
        return [self._parse_node(child) for child in children or []]

    def _parse_node(self, node_dict: Dict[str, Any]) -> Node:
        """Parse a node dictionary and its subtree"""
        if "name" not in node_dict:
            raise InvalidComponentError(f"Node IR has no 'name': {node_dict!r}")

        return Node(
            name=node_dict["name"],
            properties=dict(node_dict.get("properties") or {}),
            bindings=dict(node_dict.get("bindings") or {}),
            children=self._parse_children(node_dict.get("children")),
        )

    @staticmethod
    def _parse_import(import_dict: Dict[str, Any]) -> JSImport:
        return JSImport(
            path=import_dict["path"],
            imports=dict(import_dict.get("imports") or {}),
        )


def from_json(data: Dict[str, Any]) -> Component:
    """
    Convenience function to parse an IR dictionary into a component

    Args:
        data: Component dictionary

    Returns:
        Component instance
    """
    parser = ComponentParser()
    return parser.parse(data)


def load_component(filepath: str) -> Component:
    """
    Convenience function to load a component JSON file

    Args:
        filepath: Path to the JSON file

    Returns:
        Component instance
    """
    parser = ComponentParser()
    return parser.parse_file(filepath)
