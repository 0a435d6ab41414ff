"""
Component Serializer - Write components back out as JSON-shaped IR

The output is what ``ComponentParser`` reads, so a saved component loads
back equal to the one written.
"""

import json
from pathlib import Path
from typing import Optional

from ..dsl.nodes import Component


class ComponentSerializer:
    """
    JSON writer for the component IR

    ``indent`` applies to pretty output only; compact output is a single line.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def _indent_for(self, pretty: bool) -> Optional[int]:
        return self.indent if pretty else None

    def serialize(self, component: Component, pretty: bool = True) -> str:
        """
        Render a component as JSON text

        Args:
            component: Component to render
            pretty: Indent nested structures

        Returns:
            JSON text of ``component.to_dict()``
        """
        return json.dumps(
            component.to_dict(),
            indent=self._indent_for(pretty),
            ensure_ascii=False,
            default=str,
        )

    def serialize_to_file(self, component: Component, filepath: str, pretty: bool = True) -> Path:
        """
        Render a component into a file, creating parent directories

        Args:
            component: Component to render
            filepath: Destination path
            pretty: Indent nested structures

        Returns:
            The written path
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.serialize(component, pretty=pretty), encoding="utf-8")
        return path


def save_component(component: Component, filepath: str, pretty: bool = True) -> Path:
    """Write ``component`` to ``filepath`` as JSON IR"""
    return ComponentSerializer().serialize_to_file(component, filepath, pretty=pretty)
