"""
Round-trip tests for the JSON-shaped IR

Tests that Component -> JSON -> Component preserves the tree
"""

import pytest
import json
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from jsxlite.dsl import Component, Node, Hooks, JSImport, Text, For, Show
from jsxlite.codegen import ComponentSerializer, save_component
from jsxlite.parser import ComponentParser, from_json, load_component
from jsxlite.errors import InvalidComponentError


def make_todo_list():
    return Component(
        name="TodoList",
        state={
            "items": ["a", "b"],
            "visible": True,
            "toggle": "@jsx-lite/method:toggle() { state.visible = !state.visible }",
        },
        hooks=Hooks(init="console.log('init')", on_mount="console.log('mounted')"),
        imports=[JSImport(path="./Item", imports={"Item": "default"})],
        children=[
            Show(when="state.visible", children=[
                For(each="state.items", for_name="item", children=[
                    Node(name="li", bindings={"key": "item"}, children=[Text(binding="item")]),
                ]),
            ]),
            Node(name="button", properties={"type": "button"}, bindings={"onClick": "state.toggle()"}),
        ],
    )


class TestRoundTrip:
    """Test round-trip conversion: Component -> JSON -> Component"""

    def test_dict_roundtrip(self):
        """Test to_dict / parse round-trip"""
        original = make_todo_list()

        parsed = ComponentParser().parse(original.to_dict())

        assert parsed.to_dict() == original.to_dict()
        assert parsed.hooks == original.hooks
        assert parsed.imports == original.imports

    def test_json_string_roundtrip(self):
        """Test serialize / parse_json round-trip"""
        original = make_todo_list()

        serialized = ComponentSerializer().serialize(original)
        parsed = ComponentParser().parse_json(serialized)

        assert json.loads(serialized)["name"] == "TodoList"
        assert parsed.to_dict() == original.to_dict()

    def test_compact_serialization(self):
        """Test non-pretty output is a single line"""
        serialized = ComponentSerializer().serialize(make_todo_list(), pretty=False)
        assert "\n" not in serialized

    def test_parsed_nodes_keep_kinds(self):
        """Test control nodes survive parsing"""
        parsed = from_json(make_todo_list().to_dict())

        show = parsed.children[0]
        assert show.name == "Show"
        assert show.bindings == {"when": "state.visible"}
        assert show.children[0].bindings["_forName"] == "item"

    def test_serialization_file_roundtrip(self, tmp_path):
        """Test serialization to file and loading back"""
        original = make_todo_list()
        path = tmp_path / "nested" / "todo.json"

        written = save_component(original, str(path))
        loaded = load_component(str(path))

        assert written == path
        assert loaded.to_dict() == original.to_dict()

    def test_custom_indent(self):
        """Test the indent applies to pretty output"""
        serialized = ComponentSerializer(indent=4).serialize(make_todo_list())
        assert serialized.startswith('{\n    "name": "TodoList"')


class TestParserDefaults:
    """Test parsing of sparse IR"""

    def test_missing_collections(self):
        """Test absent keys default to empty collections"""
        component = from_json({"name": "Bare", "children": [{"name": "div"}]})

        assert component.state == {}
        assert component.hooks == Hooks()
        assert component.imports == []
        assert component.children[0] == Node(name="div")

    def test_missing_component_name(self):
        """Test a component without a name is rejected"""
        with pytest.raises(InvalidComponentError):
            from_json({"children": []})

    def test_missing_node_name(self):
        """Test a node without a name is rejected"""
        with pytest.raises(InvalidComponentError):
            from_json({"name": "App", "children": [{"properties": {}}]})


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
