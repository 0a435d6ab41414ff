"""
jsxlite IR: components and the nodes of their render tree
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional
from ..core.types import NodeKind, TEXT_KEY, FOR_NAME_KEY

# ============================================================================
# Base Node Class
# ============================================================================

@dataclass
class Node:
    """
    One element or control construct in a component's render tree

    Attributes:
        name: Element tag, or one of the control names Fragment, For, Show
        properties: Static string attributes
        bindings: Embedded expressions keyed by attribute or reserved key
        children: Child nodes
    """
    name: str
    properties: Dict[str, str] = field(default_factory=dict)
    bindings: Dict[str, str] = field(default_factory=dict)
    children: List['Node'] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        """Node kind used for emitter dispatch"""
        kind = NodeKind.from_string(self.name)
        if kind is NodeKind.ELEMENT and (
            TEXT_KEY in self.properties or TEXT_KEY in self.bindings
        ):
            return NodeKind.TEXT
        return kind

    def add_child(self, child: 'Node'):
        """Add a child node"""
        self.children.append(child)
        return self

    def add_children(self, *children: 'Node'):
        """Add multiple child nodes"""
        self.children.extend(children)
        return self

    def bind(self, key: str, code: str):
        """Attach an expression binding"""
        self.bindings[key] = code
        return self

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert node to its JSON-shaped IR form

        Returns:
            Dictionary with name, properties, bindings and children
        """
        return {
            "name": self.name,
            "properties": dict(self.properties),
            "bindings": dict(self.bindings),
            "children": [child.to_dict() for child in self.children],
        }


def walk_nodes(nodes: Iterable[Node]) -> Iterator[Node]:
    """
    Depth-first, pre-order walk over a node forest

    Args:
        nodes: Root nodes to visit

    Yields:
        Every node, parents before their children
    """
    for node in nodes:
        yield node
        yield from walk_nodes(node.children)

# ============================================================================
# Component
# ============================================================================

@dataclass
class Hooks:
    """Abstract lifecycle hooks of a component"""
    init: Optional[str] = None
    on_mount: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        result = {}
        if self.init is not None:
            result["init"] = self.init
        if self.on_mount is not None:
            result["onMount"] = self.on_mount
        return result


@dataclass
class JSImport:
    """
    An import the component source depends on

    Attributes:
        path: Module specifier
        imports: Local name -> imported name ('default', '*' or export name)
    """
    path: str
    imports: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "imports": dict(self.imports)}


@dataclass
class Component:
    """
    Framework-neutral description of one UI component

    Attributes:
        name: Component identifier
        state: State key -> literal, or code tagged as function/method literal
        hooks: Lifecycle hook code
        imports: Imports rendered ahead of the component
        children: Render tree
    """
    name: str
    state: Dict[str, Any] = field(default_factory=dict)
    hooks: Hooks = field(default_factory=Hooks)
    imports: List[JSImport] = field(default_factory=list)
    children: List[Node] = field(default_factory=list)

    def walk(self) -> Iterator[Node]:
        """Iterate over every node of the render tree"""
        return walk_nodes(self.children)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert component to its JSON-shaped IR form

        Returns:
            Dictionary in jsxlite JSON format
        """
        return {
            "name": self.name,
            "state": dict(self.state),
            "hooks": self.hooks.to_dict(),
            "imports": [item.to_dict() for item in self.imports],
            "children": [child.to_dict() for child in self.children],
        }

# ============================================================================
# Node Constructors
# ============================================================================

class Text(Node):
    """Text content, either a literal or a bound expression"""

    def __init__(
        self,
        text: str = "",
        binding: Optional[str] = None,
        **kwargs
    ):
        properties = kwargs.pop("properties", {})
        bindings = kwargs.pop("bindings", {})
        if binding is not None:
            bindings[TEXT_KEY] = binding
        else:
            properties[TEXT_KEY] = text
        super().__init__(
            name=kwargs.pop("name", "div"),
            properties=properties,
            bindings=bindings,
            **kwargs
        )


class Fragment(Node):
    """Groups children without a wrapping element"""

    def __init__(self, children: Optional[List[Node]] = None):
        super().__init__(name="Fragment", children=list(children or []))


class For(Node):
    """Repeats its children for every item of a collection"""

    def __init__(
        self,
        each: str,
        for_name: str,
        children: Optional[List[Node]] = None,
    ):
        super().__init__(
            name="For",
            bindings={"each": each, FOR_NAME_KEY: for_name},
            children=list(children or []),
        )


class Show(Node):
    """Renders its children only while a condition holds"""

    def __init__(self, when: str, children: Optional[List[Node]] = None):
        super().__init__(
            name="Show",
            bindings={"when": when},
            children=list(children or []),
        )


def is_empty_text_node(node: Node) -> bool:
    """Whether a node is literal text made only of whitespace"""
    text = node.properties.get(TEXT_KEY)
    return isinstance(text, str) and not text.strip()
