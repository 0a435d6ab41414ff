"""
Expression parsing and rewriting for embedded JavaScript code

Bindings, hooks and state code are JavaScript fragments. They are parsed with
tree-sitter and rewritten by re-rendering the syntax tree: a visitor may
replace the text of any node, every other node is reproduced byte for byte.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Collection, Optional, Tuple

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from ..errors import ExpressionSyntaxError

logger = logging.getLogger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())

# Tried in order: statements, a bare expression, object members (method and
# getter literals). Closers sit on their own line so a trailing line comment
# cannot swallow them.
_WRAPPERS: Tuple[Tuple[str, str], ...] = (
    ("", ""),
    ("(", "\n)"),
    ("({", "\n})"),
)

Render = Callable[[Node], str]
Visitor = Callable[[Node, Render], Optional[str]]


@dataclass
class ParsedExpression:
    """A fragment parsed inside one of the wrappers"""
    code: str
    source: bytes
    root: Node
    prefix: str
    suffix: str


def parse_expression(code: str) -> ParsedExpression:
    """
    Parse an embedded code fragment

    Args:
        code: JavaScript statements, expression or object member

    Returns:
        ParsedExpression holding the syntax tree

    Raises:
        ExpressionSyntaxError: No wrapper yields an error-free tree
    """
    parser = Parser(JS_LANGUAGE)
    for prefix, suffix in _WRAPPERS:
        source = f"{prefix}{code}{suffix}".encode("utf-8")
        tree = parser.parse(source)
        if not tree.root_node.has_error:
            return ParsedExpression(
                code=code,
                source=source,
                root=tree.root_node,
                prefix=prefix,
                suffix=suffix,
            )
    logger.debug("Rejected expression %r", code)
    raise ExpressionSyntaxError(code)


def transform_expression(code: str, visitor: Visitor) -> str:
    """
    Rewrite a code fragment node by node

    The visitor receives each node (parents first) and a ``render`` callback
    that produces the rewritten text of any sub-node. Returning a string
    replaces the node, returning None descends into its children.

    Args:
        code: JavaScript fragment
        visitor: Replacement callback

    Returns:
        Rewritten fragment, identical to ``code`` when nothing matched
    """
    parsed = parse_expression(code)
    source = parsed.source

    def render(node: Node) -> str:
        replacement = visitor(node, render)
        if replacement is not None:
            return replacement
        pieces = []
        cursor = node.start_byte
        for child in node.children:
            pieces.append(source[cursor:child.start_byte].decode("utf-8"))
            pieces.append(render(child))
            cursor = child.end_byte
        pieces.append(source[cursor:node.end_byte].decode("utf-8"))
        return "".join(pieces)

    root = parsed.root
    text = (
        source[:root.start_byte].decode("utf-8")
        + render(root)
        + source[root.end_byte:].decode("utf-8")
    )
    return text[len(parsed.prefix):len(text) - len(parsed.suffix)]


def node_text(node: Node) -> str:
    """Source text of a node"""
    return node.text.decode("utf-8")


def rename_identifiers(
    code: str,
    names: Collection[str],
    mapper: Callable[[str], str],
) -> str:
    """
    Replace references to the given variables

    Property names (``a.name``) are not references and are left alone.
    Shorthand object members are expanded so the key keeps its name:
    ``{ el }`` becomes ``{ el: <mapped> }``.

    Args:
        code: JavaScript fragment
        names: Variable names to replace
        mapper: Produces the replacement text for a name

    Returns:
        Rewritten fragment
    """
    if not any(name in code for name in names):
        return code

    def visit(node: Node, render: Render) -> Optional[str]:
        if node.type == "identifier":
            name = node_text(node)
            if name in names:
                return mapper(name)
        elif node.type == "shorthand_property_identifier":
            name = node_text(node)
            if name in names:
                return f"{name}: {mapper(name)}"
        return None

    return transform_expression(code, visit)
