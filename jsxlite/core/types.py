"""
Type definitions shared by the jsxlite IR and its generators
"""

from enum import Enum, IntEnum
from typing import FrozenSet

# ============================================================================
# Node Kinds
# ============================================================================

class NodeKind(IntEnum):
    """Closed set of node kinds the emitters dispatch on"""

    ELEMENT = 0
    TEXT = 1
    FRAGMENT = 2
    FOR = 3
    SHOW = 4

    @classmethod
    def from_string(cls, name: str) -> 'NodeKind':
        """
        Map a node name to its control kind

        Args:
            name: Node name (tag or reserved control name)

        Returns:
            FRAGMENT, FOR or SHOW for the reserved names, ELEMENT otherwise
        """
        name_map = {
            'Fragment': cls.FRAGMENT,
            'For': cls.FOR,
            'Show': cls.SHOW,
        }
        return name_map.get(name, cls.ELEMENT)

    def to_string(self) -> str:
        """Convert NodeKind to its PascalCase name"""
        return self.name.capitalize()


# ============================================================================
# Generator Strategies
# ============================================================================

class StateType(str, Enum):
    """State management strategies supported by the React generator"""

    USE_STATE = "useState"
    MOBX = "mobx"
    VALTIO = "valtio"
    SOLID = "solid"
    BUILDER = "builder"


class StylesType(str, Enum):
    """Styling strategies supported by the React generator"""

    EMOTION = "emotion"
    STYLED_COMPONENTS = "styled-components"
    STYLED_JSX = "styled-jsx"

# ============================================================================
# Reserved markers
# ============================================================================

# State values tagged with these prefixes carry code rather than literals
FUNCTION_LITERAL_PREFIX = "@jsx-lite/function:"
METHOD_LITERAL_PREFIX = "@jsx-lite/method:"

# Import path of the IR authoring package, never emitted as a real import
CORE_PACKAGE_PATH = "@jsx-lite/core"

# Reserved binding keys
TEXT_KEY = "_text"
SPREAD_KEY = "_spread"
FOR_NAME_KEY = "_forName"
CSS_KEY = "css"
REF_KEY = "ref"

SELF_CLOSING_TAGS: FrozenSet[str] = frozenset({
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
})
