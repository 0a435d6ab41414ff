"""Generator configuration."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Union

from .core.types import StateType, StylesType
from .errors import ConfigurationError

if TYPE_CHECKING:
    from .codegen.plugins import Plugin

Formatter = Callable[[str], str]


def _coerce(enum_cls, value, option: str):
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(
            f"Unknown {option} {value!r}",
            hint=f"Expected one of: {choices}.",
        ) from None


@dataclass
class ReactOptions:
    """
    Options for the React generator

    Attributes:
        prettier: Run the formatter over the generated source
        styles_type: Styling strategy
        state_type: State management strategy
        plugins: Stage hooks, applied in order
        formatter: Formatting callable; prettier CLI when None
    """
    prettier: bool = True
    styles_type: Union[StylesType, str] = StylesType.EMOTION
    state_type: Union[StateType, str] = StateType.MOBX
    plugins: List['Plugin'] = field(default_factory=list)
    formatter: Optional[Formatter] = None

    def __post_init__(self):
        # Accept the plain string spellings
        self.styles_type = _coerce(StylesType, self.styles_type, "stylesType")
        self.state_type = _coerce(StateType, self.state_type, "stateType")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReactOptions':
        """
        Build options from camelCase keys (``stylesType``, ``stateType``)

        Args:
            data: Option mapping

        Returns:
            ReactOptions instance
        """
        known = {"prettier", "stylesType", "stateType", "plugins", "formatter"}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown option(s): {', '.join(sorted(unknown))}")

        kwargs: Dict[str, Any] = {}
        if "prettier" in data:
            kwargs["prettier"] = bool(data["prettier"])
        if "stylesType" in data:
            kwargs["styles_type"] = data["stylesType"]
        if "stateType" in data:
            kwargs["state_type"] = data["stateType"]
        if "plugins" in data:
            kwargs["plugins"] = list(data["plugins"])
        if "formatter" in data:
            kwargs["formatter"] = data["formatter"]
        return cls(**kwargs)
