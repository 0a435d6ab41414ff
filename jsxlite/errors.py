"""Error types raised while loading or compiling jsxlite components."""

from typing import Optional


class JsxLiteError(Exception):
    """Base class for all errors surfaced to callers of the compiler."""

    hint: Optional[str] = None

    def __init__(self, message: str, *, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        if self.hint:
            return f"{self.message} Hint: {self.hint}"
        return self.message


class ExpressionSyntaxError(JsxLiteError):
    """Raised when an embedded expression cannot be parsed."""

    def __init__(self, code: str) -> None:
        super().__init__(
            f"Could not parse expression: {code!r}",
            hint="Bindings, hooks and state code must be valid JavaScript.",
        )
        self.code = code


class MissingBindingError(JsxLiteError):
    """Raised when a control node lacks a binding it requires."""

    def __init__(self, node_name: str, binding: str) -> None:
        super().__init__(f"<{node_name}> node is missing required binding {binding!r}")
        self.node_name = node_name
        self.binding = binding


class InvalidComponentError(JsxLiteError):
    """Raised when a component violates an IR invariant."""


class ConfigurationError(JsxLiteError):
    """Raised for unknown or malformed generator options."""


class FormatError(JsxLiteError):
    """Raised when the formatting service rejects generated source."""


class PluginError(JsxLiteError):
    """Raised when a plugin stage returns the wrong payload type."""
