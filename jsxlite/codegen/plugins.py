"""
Generator plugins

A plugin hooks into four stages of code generation:

    json.pre   Component -> Component, before any preprocessing
    json.post  Component -> Component, after preprocessing, before emission
    code.pre   str -> str, on the assembled unformatted source
    code.post  str -> str, on the final (possibly formatted) source

Plugins run in list order. A stage a plugin does not define passes its
payload through unchanged.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TypeVar

from ..dsl.nodes import Component
from ..errors import PluginError

logger = logging.getLogger(__name__)

ComponentHook = Callable[[Component], Component]
CodeHook = Callable[[str], str]

T = TypeVar("T")


@dataclass
class Plugin:
    """
    Set of optional stage hooks

    Attributes:
        name: Label used in logs and errors
        json_pre: Runs on the component before preprocessing
        json_post: Runs on the component after preprocessing
        code_pre: Runs on the unformatted source
        code_post: Runs on the final source
    """
    name: str = "plugin"
    json_pre: Optional[ComponentHook] = None
    json_post: Optional[ComponentHook] = None
    code_pre: Optional[CodeHook] = None
    code_post: Optional[CodeHook] = None


def _run_stage(
    payload: T,
    plugins: Sequence[Plugin],
    stage: str,
    expected: type,
) -> T:
    for plugin in plugins:
        hook = getattr(plugin, stage)
        if hook is None:
            continue
        logger.debug("Running %s hook of plugin %s", stage, plugin.name)
        payload = hook(payload)
        if not isinstance(payload, expected):
            raise PluginError(
                f"Plugin {plugin.name!r} {stage} hook returned "
                f"{type(payload).__name__}, expected {expected.__name__}"
            )
    return payload


def run_pre_json_plugins(component: Component, plugins: Sequence[Plugin]) -> Component:
    return _run_stage(component, plugins, "json_pre", Component)


def run_post_json_plugins(component: Component, plugins: Sequence[Plugin]) -> Component:
    return _run_stage(component, plugins, "json_post", Component)


def run_pre_code_plugins(code: str, plugins: Sequence[Plugin]) -> str:
    return _run_stage(code, plugins, "code_pre", str)


def run_post_code_plugins(code: str, plugins: Sequence[Plugin]) -> str:
    return _run_stage(code, plugins, "code_post", str)
