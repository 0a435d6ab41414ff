"""
Source formatting through the prettier command line tool
"""

import logging
import os
import re
import shlex
import subprocess
from typing import Optional, Sequence

from ..errors import FormatError

logger = logging.getLogger(__name__)

PRETTIER_ENV_VAR = "JSXLITE_PRETTIER"
DEFAULT_PRETTIER_COMMAND = "npx --no-install prettier"


def prettier_command() -> Sequence[str]:
    """Prettier invocation, overridable through ``JSXLITE_PRETTIER``"""
    return shlex.split(os.environ.get(PRETTIER_ENV_VAR, DEFAULT_PRETTIER_COMMAND))


class PrettierFormatter:
    """
    Format generated source by piping it through prettier

    Instances are callables ``(source) -> formatted source``.
    """

    def __init__(
        self,
        command: Optional[Sequence[str]] = None,
        parser: str = "typescript",
        timeout: float = 30.0,
    ):
        """
        Initialize formatter

        Args:
            command: Prettier executable and leading arguments
            parser: Prettier parser name
            timeout: Seconds to wait for prettier
        """
        self.command = list(command) if command is not None else list(prettier_command())
        self.parser = parser
        self.timeout = timeout

    def __call__(self, source: str) -> str:
        args = [*self.command, "--parser", self.parser]
        logger.debug("Formatting %d characters with %s", len(source), " ".join(args))
        try:
            result = subprocess.run(
                args,
                input=source,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise FormatError(
                f"Formatter executable not found: {self.command[0]}",
                hint=f"Install prettier or set {PRETTIER_ENV_VAR}.",
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise FormatError(f"Formatter timed out after {self.timeout}s") from exc

        if result.returncode != 0:
            raise FormatError(result.stderr.strip() or f"Formatter exited with {result.returncode}")
        return result.stdout


def collapse_import_gaps(source: str) -> str:
    """Remove blank lines between consecutive import statements"""
    return re.sub(r";\n\nimport\s", ";\nimport ", source)
