"""
jsxlite command line interface.

    jsxlite compile counter.json --state-type useState --no-prettier
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from jsxlite import __version__
from jsxlite.codegen.react import component_to_react
from jsxlite.config import ReactOptions
from jsxlite.core.types import StateType, StylesType
from jsxlite.errors import JsxLiteError
from jsxlite.parser.component_parser import load_component

logger = logging.getLogger(__name__)


def cmd_compile(args: argparse.Namespace) -> int:
    """Compile a component JSON file to React source."""
    component = load_component(args.input)
    options = ReactOptions(
        prettier=args.prettier,
        state_type=args.state_type,
        styles_type=args.styles_type,
    )
    code = component_to_react(component, options)

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(code, encoding="utf-8")
        logger.info("Wrote %s", output)
    else:
        sys.stdout.write(code)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsxlite",
        description="Compile jsxlite component IR to framework source code.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_parser = subparsers.add_parser("compile", help="Compile a component to React")
    compile_parser.add_argument("input", help="Component JSON file")
    compile_parser.add_argument("-o", "--output", help="Write the result here instead of stdout")
    compile_parser.add_argument(
        "--state-type",
        choices=[member.value for member in StateType],
        default=StateType.MOBX.value,
        help="State management strategy (default: %(default)s)",
    )
    compile_parser.add_argument(
        "--styles-type",
        choices=[member.value for member in StylesType],
        default=StylesType.EMOTION.value,
        help="Styling strategy (default: %(default)s)",
    )
    compile_parser.add_argument(
        "--no-prettier",
        dest="prettier",
        action="store_false",
        help="Skip formatting the output",
    )
    compile_parser.set_defaults(func=cmd_compile)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except JsxLiteError as exc:
        print(f"Error: {exc.format()}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
