# devdash/cli/main.py
import argparse
import os
import sys
from pathlib import Path
from typing import List

from ..errors import CLIError, DevDashError, format_error
from . import export, init, merge, validate
from ._config import discover_config_path, maybe_log_selected
from ._exit import USER_ERR


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devdash",
        description="DevDash dashboard config CLI",
        allow_abbrev=False,
    )
    from devdash import __version__ as _VER

    parser.add_argument(
        "--version",
        action="version",
        version=f"devdash {_VER}",
    )
    # Quiet breadcrumb only; not forwarded to subcommands.
    parser.add_argument(
        "--debug",
        action="store_true",
        help=argparse.SUPPRESS,
    )
    # Explicit config override; takes precedence over discovery
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        help="config file or directory (default: $DEVDASH_CONFIG, ./configs/dashboard.json, XDG)",
    )
    subparsers = parser.add_subparsers(dest="command")

    validate.register(subparsers)
    export.register(subparsers)
    init.register(subparsers)
    merge.register(subparsers)

    return parser


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    ns = parser.parse_args(argv)
    if not hasattr(ns, "func"):
        parser.print_help(sys.stderr)
        return USER_ERR

    selected, source = discover_config_path(ns.config, Path.cwd(), os.environ)
    debug = ns.debug or os.getenv("DEVDASH_DEBUG") == "1"
    maybe_log_selected(selected, source, verbose=(debug or getattr(ns, "verbose", False)))
    ns.config = str(selected) if selected is not None else None

    try:
        return ns.func(ns)
    except DevDashError as e:
        print(f"error: {format_error(e)}", file=sys.stderr)
        return USER_ERR
    except Exception as e:
        if debug:
            raise
        print(f"error: {format_error(CLIError(f'{ns.command}: {e}'))}", file=sys.stderr)
        return USER_ERR


if __name__ == "__main__":
    raise SystemExit(main())
