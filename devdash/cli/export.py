"""CLI subcommand `export`: re-serialize a dashboard config as JSON or the YAML projection."""

from __future__ import annotations

import argparse

from configs.validate import validate_config
from ..errors import ConfigError, format_error
from ..io.export import export_as_json, export_as_yaml
from ._exit import OK, USER_ERR
from ._io import eprint_once, print_text, set_verbosity
from ._util import add_subparser, load_input

_HELP = "Export a dashboard config"
_DESC = "Export a dashboard config as JSON (lossless) or YAML (display projection, lossy)"


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = add_subparser(subparsers, name="export", help_text=_HELP, description=_DESC, json=False)
    sp.add_argument("path", nargs="?", help="Config file; '-' reads STDIN (default: discovered config)")
    sp.add_argument("--format", choices=("json", "yaml"), default="json", help="output format (default: json)")
    sp.add_argument("--compact", action="store_true", help="single-line JSON")
    sp.set_defaults(command="export", func=_run)


def _run(ns: argparse.Namespace) -> int:
    set_verbosity(ns.verbose, ns.quiet)

    try:
        value = load_input(ns.path, getattr(ns, "config", None))
    except ConfigError as e:
        eprint_once(f"error: {format_error(e)}")
        return USER_ERR

    if not isinstance(value, dict):
        eprint_once("error: config must be an object to export")
        return USER_ERR

    errors = validate_config(value)
    if errors:
        eprint_once(f"warning: config has {len(errors)} validation error(s); exporting anyway")

    if ns.format == "yaml":
        print_text(export_as_yaml(value))
    else:
        print_text(export_as_json(value, pretty=not ns.compact))
    return OK
