"""CLI subcommand `merge`: layer an override config onto a base config and print the result as JSON."""

from __future__ import annotations

import argparse

from configs.validate import validate_config
from ..errors import ConfigError, format_error
from ..io.config import load_config
from ..io.export import export_as_json
from ..merge import merge_configs
from ._exit import INVALID, OK, USER_ERR
from ._io import eprint_once, format_diagnostic, print_text, set_verbosity
from ._util import add_subparser

_HELP = "Merge an override onto a base config"
_DESC = "Merge OVERRIDE onto BASE (dashboard/settings: key-wise, override wins; dataSources: replaced when non-empty)"


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = add_subparser(subparsers, name="merge", help_text=_HELP, description=_DESC, json=False)
    sp.add_argument("base", help="Base config file")
    sp.add_argument("override", help="Partial override config file ('-' reads STDIN)")
    sp.add_argument("--compact", action="store_true", help="single-line JSON")
    sp.set_defaults(command="merge", func=_run)


def _run(ns: argparse.Namespace) -> int:
    set_verbosity(ns.verbose, ns.quiet)

    try:
        base = load_config(ns.base)
        override = load_config(ns.override)
    except ConfigError as e:
        eprint_once(f"error: {format_error(e)}")
        return USER_ERR

    for label, value in (("base", base), ("override", override)):
        if not isinstance(value, dict):
            eprint_once(f"error: {label} config must be an object")
            return USER_ERR

    merged = merge_configs(base, override)
    print_text(export_as_json(merged, pretty=not ns.compact))

    errors = validate_config(merged)
    if errors:
        eprint_once("merged config is invalid:")
        for d in errors:
            eprint_once(f"  {format_diagnostic(d)}")
        return INVALID
    return OK
