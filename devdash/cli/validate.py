"""CLI subcommand `validate`: check a dashboard config and report diagnostics.

Exit codes: 0 = OK, 1 = validation errors (or warnings with --strict),
2 = config missing/unparseable or bad usage.
"""

from __future__ import annotations

import argparse
from typing import Any, List, Mapping

from configs.validate import validate_config_verbose
from ..errors import ConfigError, format_error
from ..model import ValidationError
from ._exit import INVALID, OK, USER_ERR
from ._io import eprint_once, format_diagnostic, print_json, print_table, print_text, set_verbosity
from ._util import add_subparser, load_input

_HELP = "Validate a dashboard config"
_DESC = "Validate a dashboard config (JSON, or flat key: value lines) against the dashboard schema"


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = add_subparser(subparsers, name="validate", help_text=_HELP, description=_DESC, table=True)
    sp.add_argument("path", nargs="?", help="Config file; '-' reads STDIN (default: discovered config)")
    sp.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as errors (non-zero exit if warnings present).",
    )
    sp.set_defaults(command="validate", func=_run)


def _summary(value: Mapping[str, Any]) -> str:
    dash = value.get("dashboard") or {}
    comps = dash.get("components") or []
    sources = value.get("dataSources") or []
    return "dashboard: title={t!r} layout={l} components={c} dataSources={s}".format(
        t=dash.get("title"), l=dash.get("layout"), c=len(comps), s=len(sources)
    )


def _run(ns: argparse.Namespace) -> int:
    set_verbosity(ns.verbose, ns.quiet)

    try:
        value = load_input(ns.path, getattr(ns, "config", None))
    except ConfigError as e:
        eprint_once(f"error: {format_error(e)}")
        return USER_ERR

    diags = validate_config_verbose(value)
    errors: List[ValidationError] = [d for d in diags if d.severity == "error"]
    warnings: List[ValidationError] = [d for d in diags if d.severity == "warning"]
    failed = bool(errors) or (ns.strict and bool(warnings))

    if ns.json:
        print_json(
            {
                "ok": not failed,
                "errors": [d.to_dict() for d in errors],
                "warnings": [d.to_dict() for d in warnings],
            }
        )
        return INVALID if failed else OK

    if ns.table:
        if diags:
            print_table([d.to_dict() for d in diags], headers=["severity", "path", "message"])
        else:
            print_text("OK")
        return INVALID if failed else OK

    if errors:
        print_text("CONFIG INVALID")
        for d in diags:
            print_text(format_diagnostic(d))
        return INVALID

    if ns.strict and warnings:
        print_text("CONFIG WARNINGS (treated as errors due to --strict)")
        for d in warnings:
            print_text(format_diagnostic(d))
        return INVALID

    print_text("OK")
    print_text(_summary(value))
    for d in warnings:
        print_text(format_diagnostic(d))
    return OK
