"""CLI subcommand `init`: print a canonical config to start from."""

from __future__ import annotations

import argparse

from ..defaults import create_default_config, create_sample_config
from ..io.export import export_as_json, export_as_yaml
from ._exit import OK
from ._io import print_text, set_verbosity
from ._util import add_subparser

_HELP = "Print a starter dashboard config"
_DESC = "Print the default (or, with --sample, the multi-component demo) dashboard config"


def register(subparsers: argparse._SubParsersAction) -> None:
    sp = add_subparser(subparsers, name="init", help_text=_HELP, description=_DESC, json=False)
    sp.add_argument("--sample", action="store_true", help="emit the sample dashboard instead of the default")
    sp.add_argument("--format", choices=("json", "yaml"), default="json", help="output format (default: json)")
    sp.add_argument("--compact", action="store_true", help="single-line JSON")
    sp.set_defaults(command="init", func=_run)


def _run(ns: argparse.Namespace) -> int:
    set_verbosity(ns.verbose, ns.quiet)
    cfg = create_sample_config() if ns.sample else create_default_config()
    if ns.format == "yaml":
        print_text(export_as_yaml(cfg))
    else:
        print_text(export_as_json(cfg, pretty=not ns.compact))
    return OK
