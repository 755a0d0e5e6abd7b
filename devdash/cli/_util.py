from __future__ import annotations

import argparse
from typing import Any, Optional

from ..errors import ConfigError
from ..io.config import load_config

__all__ = ["add_subparser", "load_input"]


def add_subparser(
    subparsers: argparse._SubParsersAction,
    name: str,
    help_text: str,
    description: str,
    *,
    json: bool = True,
    table: bool = False,
) -> argparse.ArgumentParser:
    """
    Create a subcommand parser wired with the common output/verbosity flags:
    - --json / --table (each only where the command has a structured report;
      mutually exclusive): output format
    - --quiet / --verbose: control stderr verbosity; stdout remains reserved for command output
    """
    sp = subparsers.add_parser(name, help=help_text, description=description)
    fmt = sp.add_mutually_exclusive_group()
    if json:
        fmt.add_argument("--json", action="store_true", help="JSON output (stable, machine-readable)")
    if table:
        fmt.add_argument("--table", action="store_true", help="Plain table output (no color)")
    sp.add_argument("--quiet", action="store_true", help="suppress non-essential stderr")
    sp.add_argument("--verbose", action="store_true", help="increase stderr verbosity")
    return sp


def load_input(path: Optional[str], discovered: Optional[str]) -> Any:
    """
    Load the positional PATH, else the umbrella-discovered config.

    Raises ConfigError when neither is available or the input cannot be read/parsed.
    """
    chosen = path or discovered
    if not chosen:
        raise ConfigError(
            "no config given and none discovered "
            "(pass PATH, set DEVDASH_CONFIG, or create configs/dashboard.json or configs/dashboard.conf)"
        )
    return load_config(chosen)
