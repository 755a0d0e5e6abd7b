from __future__ import annotations

import json
import logging
import sys
from typing import Any, Mapping, Sequence

from ..model import ValidationError

# Set per command run; stdout is never gated
QUIET = False


def set_verbosity(verbose: bool = False, quiet: bool = False) -> None:
    """Gate stderr chatter; --verbose also routes library DEBUG logs to stderr."""
    global QUIET
    QUIET = bool(quiet)
    if verbose and not QUIET:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="[devdash] %(name)s: %(message)s",
        )


def eprint_once(msg: str) -> None:
    if not QUIET:
        print(msg, file=sys.stderr)


def print_text(text: str) -> None:
    sys.stdout.write(text if text.endswith("\n") else text + "\n")


def print_json(obj: Any) -> None:
    print_text(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))


def format_diagnostic(d: ValidationError) -> str:
    """`path: message` for errors, `W[path]: message` for warnings."""
    return str(d) if d.severity == "error" else f"W[{d.path}]: {d.message}"


def print_table(rows: Sequence[Mapping[str, Any]], headers: Sequence[str]) -> None:
    """Plain ASCII table (no color) of the `headers` columns of each row."""
    if not rows:
        return
    cells = [["" if r.get(h) is None else str(r.get(h)) for h in headers] for r in rows]
    widths = [max([len(h)] + [len(c[i]) for c in cells]) for i, h in enumerate(headers)]
    for line in [list(headers), ["-" * w for w in widths], *cells]:
        print_text("  ".join(s.ljust(w) for s, w in zip(line, widths)).rstrip())
