from __future__ import annotations
import json
import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ..errors import ConfigError

__all__ = ["parse_config", "load_config"]

_logger = logging.getLogger(__name__)

# `<word-key>: <rest-of-line>` on a stripped line
_FLAT_LINE = re.compile(r"^(\w+):\s*(.*)$")
_QUOTES = ("\"", "'")


# ---- small helpers --------------------------------------------------------

def _reject_constant(name: str) -> Any:
    # NaN/Infinity are Python extensions, not JSON
    raise ValueError(f"non-standard JSON constant: {name}")


def _strip_quotes(v: str) -> str:
    """Remove one layer of matching enclosing quotes."""
    if len(v) >= 2 and v[0] == v[-1] and v[0] in _QUOTES:
        return v[1:-1]
    return v


def _parse_strict(text: str) -> Any:
    """Format A: lossless, fully structured. Raises ValueError (RecursionError when nested too deep)."""
    return json.loads(text, parse_constant=_reject_constant)


def _parse_flat(text: str) -> Optional[Dict[str, str]]:
    """Format B: single-level `key: value` salvage scan.

    No nesting, no lists, no coercion beyond quote stripping. Repeated keys:
    last one wins. A bare `key:` (a nested-block heading) carries no value and
    is skipped, but still counts as a match. Returns None when no line matches.
    """
    out: Dict[str, str] = {}
    matched = False
    for line in text.splitlines():
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        m = _FLAT_LINE.match(s)
        if not m:
            continue
        matched = True
        value = _strip_quotes(m.group(2).strip())
        if value:
            out[m.group(1)] = value
    return out if matched else None


# ---- ingestion ------------------------------------------------------------

def parse_config(text: str) -> Optional[Any]:
    """
    Convert raw text into an untyped tree; never raises.

    Strategy:
      1) strict JSON parse; any JSON value is returned as-is,
      2) else the flat `key: value` scan (a flat dict of strings, not a
         schema-shaped config),
      3) else None (nothing salvageable).
    """
    if not isinstance(text, str):
        return None
    try:
        value = _parse_strict(text)
        _logger.debug("parse_config: strict JSON")
        return value
    except (ValueError, RecursionError):
        pass
    flat = _parse_flat(text)
    if flat is None:
        _logger.debug("parse_config: no parseable content")
        return None
    _logger.debug("parse_config: flat key/value salvage (%d keys)", len(flat))
    return flat


# ---- loader ---------------------------------------------------------------

def load_config(path: str) -> Any:
    """
    Read config text from a file path (or '-' for STDIN) and parse it.

    Raises ConfigError when the file is missing/unreadable or the text parses
    under neither format. Validation is left to the caller.
    """
    if path == "-":
        text = sys.stdin.read()
    else:
        p = Path(path)
        if not p.is_file():
            raise ConfigError(f"config file not found: {path}")
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"failed to read config {path}: {e}") from e
    value = parse_config(text)
    if value is None:
        raise ConfigError(f"could not parse {path if path != '-' else 'STDIN'} as JSON or key: value lines")
    return value
