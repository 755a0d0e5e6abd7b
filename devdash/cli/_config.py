from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator, Mapping, Optional, TextIO, Tuple

# File names tried inside a candidate directory: the strict JSON form first,
# then the flat `key: value` form that parse_config salvages.
CONFIG_NAMES = ("dashboard.json", "dashboard.conf")
ENV_VAR = "DEVDASH_CONFIG"


def _expand(raw: str) -> Path:
    return Path(os.path.expandvars(raw)).expanduser()


def _resolve(p: Path) -> Optional[Path]:
    """A file is taken as-is; a directory yields its first existing CONFIG_NAMES entry."""
    for f in ([p / n for n in CONFIG_NAMES] if p.is_dir() else [p]):
        if f.is_file():
            return f.resolve()
    return None


def _search_roots(cwd: Path, env: Mapping[str, str]) -> Iterator[Tuple[Path, str]]:
    """Implicit lookup locations, highest precedence first, with their source tag."""
    if env.get(ENV_VAR):
        yield _expand(env[ENV_VAR]), f"env:{ENV_VAR}"
    yield cwd / "configs", "cwd:configs"
    yield _expand(env.get("XDG_CONFIG_HOME") or "~/.config") / "devdash", "xdg"


def discover_config_path(
    explicit: Optional[str],
    cwd: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Tuple[Optional[Path], str]:
    """Pick the dashboard config a command reads when no PATH is given.

    `--config` wins outright and is echoed back even when missing. Otherwise
    $DEVDASH_CONFIG, ./configs and $XDG_CONFIG_HOME/devdash are tried in that
    order; each may hold dashboard.json or dashboard.conf.

    Returns (path or None, source tag). Tags: 'explicit', 'explicit-missing',
    'env:DEVDASH_CONFIG', 'cwd:configs/<name>', 'xdg', 'none'.
    """
    if explicit:
        p = _expand(explicit)
        sel = _resolve(p)
        return (sel, "explicit") if sel is not None else (p, "explicit-missing")

    for root, tag in _search_roots(cwd or Path.cwd(), env or {}):
        sel = _resolve(root)
        if sel is not None:
            return sel, f"{tag}/{sel.name}" if tag == "cwd:configs" else tag
    return None, "none"


def maybe_log_selected(
    path: Optional[Path], source: str, *, verbose: bool = False, stream: Optional[TextIO] = None
) -> None:
    """One stderr breadcrumb naming the selected config; silent unless verbose."""
    if verbose:
        (stream or sys.stderr).write(f"[devdash] config: selected={path or 'none'} (source={source})\n")


__all__ = [
    "CONFIG_NAMES",
    "ENV_VAR",
    "discover_config_path",
    "maybe_log_selected",
]
