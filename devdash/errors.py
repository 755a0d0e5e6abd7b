from __future__ import annotations

"""Typed error taxonomy (public).

Only `devdash` and `devdash.errors` are public import roots. Everything else is internal.
The core operations never raise for malformed input; these classes cover the
operator-facing edges (reading config files, building the typed model, the CLI).
"""

__all__ = [
    "DevDashError",
    "ConfigError",
    "CLIError",
    "format_error",
]


class DevDashError(Exception):
    """Base class for all typed, operator-facing errors in DevDash."""
    pass


class ConfigError(DevDashError):
    """Config file unreadable or unparseable, or structurally unusable for the typed model.

    `path` is the slash-delimited pointer of the offending field when one is known.
    """

    def __init__(self, message: str = "", path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class CLIError(DevDashError):
    """Generic CLI failure wrapper for unexpected errors in CLI code paths."""
    pass


def format_error(e: BaseException) -> str:
    """Return a short, uniform operator-facing message like 'ConfigError: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name


# Keep star-export order deterministic for tests and tooling
__all__ = sorted(__all__)
