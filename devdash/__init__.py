"""DevDash: dashboard configuration engine, public API surface.

Only `devdash` and `devdash.errors` are public. Everything else is internal.
This module also resolves `__version__` deterministically across installs.
"""
from __future__ import annotations

from typing import Any as _Any
from . import errors as errors  # re-export for star-import; noqa: F401

from importlib.metadata import version as _pkg_version, PackageNotFoundError


def _version_from_resource() -> str | None:
    try:
        from importlib.resources import files

        p = files(__package__).joinpath("VERSION")
        return p.read_text(encoding="utf-8").strip()
    except (OSError, ModuleNotFoundError):
        return None


def _version_from_metadata() -> str | None:
    try:
        return _pkg_version("devdash")
    except PackageNotFoundError:
        return None


__version__ = _version_from_resource() or _version_from_metadata() or "0+unknown"

# ---------------------------------------------------------------------------
# Public re-exports, lazy-loaded via __getattr__ (PEP 562) to avoid
# import-time cycles between `devdash` and the top-level `configs` package.
# ---------------------------------------------------------------------------

_LAZY = {
    "validate_config": ("configs.validate", "validate_config"),
    "validate_config_verbose": ("configs.validate", "validate_config_verbose"),
    "validate_config_api": ("configs.validate", "validate_config_api"),
    "is_valid_config": ("configs.validate", "is_valid_config"),
    "parse_config": ("devdash.io.config", "parse_config"),
    "export_as_json": ("devdash.io.export", "export_as_json"),
    "export_as_yaml": ("devdash.io.export", "export_as_yaml"),
    "merge_configs": ("devdash.merge", "merge_configs"),
    "create_default_config": ("devdash.defaults", "create_default_config"),
    "create_sample_config": ("devdash.defaults", "create_sample_config"),
    "DashboardConfig": ("devdash.model", "DashboardConfig"),
    "ValidationError": ("devdash.model", "ValidationError"),
}


def __getattr__(name: str) -> _Any:
    target = _LAZY.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module

    value = getattr(import_module(target[0]), target[1])
    globals()[name] = value
    return value


# Make dir(devdash) reflect our public surface

def __dir__() -> list[str]:
    return list(__all__)

# Star-export surface (deterministic ordering). Tests require __all__ to be lexicographically sorted.
__all__ = sorted(
    [
        "__version__",
        "errors",
        *_LAZY.keys(),
    ]
)
