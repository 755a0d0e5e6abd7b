"""
Structural validation for DevDash dashboard configurations.

Public API:
    validate_config(value) -> list[ValidationError]
    is_valid_config(value) -> bool
    validate_config_verbose(value) -> list[ValidationError]
    validate_config_api(value) -> (ok, errors, DashboardConfig | None)

- Never raises for malformed input; problems are returned as path-addressed
  diagnostics (`/dashboard/components/0/type`), in checking order.
- Read-only: the input is never mutated.
- Only `error` diagnostics block. `validate_config_verbose` appends
  `warning` diagnostics (unknown keys, duplicate ids, dangling references,
  type slips in optional fields) that never change `is_valid_config`.
"""
from __future__ import annotations
import logging
from typing import Any, List, Mapping, Optional, Set, Tuple

from configs.schema import (
    ALLOWED_COMPONENT,
    ALLOWED_DASHBOARD,
    ALLOWED_DATA_SOURCE,
    ALLOWED_SETTINGS,
    ALLOWED_TOP,
    COMPONENT_KINDS,
    DATA_SOURCE_KINDS,
    LAYOUT_KINDS,
    SETTINGS_BOOL_FIELDS,
    SETTINGS_NUMBER_FIELDS,
    THEME_KINDS,
    format_choices,
)
from devdash.errors import ConfigError
from devdash.model import DashboardConfig, ValidationError

__all__ = ["validate_config", "is_valid_config", "validate_config_verbose", "validate_config_api"]

_logger = logging.getLogger(__name__)


# ------------------------------
# Utilities
# ------------------------------

def _is_object(x: Any) -> bool:
    return isinstance(x, Mapping)


def _is_number(x: Any) -> bool:
    # bool is an int subclass; JSON keeps them apart
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _lev(a: str, b: str) -> int:
    """Tiny Levenshtein distance (edit distance) for did-you-mean suggestions."""
    la, lb = len(a), len(b)
    dp = list(range(lb + 1))
    for i, ca in enumerate(a, 1):
        prev = dp[0]
        dp[0] = i
        for j, cb in enumerate(b, 1):
            ins = dp[j] + 1
            dele = dp[j - 1] + 1
            sub = prev + (0 if ca == cb else 1)
            prev, dp[j] = dp[j], min(ins, dele, sub)
    return dp[-1]


def _suggest_key(bad: str, allowed: Set[str]) -> Optional[str]:
    """Return closest allowed key within distance <=2, else None (ties break lexicographically)."""
    best_key, best_dist = None, 99
    for k in sorted(allowed):
        d = _lev(bad, k)
        if d < best_dist:
            best_key, best_dist = k, d
    return best_key if best_dist <= 2 else None


def _err(errors: List[ValidationError], path: str, msg: str) -> None:
    errors.append(ValidationError(path, msg))


def _warn(warnings: List[ValidationError], path: str, msg: str) -> None:
    warnings.append(ValidationError(path, msg, "warning"))


# ------------------------------
# Error rules (blocking)
# ------------------------------

def _check_kind(
    errors: List[ValidationError],
    item: Any,
    path: str,
    kinds: Tuple[str, ...],
    label: str,
) -> None:
    """Shared per-element check for components and data sources."""
    if not _is_object(item):
        _err(errors, path, f"{label} must be an object")
        return
    kind = item.get("type")
    if kind is None:
        _err(errors, f"{path}/type", f"{label} type is required")
    elif kind not in kinds:
        _err(
            errors,
            f"{path}/type",
            f"Unknown {label.lower()} type {kind!r}; must be one of {format_choices(kinds)}",
        )


def _collect_errors(value: Any) -> List[ValidationError]:
    errors: List[ValidationError] = []

    # 1) Root shape; everything below presumes a mapping
    if not _is_object(value):
        _err(errors, "/", "Config must be an object")
        return errors

    # 2) Dashboard presence/shape; deeper checks are meaningless without it
    dashboard = value.get("dashboard")
    if dashboard is None:
        _err(errors, "/dashboard", "Dashboard is required")
        return errors
    if not _is_object(dashboard):
        _err(errors, "/dashboard", "Dashboard must be an object")
        return errors

    # 3) Title
    title = dashboard.get("title")
    if title is None or title == "":
        _err(errors, "/dashboard/title", "Title is required")
    elif not isinstance(title, str):
        _err(errors, "/dashboard/title", "Title must be a string")

    # 4) Layout (absence is fine)
    layout = dashboard.get("layout")
    if layout is not None and layout not in LAYOUT_KINDS:
        _err(
            errors,
            "/dashboard/layout",
            f"Layout must be one of {format_choices(LAYOUT_KINDS)}, got: {layout!r}",
        )

    # 5) Components
    components = dashboard.get("components")
    if components is None:
        _err(errors, "/dashboard/components", "Components are required")
    elif not isinstance(components, list):
        _err(errors, "/dashboard/components", "Components must be an array")
    else:
        for i, comp in enumerate(components):
            _check_kind(errors, comp, f"/dashboard/components/{i}", COMPONENT_KINDS, "Component")

    # 6) Data sources (optional)
    if "dataSources" in value:
        sources = value.get("dataSources")
        if not isinstance(sources, list):
            _err(errors, "/dataSources", "dataSources must be an array")
        else:
            for i, src in enumerate(sources):
                _check_kind(errors, src, f"/dataSources/{i}", DATA_SOURCE_KINDS, "Data source")

    return errors


# ------------------------------
# Warning rules (non-blocking, verbose only)
# ------------------------------

def _unknown_keys(
    warnings: List[ValidationError], obj: Mapping[str, Any], allowed: Set[str], path: str
) -> None:
    base = path.rstrip("/")
    for k in obj.keys():
        if k in allowed:
            continue
        sug = _suggest_key(str(k), allowed)
        hint = f" (did you mean '{sug}')" if sug else ""
        _warn(warnings, f"{base}/{k}", f"unknown key{hint}")


def _collect_warnings(value: Mapping[str, Any]) -> List[ValidationError]:
    """Assumes the root and dashboard shape checks passed."""
    warnings: List[ValidationError] = []
    dashboard = value["dashboard"]

    _unknown_keys(warnings, value, ALLOWED_TOP, "/")
    _unknown_keys(warnings, dashboard, ALLOWED_DASHBOARD, "/dashboard")

    theme = dashboard.get("theme")
    if theme is not None and theme not in THEME_KINDS:
        _warn(warnings, "/dashboard/theme", f"expected one of {format_choices(THEME_KINDS)}, got: {theme!r}")

    columns = dashboard.get("columns")
    if columns is not None and not (isinstance(columns, int) and not isinstance(columns, bool) and columns > 0):
        _warn(warnings, "/dashboard/columns", "expected a positive integer")

    # Data sources first so component references can be resolved
    source_ids: Set[Any] = set()
    sources = value.get("dataSources")
    if isinstance(sources, list):
        for i, src in enumerate(sources):
            if not _is_object(src):
                continue
            path = f"/dataSources/{i}"
            _unknown_keys(warnings, src, ALLOWED_DATA_SOURCE, path)
            sid = src.get("id")
            if sid is None:
                _warn(warnings, f"{path}/id", "data source id is missing; components cannot reference it")
            elif not isinstance(sid, str):
                _warn(warnings, f"{path}/id", "expected a string")
            elif sid in source_ids:
                _warn(warnings, f"{path}/id", f"duplicate data source id {sid!r}")
            else:
                source_ids.add(sid)
            ri = src.get("refreshInterval")
            if ri is not None and not (_is_number(ri) and ri >= 0):
                _warn(warnings, f"{path}/refreshInterval", "expected a non-negative number of milliseconds")
            headers = src.get("headers")
            if headers is not None and not (
                _is_object(headers)
                and all(isinstance(k, str) and isinstance(v, str) for k, v in headers.items())
            ):
                _warn(warnings, f"{path}/headers", "expected a mapping of string to string")

    components = dashboard.get("components")
    if isinstance(components, list):
        component_ids: Set[Any] = set()
        for i, comp in enumerate(components):
            if not _is_object(comp):
                continue
            path = f"/dashboard/components/{i}"
            _unknown_keys(warnings, comp, ALLOWED_COMPONENT, path)
            cid = comp.get("id")
            if cid is not None and not isinstance(cid, str):
                _warn(warnings, f"{path}/id", "expected a string")
            elif cid is not None:
                if cid in component_ids:
                    _warn(warnings, f"{path}/id", f"duplicate component id {cid!r}")
                component_ids.add(cid)
            if not _is_object(comp.get("config")):
                _warn(warnings, f"{path}/config", "expected an object (use {} when the component needs no options)")
            ref = comp.get("dataSource")
            if isinstance(ref, str) and ref not in source_ids:
                _warn(warnings, f"{path}/dataSource", f"references unknown data source {ref!r}")

    if "settings" in value:
        settings = value.get("settings")
        if not _is_object(settings):
            _warn(warnings, "/settings", "expected an object")
        else:
            _unknown_keys(warnings, settings, ALLOWED_SETTINGS, "/settings")
            for k in SETTINGS_BOOL_FIELDS:
                if k in settings and not isinstance(settings[k], bool):
                    _warn(warnings, f"/settings/{k}", "expected a boolean")
            for k in SETTINGS_NUMBER_FIELDS:
                if k in settings and not _is_number(settings[k]):
                    _warn(warnings, f"/settings/{k}", "expected a number")

    return warnings


# ------------------------------
# Public API
# ------------------------------

def validate_config(value: Any) -> List[ValidationError]:
    """Return the ordered error diagnostics for `value`; empty means valid."""
    errors = _collect_errors(value)
    _logger.debug("validate_config: %d error(s)", len(errors))
    return errors


def is_valid_config(value: Any) -> bool:
    return not any(e.severity == "error" for e in validate_config(value))


def validate_config_verbose(value: Any) -> List[ValidationError]:
    """Errors (as from validate_config) followed by non-blocking warnings.

    Warnings are only collected when the root and dashboard are objects; when
    those fail the result equals `validate_config(value)`.
    """
    errors = _collect_errors(value)
    warnings: List[ValidationError] = []
    if _is_object(value) and _is_object(value.get("dashboard")):
        warnings = _collect_warnings(value)
    _logger.debug("validate_config_verbose: %d error(s), %d warning(s)", len(errors), len(warnings))
    return errors + warnings


def validate_config_api(value: Any):
    """Stable, test-friendly API.

    Returns a tuple: (ok: bool, errs: list[ValidationError], cfg_or_none).
    - On success: (True, [], DashboardConfig)
    - On validation error: (False, [diagnostics...], None)
    Does not raise.
    """
    errors = validate_config(value)
    if errors:
        return False, errors, None
    try:
        return True, [], DashboardConfig.from_dict(value)
    except ConfigError as e:
        # Structure the error rules do not cover (e.g. a non-object component config)
        return False, [ValidationError(e.path or "/", str(e))], None


__all__ = sorted(__all__)
