from __future__ import annotations
import copy
from typing import Any, Dict, Mapping, Union

from .model import DashboardConfig

__all__ = ["merge_configs"]


def _shallow(base: Any, override: Any) -> Dict[str, Any]:
    """Key-wise merge; override wins. Non-mappings count as empty."""
    out = dict(base) if isinstance(base, Mapping) else {}
    if isinstance(override, Mapping):
        out.update(override)
    return out


def merge_configs(
    base: Union[DashboardConfig, Mapping[str, Any]],
    override: Mapping[str, Any],
) -> Union[DashboardConfig, Dict[str, Any]]:
    """
    Layer a partial override onto a base configuration, returning a new value.

    - dashboard: shallow merge, so a supplied `components` list (even empty)
      replaces the base list wholesale,
    - dataSources: replaced only by a non-empty override list; an empty list
      keeps the base sources,
    - settings: shallow merge, present only if either side has settings.

    Single level, override wins, no deep merge. Neither input is mutated and
    the result shares no mutable state with them. A typed base yields a typed
    result.
    """
    typed = isinstance(base, DashboardConfig)
    b: Mapping[str, Any] = base.to_dict() if typed else base
    o: Mapping[str, Any] = override.to_dict() if isinstance(override, DashboardConfig) else override

    merged: Dict[str, Any] = dict(b)
    merged["dashboard"] = _shallow(b.get("dashboard"), o.get("dashboard"))
    if o.get("dataSources"):
        merged["dataSources"] = o["dataSources"]
    if "settings" in b or "settings" in o:
        merged["settings"] = _shallow(b.get("settings"), o.get("settings"))

    merged = copy.deepcopy(merged)
    if typed:
        return DashboardConfig.from_dict(merged)
    return merged
