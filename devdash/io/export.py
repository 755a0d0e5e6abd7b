from __future__ import annotations
import json
from typing import Any, Dict, Mapping, Union

import yaml

from ..model import DashboardConfig

__all__ = ["export_as_json", "export_as_yaml"]

ConfigLike = Union[DashboardConfig, Mapping[str, Any]]

# Projected fields, in output order
_DASHBOARD_FIELDS = ("title", "layout", "theme")
_COMPONENT_FIELDS = ("type", "title", "dataSource")
_DATA_SOURCE_FIELDS = ("id", "type", "url")


def _as_dict(config: ConfigLike) -> Mapping[str, Any]:
    if isinstance(config, DashboardConfig):
        return config.to_dict()
    return config


def export_as_json(config: ConfigLike, pretty: bool = True) -> str:
    """Lossless JSON; `pretty` only changes whitespace.

    parse_config(export_as_json(x, False)) == x for any JSON-compatible x.
    """
    data = _as_dict(config)
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _scalar(v: Any) -> Any:
    return v if isinstance(v, (str, int, float, bool)) else str(v)


def _pick(obj: Any, fields: tuple) -> Dict[str, Any]:
    if not isinstance(obj, Mapping):
        return {}
    return {k: _scalar(obj[k]) for k in fields if obj.get(k) is not None}


def export_as_yaml(config: ConfigLike) -> str:
    """
    Lossy YAML projection for display/export.

    Covers dashboard title/layout/theme, component type/title/dataSource and
    data source id/type/url only; settings, columns, component config maps,
    headers, refreshInterval, query and transform are dropped. The output does
    not round-trip through parse_config, whose fallback scan is flat.
    """
    data = _as_dict(config)
    dashboard = data.get("dashboard")
    proj: Dict[str, Any] = {"dashboard": _pick(dashboard, _DASHBOARD_FIELDS)}

    components = dashboard.get("components") if isinstance(dashboard, Mapping) else None
    if isinstance(components, list) and components:
        proj["dashboard"]["components"] = [_pick(c, _COMPONENT_FIELDS) for c in components]

    sources = data.get("dataSources")
    if isinstance(sources, list) and sources:
        proj["dataSources"] = [_pick(s, _DATA_SOURCE_FIELDS) for s in sources]

    return yaml.safe_dump(proj, sort_keys=False, default_flow_style=False, allow_unicode=True)
