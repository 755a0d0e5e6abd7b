from __future__ import annotations
import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional

from configs.schema import ComponentKind, DataSourceKind, LayoutKind, ThemeKind
from .errors import ConfigError

Severity = Literal["error", "warning"]

__all__ = [
    "Severity",
    "ValidationError",
    "Component",
    "DataSource",
    "Settings",
    "Dashboard",
    "DashboardConfig",
]


# ---- small helpers --------------------------------------------------------

def _compact(pairs: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset (None) optionals so to_dict() mirrors what was parsed."""
    return {k: v for k, v in pairs.items() if v is not None}


def _require(obj: Mapping[str, Any], key: str, path: str) -> Any:
    if not isinstance(obj, Mapping):
        raise ConfigError(f"{path} must be an object", path=path)
    v = obj.get(key)
    if v is None:
        raise ConfigError(f"{path}/{key} is required", path=f"{path}/{key}")
    return v


def _list(obj: Any, path: str) -> List[Any]:
    if not isinstance(obj, list):
        raise ConfigError(f"{path} must be an array", path=path)
    return obj


def _mapping(obj: Any, path: str) -> Mapping[str, Any]:
    if obj is None:
        return {}
    if not isinstance(obj, Mapping):
        raise ConfigError(f"{path} must be an object", path=path)
    return obj


# ---- diagnostics ----------------------------------------------------------


@dataclass(frozen=True)
class ValidationError:
    """A path-addressed diagnostic. A plain record: produced, never raised."""

    path: str
    message: str
    severity: Severity = "error"

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "message": self.message, "severity": self.severity}

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


# ---- typed model ----------------------------------------------------------
# Enum-typed fields are annotated with the closed Literal sets but are NOT
# checked here; membership is the validator's job.


@dataclass
class Component:
    type: ComponentKind
    config: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None
    title: Optional[str] = None
    data_source: Optional[str] = None
    grid_column: Optional[str] = None
    grid_row: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any], path: str = "/dashboard/components/0") -> "Component":
        ctype = _require(d, "type", path)
        return cls(
            type=ctype,
            config=copy.deepcopy(dict(_mapping(d.get("config"), f"{path}/config"))),
            id=d.get("id"),
            title=d.get("title"),
            data_source=d.get("dataSource"),
            grid_column=d.get("gridColumn"),
            grid_row=d.get("gridRow"),
            width=d.get("width"),
            height=d.get("height"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = _compact(
            {
                "id": self.id,
                "type": self.type,
                "title": self.title,
                "dataSource": self.data_source,
            }
        )
        out["config"] = copy.deepcopy(self.config)
        out.update(
            _compact(
                {
                    "gridColumn": self.grid_column,
                    "gridRow": self.grid_row,
                    "width": self.width,
                    "height": self.height,
                }
            )
        )
        return out


@dataclass
class DataSource:
    id: str
    type: DataSourceKind
    name: Optional[str] = None
    url: Optional[str] = None
    query: Optional[str] = None
    transform: Optional[str] = None
    refresh_interval: Optional[float] = None  # milliseconds
    headers: Optional[Dict[str, str]] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any], path: str = "/dataSources/0") -> "DataSource":
        ds_id = _require(d, "id", path)
        headers = d.get("headers")
        return cls(
            id=ds_id,
            type=_require(d, "type", path),
            name=d.get("name"),
            url=d.get("url"),
            query=d.get("query"),
            transform=d.get("transform"),
            refresh_interval=d.get("refreshInterval"),
            headers=dict(_mapping(headers, f"{path}/headers")) if headers is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "id": self.id,
                "name": self.name,
                "type": self.type,
                "url": self.url,
                "query": self.query,
                "transform": self.transform,
                "refreshInterval": self.refresh_interval,
                "headers": dict(self.headers) if self.headers is not None else None,
            }
        )


@dataclass
class Settings:
    auto_refresh: Optional[bool] = None
    refresh_interval: Optional[float] = None  # milliseconds
    show_header: Optional[bool] = None
    show_grid: Optional[bool] = None
    compact: Optional[bool] = None
    gap: Optional[float] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Settings":
        if not isinstance(d, Mapping):
            raise ConfigError("/settings must be an object", path="/settings")
        return cls(
            auto_refresh=d.get("autoRefresh"),
            refresh_interval=d.get("refreshInterval"),
            show_header=d.get("showHeader"),
            show_grid=d.get("showGrid"),
            compact=d.get("compact"),
            gap=d.get("gap"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "autoRefresh": self.auto_refresh,
                "refreshInterval": self.refresh_interval,
                "showHeader": self.show_header,
                "showGrid": self.show_grid,
                "compact": self.compact,
                "gap": self.gap,
            }
        )


@dataclass
class Dashboard:
    title: str
    components: List[Component] = field(default_factory=list)
    layout: Optional[LayoutKind] = None
    theme: Optional[ThemeKind] = None
    columns: Optional[int] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Dashboard":
        path = "/dashboard"
        raw = _list(_require(d, "components", path), f"{path}/components")
        return cls(
            title=_require(d, "title", path),
            components=[
                Component.from_dict(c, f"{path}/components/{i}") for i, c in enumerate(raw)
            ],
            layout=d.get("layout"),
            theme=d.get("theme"),
            columns=d.get("columns"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = _compact(
            {
                "title": self.title,
                "layout": self.layout,
                "theme": self.theme,
                "columns": self.columns,
            }
        )
        out["components"] = [c.to_dict() for c in self.components]
        return out


@dataclass
class DashboardConfig:
    """Root of the typed model.

    Built from an untyped tree that passed `validate_config`; `to_dict()` gives
    back the camelCase wire shape that `export_as_json` serializes.
    """

    dashboard: Dashboard
    data_sources: Optional[List[DataSource]] = None
    settings: Optional[Settings] = None

    @classmethod
    def from_dict(cls, d: Any) -> "DashboardConfig":
        if not isinstance(d, Mapping):
            raise ConfigError("config must be an object", path="/")
        dash = d.get("dashboard")
        if not isinstance(dash, Mapping):
            raise ConfigError("/dashboard is required and must be an object", path="/dashboard")
        data_sources = None
        if d.get("dataSources") is not None:
            raw = _list(d.get("dataSources"), "/dataSources")
            data_sources = [DataSource.from_dict(s, f"/dataSources/{i}") for i, s in enumerate(raw)]
        settings = Settings.from_dict(d["settings"]) if d.get("settings") is not None else None
        return cls(
            dashboard=Dashboard.from_dict(dash),
            data_sources=data_sources,
            settings=settings,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"dashboard": self.dashboard.to_dict()}
        if self.data_sources is not None:
            out["dataSources"] = [s.to_dict() for s in self.data_sources]
        if self.settings is not None:
            out["settings"] = self.settings.to_dict()
        return out
