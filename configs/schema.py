"""
Fixed dashboard schema: closed enumerations and allowed key sets.

Pure data. The validator in `configs.validate` is the only consumer that
enforces these; the typed model in `devdash.model` only references the
`Literal` aliases for annotations.
"""
from __future__ import annotations
from typing import Literal, Tuple

__all__ = [
    "LayoutKind",
    "ThemeKind",
    "ComponentKind",
    "DataSourceKind",
    "LAYOUT_KINDS",
    "THEME_KINDS",
    "COMPONENT_KINDS",
    "DATA_SOURCE_KINDS",
    "ALLOWED_TOP",
    "ALLOWED_DASHBOARD",
    "ALLOWED_COMPONENT",
    "ALLOWED_DATA_SOURCE",
    "ALLOWED_SETTINGS",
    "SETTINGS_BOOL_FIELDS",
    "SETTINGS_NUMBER_FIELDS",
    "format_choices",
]


# ------------------------------
# Closed enumerations
# ------------------------------

LayoutKind = Literal["grid", "flex", "stack"]
ThemeKind = Literal["light", "dark"]
ComponentKind = Literal[
    "line-chart",
    "bar-chart",
    "area-chart",
    "pie-chart",
    "scatter-chart",
    "heatmap",
    "gauge",
    "table",
    "stat",
    "text",
    "markdown",
    "list",
    "map",
]
DataSourceKind = Literal["rest", "graphql", "mock", "websocket"]

# Ordered tuples; order is the order used in diagnostic messages.
LAYOUT_KINDS: Tuple[str, ...] = ("grid", "flex", "stack")
THEME_KINDS: Tuple[str, ...] = ("light", "dark")
COMPONENT_KINDS: Tuple[str, ...] = (
    "line-chart",
    "bar-chart",
    "area-chart",
    "pie-chart",
    "scatter-chart",
    "heatmap",
    "gauge",
    "table",
    "stat",
    "text",
    "markdown",
    "list",
    "map",
)
DATA_SOURCE_KINDS: Tuple[str, ...] = ("rest", "graphql", "mock", "websocket")


# ------------------------------
# Allowed key sets per section (unknown keys are warnings, never errors)
# ------------------------------

ALLOWED_TOP = {"dashboard", "dataSources", "settings"}
ALLOWED_DASHBOARD = {"title", "layout", "theme", "columns", "components"}
ALLOWED_COMPONENT = {
    "id", "type", "title", "dataSource", "config",
    "gridColumn", "gridRow", "width", "height",
}
ALLOWED_DATA_SOURCE = {
    "id", "name", "type", "url", "query", "transform", "refreshInterval", "headers",
}
SETTINGS_BOOL_FIELDS = ("autoRefresh", "showHeader", "showGrid", "compact")
SETTINGS_NUMBER_FIELDS = ("refreshInterval", "gap")
ALLOWED_SETTINGS = set(SETTINGS_BOOL_FIELDS) | set(SETTINGS_NUMBER_FIELDS)


def format_choices(kinds: Tuple[str, ...]) -> str:
    """Render an allowed set as `{a,b,c}` for messages."""
    return "{" + ",".join(kinds) + "}"
