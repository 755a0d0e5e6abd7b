from __future__ import annotations

import pytest

from devdash.defaults import create_default_config, create_sample_config
from devdash.errors import ConfigError
from devdash.model import Component, DashboardConfig, DataSource, Settings, ValidationError


@pytest.mark.parametrize("factory", [create_default_config, create_sample_config])
def test_from_dict_to_dict_round_trip(factory):
    raw = factory()
    typed = DashboardConfig.from_dict(raw)
    assert typed.to_dict() == raw
    assert DashboardConfig.from_dict(typed.to_dict()) == typed


def test_camel_case_fields_map_to_attributes():
    typed = DashboardConfig.from_dict(create_sample_config())
    chart = typed.dashboard.components[3]
    assert chart.type == "line-chart"
    assert chart.data_source == "users"
    assert chart.grid_column == "span 8"
    assert chart.height == "320px"
    assert typed.data_sources[1].refresh_interval == 300000
    assert typed.data_sources[1].headers == {"Accept": "application/json"}
    assert typed.settings == Settings(auto_refresh=True, refresh_interval=60000, show_header=True, compact=False)


def test_enum_membership_not_checked_at_construction():
    # Unknown kinds are the validator's business, not the model's
    typed = DashboardConfig.from_dict(
        {"dashboard": {"title": "T", "layout": "weird", "components": [{"type": "bogus", "config": {}}]}}
    )
    assert typed.dashboard.layout == "weird"
    assert typed.dashboard.components[0].type == "bogus"


def test_unknown_keys_are_dropped():
    typed = DashboardConfig.from_dict(
        {"dashboard": {"title": "T", "components": [], "extra": 1}, "other": True}
    )
    assert typed.to_dict() == {"dashboard": {"title": "T", "components": []}}


def test_missing_component_config_defaults_to_empty():
    c = Component.from_dict({"type": "text"})
    assert c.config == {}
    assert c.to_dict() == {"type": "text", "config": {}}


def test_opaque_config_is_copied():
    raw = {"type": "table", "config": {"columns": ["a", "b"]}}
    c = Component.from_dict(raw)
    raw["config"]["columns"].append("c")
    assert c.config == {"columns": ["a", "b"]}
    out = c.to_dict()
    out["config"]["columns"].clear()
    assert c.config == {"columns": ["a", "b"]}


@pytest.mark.parametrize(
    "raw,path",
    [
        (None, "/"),
        ({}, "/dashboard"),
        ({"dashboard": "x"}, "/dashboard"),
        ({"dashboard": {"components": []}}, "/dashboard/title"),
        ({"dashboard": {"title": "T"}}, "/dashboard/components"),
        ({"dashboard": {"title": "T", "components": {}}}, "/dashboard/components"),
        ({"dashboard": {"title": "T", "components": [{"config": {}}]}}, "/dashboard/components/0/type"),
        ({"dashboard": {"title": "T", "components": [7]}}, "/dashboard/components/0"),
        ({"dashboard": {"title": "T", "components": []}, "dataSources": [{"type": "rest"}]}, "/dataSources/0/id"),
        ({"dashboard": {"title": "T", "components": []}, "dataSources": "x"}, "/dataSources"),
        ({"dashboard": {"title": "T", "components": []}, "settings": []}, "/settings"),
    ],
)
def test_structural_problems_raise_config_error_with_path(raw, path):
    with pytest.raises(ConfigError) as ei:
        DashboardConfig.from_dict(raw)
    assert ei.value.path == path


def test_data_source_headers_must_be_mapping():
    with pytest.raises(ConfigError) as ei:
        DataSource.from_dict({"id": "a", "type": "rest", "headers": ["x"]}, "/dataSources/3")
    assert ei.value.path == "/dataSources/3/headers"


def test_validation_error_record():
    e = ValidationError("/dashboard", "Dashboard is required")
    assert e.severity == "error"
    assert str(e) == "/dashboard: Dashboard is required"
    assert e.to_dict() == {"path": "/dashboard", "message": "Dashboard is required", "severity": "error"}
    assert not isinstance(e, Exception)
    with pytest.raises(Exception):
        e.path = "/"  # frozen
