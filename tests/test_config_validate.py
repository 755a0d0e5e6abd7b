import copy

import pytest

from configs.schema import COMPONENT_KINDS, DATA_SOURCE_KINDS
from configs.validate import is_valid_config, validate_config, validate_config_api
from devdash.model import DashboardConfig, ValidationError


def _paths(errors):
    return [e.path for e in errors]


def test_validate_happy_minimal(minimal_cfg):
    assert validate_config(minimal_cfg) == []
    assert is_valid_config(minimal_cfg) is True


@pytest.mark.parametrize("root", [None, 42, "dashboard", [], [{"dashboard": {}}], True])
def test_non_object_root_short_circuits(root):
    errors = validate_config(root)
    assert len(errors) == 1
    assert errors[0].path == "/"
    assert errors[0].severity == "error"


def test_empty_object_reports_only_dashboard():
    errors = validate_config({})
    assert _paths(errors) == ["/dashboard"]
    assert "required" in errors[0].message


@pytest.mark.parametrize("dashboard", ["oops", 3, ["title"], False])
def test_dashboard_must_be_object_and_stops(dashboard):
    # dataSources is malformed too, but nothing past /dashboard is checked
    errors = validate_config({"dashboard": dashboard, "dataSources": "bad"})
    assert _paths(errors) == ["/dashboard"]
    assert "must be an object" in errors[0].message


def test_dashboard_null_counts_as_missing():
    errors = validate_config({"dashboard": None})
    assert _paths(errors) == ["/dashboard"]
    assert "required" in errors[0].message


@pytest.mark.parametrize(
    "title,needle",
    [
        (None, "required"),
        ("", "required"),
        (7, "must be a string"),
        (["a"], "must be a string"),
    ],
)
def test_title_rules(minimal_cfg, title, needle):
    if title is None:
        del minimal_cfg["dashboard"]["title"]
    else:
        minimal_cfg["dashboard"]["title"] = title
    errors = validate_config(minimal_cfg)
    assert _paths(errors) == ["/dashboard/title"]
    assert needle in errors[0].message


def test_layout_absent_is_fine(minimal_cfg):
    del minimal_cfg["dashboard"]["layout"]
    assert validate_config(minimal_cfg) == []


@pytest.mark.parametrize("layout", ["grid", "flex", "stack"])
def test_layout_known_values(minimal_cfg, layout):
    minimal_cfg["dashboard"]["layout"] = layout
    assert validate_config(minimal_cfg) == []


def test_layout_unknown_lists_allowed_set(minimal_cfg):
    minimal_cfg["dashboard"]["layout"] = "masonry"
    errors = validate_config(minimal_cfg)
    assert _paths(errors) == ["/dashboard/layout"]
    msg = errors[0].message
    assert "grid,flex,stack" in msg
    assert "masonry" in msg


def test_components_required(minimal_cfg):
    del minimal_cfg["dashboard"]["components"]
    errors = validate_config(minimal_cfg)
    assert _paths(errors) == ["/dashboard/components"]
    assert "required" in errors[0].message


def test_components_must_be_array(minimal_cfg):
    minimal_cfg["dashboard"]["components"] = {"type": "stat"}
    errors = validate_config(minimal_cfg)
    assert _paths(errors) == ["/dashboard/components"]
    assert "array" in errors[0].message


def test_components_empty_array_is_valid(minimal_cfg):
    minimal_cfg["dashboard"]["components"] = []
    assert validate_config(minimal_cfg) == []


def test_unknown_component_kind_names_value(minimal_cfg):
    minimal_cfg["dashboard"]["components"] = [{"type": "bogus-chart", "config": {}}]
    errors = validate_config(minimal_cfg)
    assert _paths(errors) == ["/dashboard/components/0/type"]
    assert "bogus-chart" in errors[0].message


def test_known_component_kind_passes(minimal_cfg):
    minimal_cfg["dashboard"]["components"] = [{"type": "table", "config": {}}]
    assert validate_config(minimal_cfg) == []


def test_there_are_thirteen_component_kinds():
    assert len(COMPONENT_KINDS) == 13
    assert len(set(COMPONENT_KINDS)) == 13
    assert set(DATA_SOURCE_KINDS) == {"rest", "graphql", "mock", "websocket"}


@pytest.mark.parametrize("kind", COMPONENT_KINDS)
def test_every_component_kind_is_accepted(minimal_cfg, kind):
    minimal_cfg["dashboard"]["components"] = [{"type": kind, "config": {}}]
    assert validate_config(minimal_cfg) == []


def test_component_errors_are_per_element_and_indexed(minimal_cfg):
    minimal_cfg["dashboard"]["components"] = [
        {"type": "stat", "config": {}},
        {"config": {}},
        {"type": "sparkline", "config": {}},
        "not-a-component",
    ]
    errors = validate_config(minimal_cfg)
    assert _paths(errors) == [
        "/dashboard/components/1/type",
        "/dashboard/components/2/type",
        "/dashboard/components/3",
    ]
    assert "required" in errors[0].message
    assert "sparkline" in errors[1].message


def test_data_sources_optional(minimal_cfg):
    assert "dataSources" not in minimal_cfg
    assert validate_config(minimal_cfg) == []


def test_data_sources_must_be_array(minimal_cfg):
    minimal_cfg["dataSources"] = {"id": "x", "type": "rest"}
    errors = validate_config(minimal_cfg)
    assert _paths(errors) == ["/dataSources"]


def test_data_source_type_rules(minimal_cfg):
    minimal_cfg["dataSources"] = [
        {"id": "a", "type": "rest"},
        {"id": "b"},
        {"id": "c", "type": "soap"},
        {"id": "d", "type": "websocket"},
    ]
    errors = validate_config(minimal_cfg)
    assert _paths(errors) == ["/dataSources/1/type", "/dataSources/2/type"]
    assert "required" in errors[0].message
    assert "soap" in errors[1].message


def test_errors_come_in_checking_order():
    cfg = {
        "dashboard": {"title": 5, "layout": "nope", "components": [{"type": "x"}]},
        "dataSources": [{"id": "s"}],
    }
    errors = validate_config(cfg)
    assert _paths(errors) == [
        "/dashboard/title",
        "/dashboard/layout",
        "/dashboard/components/0/type",
        "/dataSources/0/type",
    ]
    assert all(isinstance(e, ValidationError) and e.severity == "error" for e in errors)


def test_validation_is_idempotent_and_read_only():
    cfg = {"dashboard": {"title": "", "components": [{"type": "bogus"}]}, "dataSources": "x"}
    before = copy.deepcopy(cfg)
    first = validate_config(cfg)
    second = validate_config(cfg)
    assert first == second
    assert cfg == before


def test_no_uniqueness_or_reference_errors(minimal_cfg):
    # Duplicate ids and dangling references are warnings at most, never errors
    minimal_cfg["dashboard"]["components"] = [
        {"id": "dup", "type": "stat", "config": {}, "dataSource": "missing"},
        {"id": "dup", "type": "text", "config": {}},
    ]
    minimal_cfg["dataSources"] = [{"id": "s", "type": "mock"}, {"id": "s", "type": "mock"}]
    assert validate_config(minimal_cfg) == []


def test_validate_config_api_success_returns_typed_model(minimal_cfg):
    ok, errs, cfg = validate_config_api(minimal_cfg)
    assert ok is True
    assert errs == []
    assert isinstance(cfg, DashboardConfig)
    assert cfg.dashboard.title == "Ops"


def test_validate_config_api_failure_does_not_raise():
    ok, errs, cfg = validate_config_api({})
    assert ok is False
    assert cfg is None
    assert [e.path for e in errs] == ["/dashboard"]


def test_validate_config_api_reports_model_level_problems(minimal_cfg):
    # Passes the error rules, but the component config is not a mapping
    minimal_cfg["dashboard"]["components"][0]["config"] = ["x"]
    ok, errs, cfg = validate_config_api(minimal_cfg)
    assert ok is False
    assert cfg is None
    assert errs[0].path == "/dashboard/components/0/config"
