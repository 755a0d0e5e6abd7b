# tests/conftest.py
from __future__ import annotations

import copy
from typing import Any, Dict

import pytest

_MINIMAL: Dict[str, Any] = {
    "dashboard": {
        "title": "Ops",
        "layout": "grid",
        "components": [
            {"id": "c1", "type": "stat", "title": "Uptime", "config": {"value": "99.9"}},
        ],
    }
}


@pytest.fixture
def minimal_cfg() -> Dict[str, Any]:
    """Smallest config that passes validation with no warnings. Fresh copy per test."""
    return copy.deepcopy(_MINIMAL)


@pytest.fixture
def write_cfg(tmp_path):
    """Write text to tmp_path/<name> and return the path as a string."""

    def _write(text: str, name: str = "dashboard.json") -> str:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return str(p)

    return _write
