from __future__ import annotations
from typing import Any, Dict

__all__ = ["create_default_config", "create_sample_config"]


# Fresh literals on every call; callers own the result.

def create_default_config() -> Dict[str, Any]:
    return {
        "dashboard": {
            "title": "My Dashboard",
            "layout": "grid",
            "components": [
                {
                    "type": "stat",
                    "title": "Total Users",
                    "config": {"value": "0"},
                }
            ],
        }
    }


def create_sample_config() -> Dict[str, Any]:
    """Multi-component demo: three stats, a line chart and a pie chart fed by two REST sources."""
    return {
        "dashboard": {
            "title": "Sample Dashboard",
            "layout": "grid",
            "theme": "light",
            "columns": 12,
            "components": [
                {
                    "id": "total-users",
                    "type": "stat",
                    "title": "Total Users",
                    "dataSource": "users",
                    "config": {"field": "total", "format": "number"},
                    "gridColumn": "span 4",
                },
                {
                    "id": "active-users",
                    "type": "stat",
                    "title": "Active Users",
                    "dataSource": "users",
                    "config": {"field": "active", "format": "number"},
                    "gridColumn": "span 4",
                },
                {
                    "id": "revenue",
                    "type": "stat",
                    "title": "Revenue",
                    "dataSource": "sales",
                    "config": {"field": "revenue", "format": "currency", "currency": "USD"},
                    "gridColumn": "span 4",
                },
                {
                    "id": "signups-over-time",
                    "type": "line-chart",
                    "title": "Signups Over Time",
                    "dataSource": "users",
                    "config": {"xField": "date", "yField": "signups", "smooth": True},
                    "gridColumn": "span 8",
                    "height": "320px",
                },
                {
                    "id": "sales-by-region",
                    "type": "pie-chart",
                    "title": "Sales by Region",
                    "dataSource": "sales",
                    "config": {"labelField": "region", "valueField": "amount", "donut": False},
                    "gridColumn": "span 4",
                    "height": "320px",
                },
            ],
        },
        "dataSources": [
            {
                "id": "users",
                "name": "User Metrics",
                "type": "rest",
                "url": "https://api.example.com/metrics/users",
                "refreshInterval": 60000,
            },
            {
                "id": "sales",
                "name": "Sales Metrics",
                "type": "rest",
                "url": "https://api.example.com/metrics/sales",
                "refreshInterval": 300000,
                "headers": {"Accept": "application/json"},
            },
        ],
        "settings": {
            "autoRefresh": True,
            "refreshInterval": 60000,
            "showHeader": True,
            "compact": False,
        },
    }
