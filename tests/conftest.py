"""
Pytest configuration and fixtures for Gridboard tests.

This module provides common fixtures used across unit and integration tests.
"""

from __future__ import annotations

import logging
from typing import Any, Generator

import pytest

from gridboard.widgets import EmitContext, SimpleWidget


class BoxWidget(SimpleWidget):
    """Leaf used in layout tests; its properties carry a label."""

    widget_type = "box"

    def __init__(self, label: str = "", width: int = 6, height: int = 6):
        super().__init__(width=width, height=height)
        self.label = label

    def compute_properties(self, context: EmitContext) -> dict[str, Any]:
        return {"label": self.label}


@pytest.fixture(autouse=True)
def reset_gridboard_logging() -> Generator[None, None, None]:
    """Drop handlers that configure_logging attached during a test."""
    yield
    root = logging.getLogger("gridboard")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


@pytest.fixture
def box():
    """Return a factory for labelled test leaves."""
    def _make(label: str = "", width: int = 6, height: int = 6) -> BoxWidget:
        return BoxWidget(label=label, width=width, height=height)

    return _make


@pytest.fixture
def context() -> EmitContext:
    """Return an emit context for a fixed region."""
    return EmitContext(region="us-east-1")


@pytest.fixture
def sample_config_dict() -> dict[str, Any]:
    """Return a dashboard definition with a title row and two metric rows."""
    return {
        "name": "api-overview",
        "region": "eu-west-1",
        "start": "-PT8H",
        "period_override": "auto",
        "widgets": [
            {
                "type": "row",
                "widgets": [
                    {
                        "type": "text",
                        "width": 24,
                        "height": 2,
                        "properties": {"markdown": "# API overview"},
                    },
                ],
            },
            {
                "type": "row",
                "widgets": [
                    {
                        "type": "metric",
                        "width": 12,
                        "properties": {
                            "title": "Latency",
                            "metrics": [
                                {
                                    "namespace": "AWS/ApiGateway",
                                    "name": "Latency",
                                    "dimensions": {"ApiName": "orders"},
                                },
                            ],
                        },
                    },
                    {
                        "type": "metric",
                        "width": 12,
                        "properties": {
                            "title": "Errors",
                            "view": "singleValue",
                            "stat": "Sum",
                            "metrics": [
                                {
                                    "namespace": "AWS/ApiGateway",
                                    "name": "5XXError",
                                    "dimensions": {"ApiName": "orders"},
                                    "label": "5xx",
                                },
                            ],
                        },
                    },
                ],
            },
        ],
    }
