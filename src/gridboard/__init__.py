"""
Gridboard - CloudWatch dashboard layout on a 24-column grid

Build dashboards by declaring widgets in reading order. Rows pack
their widgets left to right and wrap at the grid edge; rows stack top
to bottom. The result is the flat, positioned widget list that the
CloudWatch ``DashboardBody`` expects.

Quick Start:
    >>> from gridboard import DashboardArgs, RowWidget, TextWidget, get_dashboard_body
    >>>
    >>> body = get_dashboard_body(DashboardArgs(
    ...     widgets=[
    ...         RowWidget(TextWidget("# Title", width=24, height=2)),
    ...         RowWidget(TextWidget("left", width=12), TextWidget("right", width=12)),
    ...     ],
    ...     start="-PT8H",
    ... ))
    >>> [(w.x, w.y) for w in body.widgets]
    [(0, 0), (0, 2), (12, 2)]
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Mantissa"

from gridboard.dashboard import (
    MAX_WIDGETS,
    DashboardArgs,
    DashboardBody,
    DashboardConfigError,
    MixedWidgetListError,
    PeriodOverride,
    RegionResolutionError,
    WidgetCountError,
    dashboard_url,
    get_dashboard_body,
    resolve_region,
)
from gridboard.widgets import (
    GRID_WIDTH,
    ColumnWidget,
    EmitContext,
    Metric,
    MetricView,
    MetricWidget,
    PropertiesWidget,
    RowWidget,
    SimpleWidget,
    TextWidget,
    Widget,
    WidgetJson,
    WidgetKind,
    WidgetSizeError,
)

__all__ = [
    "__version__",
    # Dashboard
    "MAX_WIDGETS",
    "DashboardArgs",
    "DashboardBody",
    "DashboardConfigError",
    "MixedWidgetListError",
    "PeriodOverride",
    "RegionResolutionError",
    "WidgetCountError",
    "dashboard_url",
    "get_dashboard_body",
    "resolve_region",
    # Widgets
    "GRID_WIDTH",
    "ColumnWidget",
    "EmitContext",
    "Metric",
    "MetricView",
    "MetricWidget",
    "PropertiesWidget",
    "RowWidget",
    "SimpleWidget",
    "TextWidget",
    "Widget",
    "WidgetJson",
    "WidgetKind",
    "WidgetSizeError",
]
