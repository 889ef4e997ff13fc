"""
Dashboard widgets for Gridboard.

Leaf widgets carry content; RowWidget and ColumnWidget arrange other
widgets on the 24-column grid.
"""

from gridboard.widgets.base import (
    GRID_WIDTH,
    EmitContext,
    Widget,
    WidgetJson,
    WidgetKind,
    WidgetSizeError,
)
from gridboard.widgets.flow import ColumnWidget, RowWidget
from gridboard.widgets.simple import (
    Metric,
    MetricView,
    MetricWidget,
    PropertiesWidget,
    SimpleWidget,
    TextWidget,
)

__all__ = [
    # Base
    "GRID_WIDTH",
    "EmitContext",
    "Widget",
    "WidgetJson",
    "WidgetKind",
    "WidgetSizeError",
    # Flow
    "ColumnWidget",
    "RowWidget",
    # Leaves
    "Metric",
    "MetricView",
    "MetricWidget",
    "PropertiesWidget",
    "SimpleWidget",
    "TextWidget",
]
