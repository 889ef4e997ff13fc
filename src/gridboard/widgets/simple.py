"""
Leaf widgets for Gridboard.

Leaves are the only widgets that produce records in a dashboard body.
Each leaf validates its own size on construction and builds its
``properties`` block when it is placed.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from gridboard.widgets.base import (
    GRID_WIDTH,
    EmitContext,
    Widget,
    WidgetJson,
    WidgetKind,
    WidgetSizeError,
)


class MetricView(Enum):
    """How a metric widget renders its data."""

    TIME_SERIES = "timeSeries"
    SINGLE_VALUE = "singleValue"


class SimpleWidget(Widget):
    """
    A leaf widget with a fixed size.

    Subclasses provide the widget ``type`` string and the properties
    block; placement is handled here.
    """

    kind = WidgetKind.LEAF
    widget_type: str = ""

    def __init__(self, width: int = 6, height: int = 6):
        if width < 1 or width > GRID_WIDTH:
            raise WidgetSizeError(
                f"Widget width must be between 1 and {GRID_WIDTH}, got {width}"
            )
        if height < 1:
            raise WidgetSizeError(f"Widget height must be at least 1, got {height}")
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @abstractmethod
    def compute_properties(self, context: EmitContext) -> dict[str, Any]:
        """Build the ``properties`` block for this widget."""

    def add_widget_json(
        self,
        widget_jsons: list[WidgetJson],
        x_offset: int,
        y_offset: int,
        context: EmitContext,
    ) -> None:
        widget_jsons.append(WidgetJson(
            type=self.widget_type,
            x=x_offset,
            y=y_offset,
            width=self._width,
            height=self._height,
            properties=self.compute_properties(context),
        ))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, height={self._height})"


class TextWidget(SimpleWidget):
    """Free text rendered as markdown."""

    widget_type = "text"

    def __init__(self, markdown: str, width: int = 6, height: int = 6):
        super().__init__(width=width, height=height)
        self.markdown = markdown

    def compute_properties(self, context: EmitContext) -> dict[str, Any]:
        return {"markdown": self.markdown}


@dataclass(frozen=True)
class Metric:
    """A single CloudWatch metric line shown by a MetricWidget."""

    namespace: str
    name: str
    dimensions: dict[str, str] = field(default_factory=dict)
    label: str | None = None

    def to_row(self) -> list[Any]:
        """Convert to the ``[namespace, name, dim, value, ..., options]`` form."""
        row: list[Any] = [self.namespace, self.name]
        for key in sorted(self.dimensions):
            row.extend([key, self.dimensions[key]])
        if self.label:
            row.append({"label": self.label})
        return row


class MetricWidget(SimpleWidget):
    """
    Graph or single-number view over one or more metrics.

    The region defaults to the one carried by the emit context, so a
    dashboard built for one region does not need it repeated per widget.
    """

    widget_type = "metric"

    def __init__(
        self,
        title: str,
        metrics: list[Metric],
        view: MetricView = MetricView.TIME_SERIES,
        stat: str = "Average",
        period: int = 300,
        stacked: bool = False,
        region: str | None = None,
        width: int = 6,
        height: int = 6,
    ):
        super().__init__(width=width, height=height)
        if period < 1:
            raise ValueError(f"Metric period must be a positive number of seconds, got {period}")
        self.title = title
        self.metrics = list(metrics)
        self.view = view
        self.stat = stat
        self.period = period
        self.stacked = stacked
        self.region = region

    def compute_properties(self, context: EmitContext) -> dict[str, Any]:
        properties: dict[str, Any] = {
            "title": self.title,
            "view": self.view.value,
            "metrics": [metric.to_row() for metric in self.metrics],
            "stat": self.stat,
            "period": self.period,
        }
        if self.view is MetricView.TIME_SERIES:
            properties["stacked"] = self.stacked
        region = self.region or context.region
        if region:
            properties["region"] = region
        return properties


class PropertiesWidget(SimpleWidget):
    """
    Leaf whose properties come from a caller-supplied function.

    Errors raised by ``properties_fn`` propagate to the caller unchanged.
    """

    def __init__(
        self,
        widget_type: str,
        properties_fn: Callable[[EmitContext], dict[str, Any]],
        width: int = 6,
        height: int = 6,
    ):
        super().__init__(width=width, height=height)
        self.widget_type = widget_type
        self.properties_fn = properties_fn

    def compute_properties(self, context: EmitContext) -> dict[str, Any]:
        return self.properties_fn(context)
