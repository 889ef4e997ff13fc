"""
Dashboard body assembly for Gridboard.

Turns a flat list of widgets into the CloudWatch ``DashboardBody``
document. The list is either a sequence of RowWidgets, stacked
vertically, or a sequence of other widgets that become a single row.

See https://docs.aws.amazon.com/AmazonCloudWatch/latest/APIReference/CloudWatch-Dashboard-Body-Structure.html
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gridboard.observability.logging import get_logger
from gridboard.widgets.base import EmitContext, Widget, WidgetJson, WidgetKind
from gridboard.widgets.flow import ColumnWidget, RowWidget

logger = get_logger(__name__)

# A dashboard can hold at most this many widgets.
MAX_WIDGETS = 100


class DashboardConfigError(Exception):
    """Base exception for invalid dashboard input."""


class WidgetCountError(DashboardConfigError):
    """Raised when the widget count is outside the allowed bounds."""


class MixedWidgetListError(DashboardConfigError):
    """Raised when a widget list mixes RowWidgets with other widgets."""


class PeriodOverride(Enum):
    """How graph periods react to the dashboard time range."""

    AUTO = "auto"
    INHERIT = "inherit"


@dataclass
class DashboardArgs:
    """
    Inputs for building a dashboard body.

    ``start`` may be an ISO 8601 timestamp or a relative duration such
    as ``-PT8H``. ``end`` is only meaningful together with ``start``.
    If any widget is a RowWidget, all of them must be, and they are
    stacked as rows; otherwise the widgets form a single row.
    """

    widgets: list[Widget] | None = None
    start: str | None = None
    end: str | None = None
    period_override: PeriodOverride | str | None = None
    name: str | None = None
    region: str | None = None


@dataclass
class DashboardBody:
    """A laid-out dashboard, ready to serialize."""

    widgets: list[WidgetJson] = field(default_factory=list)
    start: str | None = None
    end: str | None = None
    period_override: PeriodOverride | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the CloudWatch body shape, omitting unset fields."""
        data: dict[str, Any] = {}
        if self.start is not None:
            data["start"] = self.start
        if self.end is not None:
            data["end"] = self.end
        if self.period_override is not None:
            data["periodOverride"] = self.period_override.value
        data["widgets"] = [w.to_dict() for w in self.widgets]
        return data

    def to_json(self, indent: int | None = None) -> str:
        """Serialize deterministically."""
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)


def _parse_period_override(value: PeriodOverride | str | None) -> PeriodOverride | None:
    if value is None or isinstance(value, PeriodOverride):
        return value
    try:
        return PeriodOverride(value)
    except ValueError:
        allowed = ", ".join(p.value for p in PeriodOverride)
        raise DashboardConfigError(
            f"Invalid periodOverride {value!r}; expected one of: {allowed}"
        ) from None


def _validate_widgets(widgets: list[Widget]) -> bool:
    """
    Check count and homogeneity of a top-level widget list.

    Returns:
        True if the list is a sequence of rows
    """
    if len(widgets) > MAX_WIDGETS:
        raise WidgetCountError(
            f"Must supply between 0 and {MAX_WIDGETS} widgets, got {len(widgets)}"
        )

    first_is_row = bool(widgets) and widgets[0].kind is WidgetKind.ROW
    for index, widget in enumerate(widgets[1:], start=1):
        if (widget.kind is WidgetKind.ROW) != first_is_row:
            raise MixedWidgetListError(
                "All widgets must either be RowWidgets or none of them must be "
                f"(widget {index} is {widget.kind.value}, widget 0 is "
                f"{widgets[0].kind.value})"
            )
    return first_is_row


def build_layout(widgets: list[Widget]) -> ColumnWidget:
    """
    Normalize a top-level widget list into a column of rows.

    Raises:
        WidgetCountError: More than MAX_WIDGETS widgets
        MixedWidgetListError: Rows mixed with non-row widgets
    """
    is_row_list = _validate_widgets(widgets)
    rows = list(widgets) if is_row_list else [RowWidget(*widgets)]
    return ColumnWidget(*rows)


def get_dashboard_body(
    args: DashboardArgs,
    context: EmitContext | None = None,
) -> DashboardBody:
    """
    Lay out the widgets in ``args`` and assemble the dashboard body.

    All validation happens before layout, so a failure never leaves a
    partially built body. Errors raised by a leaf's properties are not
    caught.

    Args:
        args: Widgets and dashboard-level fields
        context: Resolved values for leaf widgets; defaults to one
            carrying ``args.region``

    Returns:
        DashboardBody with widgets in reading order
    """
    if context is None:
        context = EmitContext(region=args.region)

    widgets = args.widgets or []

    try:
        period_override = _parse_period_override(args.period_override)
        root = build_layout(widgets)
    except DashboardConfigError as e:
        logger.validation_failed(rule=type(e).__name__, error=str(e))
        raise

    widget_jsons: list[WidgetJson] = []
    root.add_widget_json(widget_jsons, 0, 0, context)

    logger.body_built(
        widget_count=len(widgets),
        record_count=len(widget_jsons),
        height=root.height,
    )

    return DashboardBody(
        widgets=widget_jsons,
        start=args.start,
        end=args.end,
        period_override=period_override,
    )
