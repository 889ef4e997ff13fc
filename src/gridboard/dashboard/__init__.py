"""
Dashboard body assembly for Gridboard.

Provides the body builder, its validation errors, and region
resolution for the surrounding resolve-then-compute pipeline.
"""

from gridboard.dashboard.body import (
    MAX_WIDGETS,
    DashboardArgs,
    DashboardBody,
    DashboardConfigError,
    MixedWidgetListError,
    PeriodOverride,
    WidgetCountError,
    build_layout,
    get_dashboard_body,
)
from gridboard.dashboard.region import (
    RegionResolutionError,
    dashboard_url,
    resolve_region,
)

__all__ = [
    "MAX_WIDGETS",
    "DashboardArgs",
    "DashboardBody",
    "DashboardConfigError",
    "MixedWidgetListError",
    "PeriodOverride",
    "WidgetCountError",
    "build_layout",
    "get_dashboard_body",
    "RegionResolutionError",
    "dashboard_url",
    "resolve_region",
]
