"""
Configuration management for Gridboard.

Provides declarative JSON/YAML dashboard definitions.
"""

from gridboard.config.dashboard_config import (
    WIDGET_TYPES,
    ConfigFileError,
    DashboardConfig,
    WidgetSpec,
    load_config_from_env,
)

__all__ = [
    "WIDGET_TYPES",
    "ConfigFileError",
    "DashboardConfig",
    "WidgetSpec",
    "load_config_from_env",
]
