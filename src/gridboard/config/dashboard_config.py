"""
Declarative dashboard configuration for Gridboard.

Dashboards can be described in JSON or YAML and turned into a widget
tree plus DashboardArgs. Example YAML:

    name: api-overview
    start: -PT8H
    period_override: auto
    widgets:
      - type: row
        widgets:
          - type: text
            width: 24
            height: 2
            properties:
              markdown: "# API"
      - type: row
        widgets:
          - type: metric
            width: 12
            properties:
              title: Latency
              metrics:
                - namespace: AWS/ApiGateway
                  name: Latency
                  dimensions: {ApiName: orders}
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from gridboard.dashboard.body import DashboardArgs
from gridboard.widgets.base import Widget
from gridboard.widgets.flow import ColumnWidget, RowWidget
from gridboard.widgets.simple import Metric, MetricView, MetricWidget, TextWidget


class ConfigFileError(Exception):
    """Raised when a dashboard configuration cannot be loaded."""


WIDGET_TYPES = ("text", "metric", "row", "column")


def _widget_list(data: dict[str, Any]) -> list[Any]:
    """Return the ``widgets`` entry of a definition; a null entry means none."""
    widgets = data.get("widgets") or []
    if not isinstance(widgets, list):
        raise ConfigFileError(f"'widgets' must be a list, got {widgets!r}")
    return widgets


@dataclass
class WidgetSpec:
    """Declarative description of a single widget or widget group."""

    type: str
    width: int = 6
    height: int = 6
    properties: dict[str, Any] = field(default_factory=dict)
    widgets: list[WidgetSpec] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        if self.type in ("row", "column"):
            return {
                "type": self.type,
                "widgets": [w.to_dict() for w in self.widgets],
            }
        return {
            "type": self.type,
            "width": self.width,
            "height": self.height,
            "properties": self.properties,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WidgetSpec:
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise ConfigFileError(f"Widget definition must be a mapping, got {data!r}")

        widget_type = data.get("type")
        if widget_type not in WIDGET_TYPES:
            raise ConfigFileError(
                f"Unknown widget type {widget_type!r}; expected one of: "
                + ", ".join(WIDGET_TYPES)
            )

        sizes = {}
        for key in ("width", "height"):
            value = data.get(key, 6)
            # bool is an int subclass.
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigFileError(
                    f"Widget {key} must be an integer, got {value!r}"
                )
            sizes[key] = value

        properties = data.get("properties") or {}
        if not isinstance(properties, dict):
            raise ConfigFileError(f"Widget properties must be a mapping, got {properties!r}")

        return cls(
            type=widget_type,
            width=sizes["width"],
            height=sizes["height"],
            properties=properties,
            widgets=[cls.from_dict(w) for w in _widget_list(data)],
        )

    def build(self) -> Widget:
        """Build the widget this spec describes."""
        if self.type == "row":
            return RowWidget(*(w.build() for w in self.widgets))
        if self.type == "column":
            return ColumnWidget(*(w.build() for w in self.widgets))
        if self.type == "text":
            return TextWidget(
                markdown=self.properties.get("markdown", ""),
                width=self.width,
                height=self.height,
            )

        props = self.properties
        try:
            metrics = [
                Metric(
                    namespace=m["namespace"],
                    name=m["name"],
                    dimensions=m.get("dimensions", {}),
                    label=m.get("label"),
                )
                for m in props.get("metrics", [])
            ]
        except KeyError as e:
            raise ConfigFileError(f"Metric is missing required field {e}") from None

        return MetricWidget(
            title=props.get("title", ""),
            metrics=metrics,
            view=MetricView(props.get("view", MetricView.TIME_SERIES.value)),
            stat=props.get("stat", "Average"),
            period=props.get("period", 300),
            stacked=props.get("stacked", False),
            region=props.get("region"),
            width=self.width,
            height=self.height,
        )


@dataclass
class DashboardConfig:
    """Complete configuration of one dashboard."""

    name: str = "default"
    region: str | None = None
    start: str | None = None
    end: str | None = None
    period_override: str | None = None
    widgets: list[WidgetSpec] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {"name": self.name}
        for key in ("region", "start", "end", "period_override"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        data["widgets"] = [w.to_dict() for w in self.widgets]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DashboardConfig:
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise ConfigFileError("Dashboard configuration must be a mapping")
        return cls(
            name=data.get("name", "default"),
            region=data.get("region"),
            start=data.get("start"),
            end=data.get("end"),
            period_override=data.get("period_override"),
            widgets=[WidgetSpec.from_dict(w) for w in _widget_list(data)],
        )

    @classmethod
    def from_json(cls, json_str: str) -> DashboardConfig:
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def from_file(cls, path: str) -> DashboardConfig:
        """Load configuration from a .json, .yaml or .yml file."""
        path = os.path.expanduser(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.endswith(".json"):
                    return cls.from_dict(json.load(f))
                return cls.from_dict(yaml.safe_load(f))
        except OSError as e:
            raise ConfigFileError(f"Cannot read {path}: {e.strerror}") from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigFileError(f"Cannot parse {path}: {e}") from e

    def save(self, path: str) -> None:
        """Save configuration to file."""
        path = os.path.expanduser(path)
        Path(path).parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            if path.endswith(".json"):
                json.dump(self.to_dict(), f, indent=2)
            else:
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_args(self) -> DashboardArgs:
        """Build the widget tree and wrap it in DashboardArgs."""
        return DashboardArgs(
            widgets=[w.build() for w in self.widgets],
            start=self.start,
            end=self.end,
            period_override=self.period_override,
            name=self.name,
            region=self.region,
        )


def load_config_from_env() -> DashboardConfig:
    """
    Load configuration from environment variables.

    Environment variables:
        GRIDBOARD_CONFIG_FILE: Path to configuration file
        GRIDBOARD_REGION: Region override
        GRIDBOARD_START: Dashboard time range start
        GRIDBOARD_END: Dashboard time range end
        GRIDBOARD_PERIOD_OVERRIDE: auto or inherit

    Returns:
        DashboardConfig instance
    """
    config_file = os.getenv("GRIDBOARD_CONFIG_FILE")
    if config_file and os.path.exists(config_file):
        config = DashboardConfig.from_file(config_file)
    else:
        config = DashboardConfig()

    config.region = os.getenv("GRIDBOARD_REGION", config.region)
    config.start = os.getenv("GRIDBOARD_START", config.start)
    config.end = os.getenv("GRIDBOARD_END", config.end)
    config.period_override = os.getenv("GRIDBOARD_PERIOD_OVERRIDE", config.period_override)

    return config
