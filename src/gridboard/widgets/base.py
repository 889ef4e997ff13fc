"""
Widget base contract for Gridboard.

Every widget occupies a rectangle on a grid that is GRID_WIDTH columns
wide and has no row limit. Widgets know how to append their own
positioned JSON records (and those of any children) to a shared list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# Dashboards are 24 grid units wide with an unlimited number of rows.
GRID_WIDTH = 24


class WidgetSizeError(ValueError):
    """Raised when a widget is constructed with an invalid grid size."""


class WidgetKind(Enum):
    """Layout variants a widget can be."""

    LEAF = "leaf"
    ROW = "row"
    COLUMN = "column"


@dataclass(frozen=True)
class EmitContext:
    """
    Resolved environment values handed to leaf widgets.

    The layout arithmetic never reads this; it is passed through
    unchanged so leaves can fill in properties such as the region.
    """

    region: str | None = None


@dataclass(frozen=True)
class WidgetJson:
    """A leaf widget placed at an absolute grid position."""

    type: str
    x: int
    y: int
    width: int
    height: int
    properties: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the dashboard body widget shape."""
        return {
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "properties": self.properties,
        }


class Widget(ABC):
    """
    Base class for everything that can be placed on a dashboard.

    Subclasses set ``kind`` at class level so callers can tell rows,
    columns and leaves apart without inspecting types.
    """

    kind: WidgetKind = WidgetKind.LEAF

    @property
    @abstractmethod
    def width(self) -> int:
        """Width in grid units."""

    @property
    @abstractmethod
    def height(self) -> int:
        """Height in grid units."""

    @abstractmethod
    def add_widget_json(
        self,
        widget_jsons: list[WidgetJson],
        x_offset: int,
        y_offset: int,
        context: EmitContext,
    ) -> None:
        """
        Append positioned records for this widget to ``widget_jsons``.

        Args:
            widget_jsons: Output list, appended to in traversal order
            x_offset: Grid column of this widget's top-left corner
            y_offset: Grid row of this widget's top-left corner
            context: Resolved values passed through to leaf widgets
        """
