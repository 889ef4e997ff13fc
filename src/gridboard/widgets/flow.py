"""
Flow widgets that arrange other widgets.

RowWidget packs children left to right and wraps onto a new line when
the next child would run past the grid edge. ColumnWidget stacks
children top to bottom without wrapping. Both derive their size from
their children and hold them in an immutable tuple.
"""

from __future__ import annotations

from typing import Iterator

from gridboard.widgets.base import (
    GRID_WIDTH,
    EmitContext,
    Widget,
    WidgetJson,
    WidgetKind,
)


class RowWidget(Widget):
    """
    Lays out widgets horizontally, wrapping like inline text.

    A child wider than the grid is still placed at the start of a line;
    it is never clipped or rejected here.
    """

    kind = WidgetKind.ROW

    def __init__(self, *widgets: Widget):
        self.widgets: tuple[Widget, ...] = tuple(widgets)
        self._placements, self._width, self._height = self._layout()

    def _layout(self) -> tuple[tuple[tuple[Widget, int, int], ...], int, int]:
        """Place each child and return the placements with the row's size."""
        placements = []
        cursor_x = 0
        cursor_y = 0
        line_height = 0
        max_x = 0
        for widget in self.widgets:
            if cursor_x + widget.width > GRID_WIDTH:
                cursor_x = 0
                cursor_y += line_height
                line_height = 0

            placements.append((widget, cursor_x, cursor_y))

            cursor_x += widget.width
            line_height = max(line_height, widget.height)
            max_x = max(max_x, cursor_x)

        return tuple(placements), min(max_x, GRID_WIDTH), cursor_y + line_height

    def _positions(self) -> Iterator[tuple[Widget, int, int]]:
        """Yield each child with the offset it is placed at within the row."""
        return iter(self._placements)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def add_widget_json(
        self,
        widget_jsons: list[WidgetJson],
        x_offset: int,
        y_offset: int,
        context: EmitContext,
    ) -> None:
        for widget, cursor_x, cursor_y in self._positions():
            widget.add_widget_json(
                widget_jsons, x_offset + cursor_x, y_offset + cursor_y, context
            )

    def __repr__(self) -> str:
        return f"RowWidget({len(self.widgets)} widgets, {self._width}x{self._height})"


class ColumnWidget(Widget):
    """Lays out widgets vertically, one below the other."""

    kind = WidgetKind.COLUMN

    def __init__(self, *widgets: Widget):
        self.widgets: tuple[Widget, ...] = tuple(widgets)
        self._width = max((w.width for w in self.widgets), default=0)
        self._height = sum(w.height for w in self.widgets)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def add_widget_json(
        self,
        widget_jsons: list[WidgetJson],
        x_offset: int,
        y_offset: int,
        context: EmitContext,
    ) -> None:
        cursor_y = 0
        for widget in self.widgets:
            widget.add_widget_json(widget_jsons, x_offset, y_offset + cursor_y, context)
            cursor_y += widget.height

    def __repr__(self) -> str:
        return f"ColumnWidget({len(self.widgets)} widgets, {self._width}x{self._height})"
