"""Editing state of the builder: panels, selection, placement and import/export."""

from __future__ import annotations

from dataclasses import dataclass, field

from radbuilder.palette import default_props, default_size
from radbuilder.project import Project
from radbuilder.widget import DockArea, Vec2, Widget, WidgetKind, snap_pos_with_grid

# Order in which live panel rectangles are hit-tested.
_HIT_ORDER = (
    DockArea.TOP,
    DockArea.BOTTOM,
    DockArea.LEFT,
    DockArea.RIGHT,
    DockArea.CENTER,
)


def _z_for_id(widget_id: int) -> int:
    """Draw order derived from an id, wrapped to a signed 32-bit value."""
    return ((widget_id + 2**31) % 2**32) - 2**31


def _split_lines(text: str) -> list[str]:
    """Split on newlines, dropping one trailing empty line and stray carriage returns."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min: Vec2
    max: Vec2

    @classmethod
    def from_min_size(cls, min_pos: Vec2, size: Vec2) -> Rect:
        return cls(min_pos, min_pos + size)

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def contains(self, pos: Vec2) -> bool:
        """True if ``pos`` lies inside the rectangle, edges included."""
        return (
            self.min.x <= pos.x <= self.max.x
            and self.min.y <= pos.y <= self.max.y
        )


@dataclass
class Editor:
    """The designer's state: the project being edited plus interaction state."""

    project: Project = field(default_factory=Project)
    selected: int | None = None
    next_id: int = 1
    spawning: WidgetKind | None = None
    generated: str = ""
    grid_size: float = 1.0
    show_grid: bool = False
    palette_open: bool = True
    live_rects: dict[DockArea, Rect] = field(default_factory=dict)

    def set_panel_rect(self, area: DockArea, rect: Rect | None) -> None:
        """Record where a panel is currently shown; ``None`` hides it."""
        if area is DockArea.FREE:
            raise ValueError("the free area has no panel of its own")
        if rect is None:
            self.live_rects.pop(area, None)
        else:
            self.live_rects[area] = rect

    def area_at(self, pos: Vec2) -> DockArea:
        """The panel under ``pos``, or FREE when none contains it."""
        for area in _HIT_ORDER:
            rect = self.live_rects.get(area)
            if rect is not None and rect.contains(pos):
                return area
        return DockArea.FREE

    def origin_for_area(self, area: DockArea) -> Vec2 | None:
        """Top-left corner of the panel for ``area``; free widgets live in the center."""
        if area is DockArea.FREE:
            area = DockArea.CENTER
        rect = self.live_rects.get(area)
        return rect.min if rect is not None else None

    def snap_pos(self, p: Vec2) -> Vec2:
        return snap_pos_with_grid(p, self.grid_size)

    def spawn_widget(
        self,
        kind: WidgetKind,
        at_global: Vec2,
        area: DockArea,
        area_origin: Vec2,
    ) -> Widget:
        """Create a widget of ``kind`` centred on ``at_global`` and select it."""
        widget_id = self.next_id
        self.next_id += 1
        size = default_size(kind)
        local = at_global - area_origin - size * 0.5
        widget = Widget(
            id=widget_id,
            kind=kind,
            pos=self.snap_pos(local),
            size=size,
            z=_z_for_id(widget_id),
            area=area,
            props=default_props(kind),
        )
        self.project.widgets.append(widget)
        self.selected = widget_id
        return widget

    def drop(self, kind: WidgetKind, pos: Vec2) -> Widget | None:
        """Finish a palette drag at ``pos``; returns the new widget if one was placed."""
        area = self.area_at(pos)
        origin = self.origin_for_area(area)
        widget = None
        if origin is not None:
            widget = self.spawn_widget(kind, pos, area, origin)
        self.spawning = None
        return widget

    def _widget(self, widget_id: int) -> Widget:
        for widget in self.project.widgets:
            if widget.id == widget_id:
                return widget
        raise KeyError(widget_id)

    def selected_widget(self) -> Widget | None:
        if self.selected is None:
            return None
        return next(
            (w for w in self.project.widgets if w.id == self.selected), None
        )

    def select(self, widget_id: int | None) -> None:
        self.selected = widget_id

    def move_widget(self, widget_id: int, delta: Vec2, canvas_rect: Rect) -> Widget:
        """Drag a widget by ``delta``, snapped and kept inside ``canvas_rect``."""
        widget = self._widget(widget_id)
        pos = snap_pos_with_grid(widget.pos + delta, self.grid_size)
        max_x = max(canvas_rect.width - widget.size.x, 0.0)
        max_y = max(canvas_rect.height - widget.size.y, 0.0)
        widget.pos = Vec2(
            min(max(pos.x, 0.0), max_x),
            min(max(pos.y, 0.0), max_y),
        )
        return widget

    def resize_widget(self, widget_id: int, delta: Vec2, canvas_rect: Rect) -> Widget:
        """Grow a widget by ``delta``, no smaller than 20x16 and no larger than the canvas."""
        widget = self._widget(widget_id)
        size = widget.size + delta
        widget.size = Vec2(
            min(max(size.x, 20.0), canvas_rect.width),
            min(max(size.y, 16.0), canvas_rect.height),
        )
        return widget

    def set_items(self, widget_id: int, text: str) -> Widget:
        """Replace a widget's items with the lines of ``text``, keeping the selection valid."""
        widget = self._widget(widget_id)
        props = widget.props
        props.items = _split_lines(text)
        if props.selected >= len(props.items):
            props.selected = max(len(props.items) - 1, 0)
        return widget

    def set_area(self, widget_id: int, area: DockArea) -> Widget:
        """Move a widget to another dock area, snapping its position."""
        widget = self._widget(widget_id)
        if area is not widget.area:
            widget.area = area
            widget.pos = snap_pos_with_grid(widget.pos, self.grid_size)
        return widget

    def delete_selected(self) -> Widget | None:
        """Remove the selected widget, if any, and clear the selection."""
        widget = self.selected_widget()
        if widget is not None:
            self.project.widgets = [
                w for w in self.project.widgets if w.id != widget.id
            ]
        self.selected = None
        return widget

    def export_json(self) -> str:
        """Put the project as JSON into the output buffer and return it."""
        self.generated = self.project.to_json()
        return self.generated

    def import_json(self) -> Project:
        """Load the project from the output buffer.

        Raises ValueError on malformed input, leaving the current project as is.
        """
        project = Project.from_json(self.generated)
        self.project = project
        self.selected = None
        return project

    def clear_project(self) -> None:
        self.project = Project()
        self.selected = None

    def widgets_by_area(self) -> dict[DockArea, list[Widget]]:
        """Widgets grouped by dock area, each group in project order."""
        groups: dict[DockArea, list[Widget]] = {area: [] for area in DockArea}
        for widget in self.project.widgets:
            groups[widget.area].append(widget)
        return groups