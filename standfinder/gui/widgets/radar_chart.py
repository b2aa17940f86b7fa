"""Six-axis stand radar chart Kivy widget."""
from __future__ import annotations

from typing import Any, List

from kivy.clock import Clock
from kivy.graphics import Color, Line, Mesh, Rectangle
from kivy.properties import ObjectProperty
from kivy.uix.label import Label
from kivy.uix.relativelayout import RelativeLayout

from standfinder.gui.widgets.radar_geometry import (
    NUM_AXES,
    NUM_DASHES,
    Circle,
    DrawCommand,
    FillRect,
    Label as LabelCommand,
    Point,
    Polygon,
    Segment,
    build_chart,
    build_mesh_data,
)


class StandRadarWidget(RelativeLayout):
    """Stand radar chart widget.

    Properties:
        levels: TraitLevels to plot, or None for an empty canvas.

    The primitives from build_chart() use screen coordinates (y down); they
    are flipped here because Kivy's origin is bottom-left.
    """

    levels = ObjectProperty(None, allownone=True)

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._redraw_trigger = Clock.create_trigger(self._do_redraw, 0)

        # Axis labels then legend labels, created once; only text/pos change
        self._labels: List[Label] = []
        for _ in range(NUM_AXES + NUM_DASHES):
            lbl = Label(
                text="",
                color=(0, 0, 0, 1),
                halign="center",
                valign="middle",
                size_hint=(None, None),
                size=(80, 30),
            )
            self._labels.append(lbl)
            self.add_widget(lbl)

        for prop in ("pos", "size", "levels"):
            self.bind(**{prop: self._schedule_redraw})

    def _schedule_redraw(self, *_: Any) -> None:
        self._redraw_trigger()

    def _flip(self, point: Point) -> Point:
        return (point[0], self.height - point[1])

    def _flat_points(self, points: tuple[Point, ...], close: bool = False) -> List[float]:
        flat: List[float] = []
        for point in points:
            flat.extend(self._flip(point))
        if close:
            flat.extend(flat[:2])
        return flat

    def _do_redraw(self, *_: Any) -> None:
        self.canvas.before.clear()
        for lbl in self._labels:
            lbl.text = ""

        if self.levels is None or self.width <= 0 or self.height <= 0:
            return

        commands = build_chart(self.levels, self.width, self.height)
        labels = iter(self._labels)
        with self.canvas.before:
            for command in commands:
                if isinstance(command, LabelCommand):
                    self._place_label(next(labels), command)
                else:
                    self._draw(command)

    def _draw(self, command: DrawCommand) -> None:
        if isinstance(command, FillRect):
            Color(*command.color)
            # flip the rectangle's top edge to become its bottom edge
            Rectangle(pos=(command.x, self.height - command.y - command.height), size=(command.width, command.height))
        elif isinstance(command, Circle):
            Color(*command.color)
            cx, cy = self._flip(command.center)
            Line(circle=(cx, cy, command.radius), width=command.line_width)
        elif isinstance(command, Segment):
            Color(*command.color)
            Line(points=[*self._flip(command.start), *self._flip(command.end)], width=command.line_width)
        elif isinstance(command, Polygon):
            if command.fill_color is not None:
                center = self._flip((self.width / 2, self.height / 2))
                vertices, indices = build_mesh_data([self._flip(p) for p in command.points], center)
                Color(*command.fill_color)
                Mesh(vertices=vertices, indices=indices, mode="triangles")
            if command.line_width is not None:
                Color(*command.stroke_color)
                Line(points=self._flat_points(command.points, close=True), width=command.line_width)

    def _place_label(self, lbl: Label, command: LabelCommand) -> None:
        lbl.text = command.text
        lbl.font_size = command.font_size
        lbl.bold = command.bold
        lbl.color = command.color
        lbl.center = self._flip(command.position)
