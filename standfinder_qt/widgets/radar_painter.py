"""
QPainter adapter for the stand radar chart.

Features:
- render(): paint build_chart() primitives onto any QPaintDevice or QPainter
- render_to_image() / export_png(): offscreen rendering for the CLI and tests
- StandChartWidget: QWidget showing the chart of the current stand

All geometry lives in standfinder.gui.widgets.radar_geometry; this module
only translates primitives into QPainter calls.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QPointF, QRectF, QSize, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QImage, QPainter, QPaintDevice, QPen, QPolygonF
from PySide6.QtWidgets import QWidget

from standfinder.core.models import TraitLevels
from standfinder.gui.widgets.radar_geometry import (
    BACKGROUND_COLOR,
    DEFAULT_CANVAS_SIZE,
    Circle,
    DrawCommand,
    FillRect,
    Label,
    Polygon,
    Rgba,
    Segment,
    build_chart,
)

_logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

FONT_FAMILY = "Arial"
# Text box around a label's anchor; wide enough for "Infinite" at 20px bold
LABEL_BOX_WIDTH = 120
EMPTY_TEXT = "Paste a chart URL to find your stand"
EMPTY_TEXT_COLOR = QColor("#999999")


def _qcolor(color: Rgba) -> QColor:
    return QColor.fromRgbF(*color)


# =============================================================================
# Painting
# =============================================================================


def paint_commands(painter: QPainter, commands: list[DrawCommand]) -> None:
    """Issue drawing primitives on an active painter, in order."""
    for command in commands:
        if isinstance(command, FillRect):
            painter.fillRect(QRectF(command.x, command.y, command.width, command.height), _qcolor(command.color))
        elif isinstance(command, Circle):
            painter.setPen(QPen(_qcolor(command.color), command.line_width))
            painter.setBrush(Qt.NoBrush)
            painter.drawEllipse(QPointF(*command.center), command.radius, command.radius)
        elif isinstance(command, Segment):
            painter.setPen(QPen(_qcolor(command.color), command.line_width))
            painter.drawLine(QPointF(*command.start), QPointF(*command.end))
        elif isinstance(command, Polygon):
            _paint_polygon(painter, command)
        elif isinstance(command, Label):
            _paint_label(painter, command)


def _paint_polygon(painter: QPainter, command: Polygon) -> None:
    polygon = QPolygonF([QPointF(x, y) for x, y in command.points])
    if command.line_width is not None:
        painter.setPen(QPen(_qcolor(command.stroke_color), command.line_width))
    else:
        painter.setPen(Qt.NoPen)
    if command.fill_color is not None:
        painter.setBrush(QBrush(_qcolor(command.fill_color)))
    else:
        painter.setBrush(Qt.NoBrush)
    painter.drawPolygon(polygon)


def _paint_label(painter: QPainter, command: Label) -> None:
    font = QFont(FONT_FAMILY)
    font.setPixelSize(command.font_size)
    font.setBold(command.bold)
    painter.setFont(font)
    painter.setPen(QPen(_qcolor(command.color)))
    x, y = command.position
    box_height = command.font_size * 2
    rect = QRectF(x - LABEL_BOX_WIDTH / 2, y - box_height / 2, LABEL_BOX_WIDTH, box_height)
    painter.drawText(rect, Qt.AlignCenter, command.text)


def render(surface: Union[QPaintDevice, QPainter], levels: TraitLevels) -> None:
    """Draw the radar chart for ``levels`` over the whole surface.

    Args:
        surface: A paint device (QImage, QPixmap, QWidget) or an active
            QPainter. The canvas size is taken from the device.
        levels: Trait levels to plot.
    """
    if isinstance(surface, QPainter):
        device = surface.device()
        commands = build_chart(levels, device.width(), device.height())
        paint_commands(surface, commands)
        return

    painter = QPainter(surface)
    try:
        painter.setRenderHint(QPainter.Antialiasing)
        paint_commands(painter, build_chart(levels, surface.width(), surface.height()))
    finally:
        painter.end()


def render_to_image(levels: TraitLevels, size: int = DEFAULT_CANVAS_SIZE) -> QImage:
    """Render the chart onto a new square ARGB image."""
    image = QImage(QSize(size, size), QImage.Format_ARGB32)
    image.fill(_qcolor(BACKGROUND_COLOR))
    render(image, levels)
    return image


def export_png(levels: TraitLevels, path: Union[str, Path], size: int = DEFAULT_CANVAS_SIZE) -> Path:
    """Render the chart and save it as PNG.

    Raises:
        OSError: If Qt cannot write the file.
    """
    path = Path(path)
    image = render_to_image(levels, size)
    if not image.save(str(path), "PNG"):
        raise OSError(f"Could not write chart image to {path}")
    _logger.info("Exported chart to %s (%dx%d)", path, size, size)
    return path


# =============================================================================
# StandChartWidget
# =============================================================================


class StandChartWidget(QWidget):
    """Widget showing the radar chart of the current stand."""

    def __init__(self, canvas_size: int = DEFAULT_CANVAS_SIZE, parent=None):
        super().__init__(parent)
        self.setObjectName("StandChart")
        self.setFixedSize(canvas_size, canvas_size)
        self._levels: Optional[TraitLevels] = None

    @property
    def levels(self) -> Optional[TraitLevels]:
        return self._levels

    def set_levels(self, levels: Optional[TraitLevels]):
        """Set the levels to plot (None shows the empty state)."""
        self._levels = levels
        self.update()

    def clear(self):
        self.set_levels(None)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        if self._levels is None:
            painter.fillRect(self.rect(), _qcolor(BACKGROUND_COLOR))
            painter.setPen(QPen(EMPTY_TEXT_COLOR))
            painter.drawText(self.rect(), Qt.AlignCenter | Qt.TextWordWrap, EMPTY_TEXT)
        else:
            render(painter, self._levels)

        painter.end()
