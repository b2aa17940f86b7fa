"""Pure geometry for the stand radar chart.

NO Kivy or Qt imports - all functions are pure and deterministic. The
chart is described as a list of drawing primitives; each frontend has a
thin adapter that issues them against its own drawing surface.

Coordinate System (screen):
- Origin at top-left, Y increases downward
- A point at angle a and radius r is (cx + r*sin(a), cy + r*cos(a)),
  so angle 0 points straight down and angles grow counter-clockwise

Radar Layout:
- Axis i at i * 60 degrees, in CHART_AXIS_ORDER
  (speed, range, durability, precision, potential, power)
- Level L is drawn at radius HEX_MAX_RADIUS / 6 * (L + 1)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from standfinder.core.models import BUCKET_LABELS, CHART_AXIS_ORDER, TraitLevels, bucket_label, clamp_level

_logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Rgba = Tuple[float, float, float, float]

# =============================================================================
# Constants
# =============================================================================

NUM_AXES = len(CHART_AXIS_ORDER)
NUM_SCALE_TICKS = 22
HEX_SPACE = 2 * math.pi / NUM_AXES
TICK_SPACE = 2 * math.pi / NUM_SCALE_TICKS

HEX_MAX_RADIUS = 100.0
OUTER_CIRCLE_RADIUS = 150.0
INNER_CIRCLE_RADIUS = 140.0
LABEL_OFFSET = 20.0
LEGEND_OFFSET_X = 10.0

# One radial step per bucket, level 0 already one step out
LEVEL_STEPS = len(BUCKET_LABELS)
LEVEL_STEP = HEX_MAX_RADIUS / LEVEL_STEPS
NUM_DASHES = LEVEL_STEPS - 1
DASH_HALF_ANGLE = 0.15

DEFAULT_CANVAS_SIZE = 400

BACKGROUND_COLOR: Rgba = (1.0, 1.0, 1.0, 1.0)
INK_COLOR: Rgba = (0.0, 0.0, 0.0, 1.0)
HIGHLIGHT_COLOR: Rgba = (1.0, 0.0, 0.0, 0x88 / 255)

RING_WIDTH = 2.0
SCALE_TICK_WIDTH = 4.0
GRID_WIDTH = 1.0

AXIS_LABEL_FONT_SIZE = 20
LEGEND_FONT_SIZE = 10


# =============================================================================
# Drawing primitives
# =============================================================================


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: Rgba


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    line_width: float
    color: Rgba = INK_COLOR


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    line_width: float
    color: Rgba = INK_COLOR


@dataclass(frozen=True)
class Polygon:
    """Closed polygon. Outlined when ``line_width`` is set, filled when ``fill_color`` is."""

    points: Tuple[Point, ...]
    line_width: float | None = None
    stroke_color: Rgba = INK_COLOR
    fill_color: Rgba | None = None


@dataclass(frozen=True)
class Label:
    """Text centred (horizontally and vertically) on ``position``."""

    text: str
    position: Point
    font_size: int
    bold: bool = False
    color: Rgba = INK_COLOR


DrawCommand = Union[FillRect, Circle, Segment, Polygon, Label]


# =============================================================================
# Point helpers
# =============================================================================


def polar_point(angle: float, radius: float, center: Point) -> Point:
    """Screen point at ``angle`` (radians, 0 = down) and ``radius`` from ``center``."""
    return (center[0] + radius * math.sin(angle), center[1] + radius * math.cos(angle))


def level_radius(level: int) -> float:
    """Radius of a bucket level on an axis (level 0 -> 1/6 of the hexagon)."""
    return LEVEL_STEP * (clamp_level(level) + 1)


def calculate_vertex(axis_index: int, level: int, center: Point) -> Point:
    """Data polygon vertex for ``level`` on axis ``axis_index`` (0-5)."""
    return polar_point(HEX_SPACE * axis_index, level_radius(level), center)


def get_hexagon_points(radius: float, center: Point) -> Tuple[Point, ...]:
    """Regular hexagon with its vertices on the chart axes."""
    return tuple(polar_point(HEX_SPACE * i, radius, center) for i in range(NUM_AXES))


def get_data_polygon(levels: TraitLevels, center: Point) -> Tuple[Point, ...]:
    """Six vertices of the filled shape, one per axis in CHART_AXIS_ORDER."""
    return tuple(calculate_vertex(i, levels.get(axis), center) for i, axis in enumerate(CHART_AXIS_ORDER))


def get_label_position(axis_index: int, center: Point) -> Point:
    """Axis label position just beyond the hexagon. Same angle as the vertex."""
    return polar_point(HEX_SPACE * axis_index, HEX_MAX_RADIUS + LABEL_OFFSET, center)


def get_dash_segment(axis_index: int, tick_index: int, center: Point) -> Tuple[Point, Point]:
    """Short arc-like dash across an axis at bucket boundary ``tick_index`` (0-4).

    The dash spans +/- 0.15 / (tick_index + 1) radians, so it keeps a similar
    length as it moves outward.
    """
    angle = HEX_SPACE * axis_index
    radius = LEVEL_STEP * (tick_index + 1)
    half = DASH_HALF_ANGLE / (tick_index + 1)
    return (polar_point(angle - half, radius, center), polar_point(angle + half, radius, center))


def get_legend_position(level: int, center: Point) -> Point:
    """Legend label for ``level`` on the vertical axis above the centre."""
    return (center[0] + LEGEND_OFFSET_X, center[1] - LEVEL_STEP * (level + 1))


# =============================================================================
# Chart
# =============================================================================


def _check_levels(levels: TraitLevels) -> None:
    for axis in CHART_AXIS_ORDER:
        level = levels.get(axis)
        if clamp_level(level) != level:
            _logger.warning("Level %s=%d is outside 0-%d, drawing it clamped", axis.value, level, LEVEL_STEPS - 1)


def build_chart(
    levels: TraitLevels,
    width: float = DEFAULT_CANVAS_SIZE,
    height: float = DEFAULT_CANVAS_SIZE,
) -> List[DrawCommand]:
    """Describe the whole radar chart for ``levels`` as primitives in paint order.

    Args:
        levels: Trait levels to plot (normally the matched stand's).
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        Background, scale rings and ticks, reference hexagon, filled data
        polygon, per-axis spokes/labels/dashes, then the legend.
    """
    _check_levels(levels)
    center = (width / 2, height / 2)
    commands: List[DrawCommand] = [FillRect(0.0, 0.0, width, height, BACKGROUND_COLOR)]

    # Calibration scale between the two rings
    commands.append(Circle(center, OUTER_CIRCLE_RADIUS, RING_WIDTH))
    for i in range(NUM_SCALE_TICKS):
        commands.append(
            Segment(
                polar_point(TICK_SPACE * i, OUTER_CIRCLE_RADIUS, center),
                polar_point(TICK_SPACE * i, INNER_CIRCLE_RADIUS, center),
                SCALE_TICK_WIDTH,
            )
        )
    commands.append(Circle(center, INNER_CIRCLE_RADIUS, RING_WIDTH))

    commands.append(Polygon(get_hexagon_points(HEX_MAX_RADIUS, center), line_width=GRID_WIDTH))
    commands.append(Polygon(get_data_polygon(levels, center), fill_color=HIGHLIGHT_COLOR))

    for i, axis in enumerate(CHART_AXIS_ORDER):
        commands.append(Segment(polar_point(HEX_SPACE * i, HEX_MAX_RADIUS, center), center, GRID_WIDTH))
        commands.append(
            Label(bucket_label(levels.get(axis)), get_label_position(i, center), AXIS_LABEL_FONT_SIZE, bold=True)
        )
        for j in range(NUM_DASHES):
            start, end = get_dash_segment(i, j, center)
            commands.append(Segment(start, end, GRID_WIDTH))

    for level in range(NUM_DASHES):
        commands.append(Label(BUCKET_LABELS[level], get_legend_position(level, center), LEGEND_FONT_SIZE))

    return commands


def build_mesh_data(polygon: Sequence[Point], center: Point) -> Tuple[List[float], List[int]]:
    """Generate vertices and indices for a triangle-fan Mesh around ``center``.

    Returns:
        (vertices, indices)
        vertices: [x, y, u, v, ...] with the centre first
        indices: [0, 1, 2, 0, 2, 3, ..., 0, n, 1]
    """
    vertices: List[float] = [center[0], center[1], 0.0, 0.0]
    for x, y in polygon:
        vertices.extend([x, y, 0.0, 0.0])

    n = len(polygon)
    indices: List[int] = []
    for i in range(1, n):
        indices.extend([0, i, i + 1])
    indices.extend([0, n, 1])
    return (vertices, indices)
