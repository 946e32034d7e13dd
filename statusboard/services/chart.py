from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from statusboard.services.classifier import ServiceStatus, classify

# Chart canvas, in SVG viewBox units.
PLOT_WIDTH = 200
PLOT_HEIGHT = 80
PLOT_DRAW_HEIGHT = 70
PLOT_Y_MARGIN = 5

GRID_LINES = (10, 40, 70)
Y_AXIS_LABELS = (100, 50, 0)

SUCCESS_COLOR = "#22c55e"
DEGRADED_COLOR = "#eab308"
FAILURE_COLOR = "#ef4444"

POINT_RADIUS = 3.5
LATEST_POINT_RADIUS = 4
HALO_RADIUS = 6
LINE_WIDTH = 2.5

_STATUS_COLORS = {
    ServiceStatus.UP: SUCCESS_COLOR,
    ServiceStatus.DEGRADED: DEGRADED_COLOR,
    ServiceStatus.DOWN: FAILURE_COLOR,
}


@dataclass(frozen=True)
class PlotPoint:
    x: float
    y: float
    value: float
    color: str
    latest: bool = False

    @property
    def radius(self) -> float:
        return LATEST_POINT_RADIUS if self.latest else POINT_RADIUS


@dataclass(frozen=True)
class RenderedChart:
    status: ServiceStatus
    points: tuple[PlotPoint, ...]
    line_color: str

    @property
    def path(self) -> str:
        """Polyline ``points`` attribute through every plot point."""
        return " ".join(f"{p.x:g},{p.y:g}" for p in self.points)

    @property
    def latest(self) -> PlotPoint:
        return self.points[-1]


def point_color(value: float) -> str:
    # Per-sample rule; deliberately not derived from the series status.
    if value == 100:
        return SUCCESS_COLOR
    if value == 0:
        return FAILURE_COLOR
    return DEGRADED_COLOR


def line_color(status: ServiceStatus) -> str:
    return _STATUS_COLORS[status]


def x_coordinate(index: int, count: int) -> float:
    # A lone sample has no span to spread over; center it.
    if count == 1:
        return PLOT_WIDTH / 2
    return (index / (count - 1)) * PLOT_WIDTH


def y_coordinate(value: float) -> float:
    return PLOT_HEIGHT - (value / 100) * PLOT_DRAW_HEIGHT - PLOT_Y_MARGIN


def render(samples: Sequence[float]) -> RenderedChart:
    """Map an uptime series onto the chart canvas.

    Samples are expected in [0, 100]; the dataset loader enforces that.
    Raises ``EmptySeriesError`` for an empty series.
    """
    status = classify(samples)
    count = len(samples)
    points = tuple(
        PlotPoint(
            x=x_coordinate(index, count),
            y=y_coordinate(value),
            value=value,
            color=point_color(value),
            latest=index == count - 1,
        )
        for index, value in enumerate(samples)
    )
    return RenderedChart(status=status, points=points, line_color=line_color(status))
