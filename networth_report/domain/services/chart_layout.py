"""Chart layout for projection series.

Layout functions turn projection data into drawing primitives positioned
inside a region. They do no I/O; a rendering backend draws the result.

Values map to the region with a shared linear scale::

    min_value = min(min(values), 0)
    scale_y = height / (max_value - min_value)
    scale_x = width / (count - 1)
    (i, v) -> (x + i * scale_x, y + height - (v - min_value) * scale_y)
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
import math

from networth_report.domain.constants import (
    AXIS_COLOR,
    BAND_COLOR,
    COMPARISON_B_COLOR,
    GRID_COLOR,
    GRID_DIVISIONS,
    LINE_COLOR,
    NEGATIVE_COLOR,
    POSITIVE_COLOR,
    TEXT_COLOR,
    X_LABEL_TARGET_COUNT,
)
from networth_report.domain.models import (
    LifeEvent,
    MonteCarloPoint,
    ProjectionPoint,
    ScenarioComparison,
)
from networth_report.domain.models.drawing import (
    RGB,
    Circle,
    Line,
    Point,
    Polygon,
    Polyline,
    Primitive,
    Region,
    Text,
)
from networth_report.domain.services.formatting import format_currency

PLACEHOLDER_TEXT = "No projection data available"


@dataclass(frozen=True)
class ChartScale:
    """Linear mapping from (index, value) to region coordinates."""

    region: Region
    min_value: float
    max_value: float
    count: int

    @classmethod
    def from_values(
        cls,
        values: Iterable[float],
        region: Region,
        count: int | None = None,
    ) -> "ChartScale":
        """Build a scale covering every value, floored at zero.

        Args:
            values: All values sharing the scale.
            region: Drawable region.
            count: Number of points along X; defaults to the value count.

        Returns:
            ChartScale: Scale for the region.
        """
        numbers = [float(value) for value in values]
        if not numbers:
            return cls(region=region, min_value=0.0, max_value=0.0, count=0)
        return cls(
            region=region,
            min_value=min(min(numbers), 0.0),
            max_value=max(numbers),
            count=len(numbers) if count is None else count,
        )

    @property
    def value_range(self) -> float:
        return self.max_value - self.min_value

    @property
    def scale_x(self) -> float:
        if self.count <= 1:
            return 0.0
        return self.region.width / (self.count - 1)

    @property
    def scale_y(self) -> float | None:
        """Return the vertical scale, or None for a flat series."""
        if self.value_range == 0:
            return None
        return self.region.height / self.value_range

    def map_x(self, index: int) -> float:
        return self.region.x + index * self.scale_x

    def map_y(self, value: float) -> float:
        scale_y = self.scale_y
        if scale_y is None:
            return self.region.y + self.region.height / 2
        return (
            self.region.y
            + self.region.height
            - (float(value) - self.min_value) * scale_y
        )

    def map_point(self, index: int, value: float) -> Point:
        return (self.map_x(index), self.map_y(value))

    def grid_value(self, division: int) -> float:
        """Return the value labelling a horizontal gridline."""
        if self.value_range == 0:
            return self.max_value
        return self.max_value - (self.value_range / GRID_DIVISIONS) * division


@dataclass(frozen=True)
class EventMarker:
    """Life event positioned on a timeline chart."""

    event: LifeEvent
    index: int
    x: float
    y: float
    color: RGB


def event_color(event: LifeEvent) -> RGB:
    """Return the marker color for an event (positive includes zero)."""
    return POSITIVE_COLOR if event.impact >= 0 else NEGATIVE_COLOR


def match_events_to_series(
    series: Sequence[ProjectionPoint],
    events: Iterable[LifeEvent],
) -> list[tuple[LifeEvent, int]]:
    """Pair each event with the first series index sharing its year.

    Events whose year is not in the series are skipped.
    """
    index_by_year: dict[int, int] = {}
    for index, point in enumerate(series):
        index_by_year.setdefault(point.year, index)
    return [
        (event, index_by_year[event.year])
        for event in events
        if event.year in index_by_year
    ]


def locate_event_markers(
    series: Sequence[ProjectionPoint],
    events: Iterable[LifeEvent],
    scale: ChartScale,
) -> list[EventMarker]:
    """Place events on the series point sharing their year."""
    markers: list[EventMarker] = []
    for event, index in match_events_to_series(series, events):
        x, y = scale.map_point(index, series[index].net_worth)
        markers.append(
            EventMarker(
                event=event,
                index=index,
                x=x,
                y=y,
                color=event_color(event),
            )
        )
    return markers


def x_label_indices(count: int) -> list[int]:
    """Return the indices labelled on the X axis (every ceil(n/6))."""
    if count <= 0:
        return []
    step = math.ceil(count / X_LABEL_TARGET_COUNT)
    return list(range(0, count, step))


def layout_timeline_chart(
    series: Sequence[ProjectionPoint],
    events: Iterable[LifeEvent],
    region: Region,
) -> list[Primitive]:
    """Lay out the net worth projection line with event markers.

    Args:
        series: Projection timeline.
        events: Life events to overlay.
        region: Drawable region.

    Returns:
        list[Primitive]: Primitives for the chart, legend included.
    """
    primitives: list[Primitive] = [_title(region, "NET WORTH PROJECTION")]
    primitives.extend(_axes(region))
    if not series:
        primitives.append(_placeholder(region))
        return primitives

    scale = ChartScale.from_values(
        (point.net_worth for point in series),
        region,
    )
    primitives.extend(_gridlines(scale))
    primitives.extend(
        _series_line(
            [scale.map_point(i, p.net_worth) for i, p in enumerate(series)],
            LINE_COLOR,
            width=1.0,
        )
    )
    for marker in locate_event_markers(series, events, scale):
        primitives.append(
            Circle(center=(marker.x, marker.y), radius=2, fill=marker.color)
        )
        if marker.event.icon:
            primitives.append(
                Text(
                    x=marker.x,
                    y=marker.y - 5,
                    text=marker.event.icon,
                    size=7,
                    color=marker.color,
                    align="center",
                )
            )
    primitives.extend(_x_labels([point.year for point in series], scale))
    primitives.extend(_timeline_legend(region.x, region.y + region.height + 15))
    return primitives


def layout_monte_carlo_chart(
    points: Sequence[MonteCarloPoint],
    region: Region,
) -> list[Primitive]:
    """Lay out the p10/p90 probability cone with the median line.

    The band and the lines share one scale computed over all percentiles.
    """
    primitives: list[Primitive] = [
        _title(region, "MONTE CARLO PROBABILITY CONE")
    ]
    primitives.extend(_axes(region))
    if not points:
        primitives.append(_placeholder(region))
        return primitives

    values: list[float] = []
    for point in points:
        values.extend((point.p10, point.median, point.p90))
    scale = ChartScale.from_values(values, region, count=len(points))
    primitives.extend(_gridlines(scale))

    upper = [scale.map_point(i, p.p90) for i, p in enumerate(points)]
    lower = [scale.map_point(i, p.p10) for i, p in enumerate(points)]
    median = [scale.map_point(i, p.median) for i, p in enumerate(points)]
    for i in range(len(points) - 1):
        primitives.append(
            Polygon(
                points=(upper[i], upper[i + 1], lower[i + 1], lower[i]),
                fill=BAND_COLOR,
                alpha=0.2,
            )
        )
    primitives.extend(_series_line(upper, POSITIVE_COLOR, width=0.3))
    primitives.extend(_series_line(lower, NEGATIVE_COLOR, width=0.3))
    primitives.extend(_series_line(median, LINE_COLOR, width=1.5))
    primitives.extend(_x_labels([point.year for point in points], scale))

    legend_x = region.x + region.width - 35
    for offset, label, color in (
        (10, "P90 (Optimistic)", POSITIVE_COLOR),
        (15, "P50 (Median)", LINE_COLOR),
        (20, "P10 (Pessimistic)", NEGATIVE_COLOR),
    ):
        primitives.append(
            Text(
                x=legend_x,
                y=region.y + offset,
                text=label,
                size=9,
                color=color,
            )
        )
    return primitives


def layout_comparison_chart(
    comparison: ScenarioComparison,
    region: Region,
) -> list[Primitive]:
    """Lay out two named paths on a shared scale with a 2-line legend."""
    primitives: list[Primitive] = [_title(region, "SCENARIO COMPARISON")]
    primitives.extend(_axes(region))

    timeline_a = comparison.path_a.timeline
    timeline_b = comparison.path_b.timeline
    count = max(len(timeline_a), len(timeline_b))
    if count == 0:
        primitives.append(_placeholder(region))
    else:
        scale = ChartScale.from_values(
            [p.net_worth for p in timeline_a] + [p.net_worth for p in timeline_b],
            region,
            count=count,
        )
        primitives.extend(_gridlines(scale))
        for timeline, color in (
            (timeline_a, LINE_COLOR),
            (timeline_b, COMPARISON_B_COLOR),
        ):
            primitives.extend(
                _series_line(
                    [
                        scale.map_point(i, p.net_worth)
                        for i, p in enumerate(timeline)
                    ],
                    color,
                    width=1.0,
                )
            )
        longest = timeline_a if len(timeline_a) >= len(timeline_b) else timeline_b
        primitives.extend(_x_labels([point.year for point in longest], scale))

    legend_x = region.x + region.width - 50
    primitives.append(
        Text(
            x=legend_x,
            y=region.y + 10,
            text=f"Path A: {comparison.path_a.name}",
            size=9,
            color=LINE_COLOR,
        )
    )
    primitives.append(
        Text(
            x=legend_x,
            y=region.y + 15,
            text=f"Path B: {comparison.path_b.name}",
            size=9,
            color=COMPARISON_B_COLOR,
        )
    )
    return primitives


def _title(region: Region, text: str) -> Text:
    return Text(x=region.x, y=region.y - 5, text=text, size=12, color=TEXT_COLOR)


def _axes(region: Region) -> list[Primitive]:
    bottom = region.y + region.height
    return [
        Line(
            start=(region.x, region.y),
            end=(region.x, bottom),
            color=AXIS_COLOR,
        ),
        Line(
            start=(region.x, bottom),
            end=(region.x + region.width, bottom),
            color=AXIS_COLOR,
        ),
    ]


def _placeholder(region: Region) -> Text:
    return Text(
        x=region.x + region.width / 2,
        y=region.y + region.height / 2,
        text=PLACEHOLDER_TEXT,
        size=10,
        color=AXIS_COLOR,
        align="center",
    )


def _gridlines(scale: ChartScale) -> list[Primitive]:
    region = scale.region
    primitives: list[Primitive] = []
    for division in range(GRID_DIVISIONS + 1):
        grid_y = region.y + (region.height / GRID_DIVISIONS) * division
        primitives.append(
            Line(
                start=(region.x, grid_y),
                end=(region.x + region.width, grid_y),
                color=GRID_COLOR,
                width=0.2,
            )
        )
        primitives.append(
            Text(
                x=region.x - 2,
                y=grid_y + 2,
                text=format_currency(scale.grid_value(division)),
                size=8,
                color=AXIS_COLOR,
                align="right",
            )
        )
    return primitives


def _series_line(
    points: Sequence[Point],
    color: RGB,
    width: float,
) -> list[Primitive]:
    if not points:
        return []
    if len(points) == 1:
        return [Circle(center=points[0], radius=width, fill=color)]
    return [Polyline(points=tuple(points), color=color, width=width)]


def _x_labels(years: Sequence[int], scale: ChartScale) -> list[Primitive]:
    bottom = scale.region.y + scale.region.height
    return [
        Text(
            x=scale.map_x(index),
            y=bottom + 5,
            text=str(years[index]),
            size=8,
            color=AXIS_COLOR,
            align="center",
        )
        for index in x_label_indices(len(years))
    ]


def _timeline_legend(x: float, y: float) -> list[Primitive]:
    return [
        Line(start=(x, y - 1), end=(x + 6, y - 1), color=LINE_COLOR, width=1.0),
        Text(x=x + 8, y=y, text="Projected Net Worth", size=8, color=LINE_COLOR),
        Circle(center=(x + 46, y - 1), radius=1, fill=POSITIVE_COLOR),
        Text(x=x + 49, y=y, text="Positive Event", size=8, color=POSITIVE_COLOR),
        Circle(center=(x + 81, y - 1), radius=1, fill=NEGATIVE_COLOR),
        Text(x=x + 84, y=y, text="Negative Event", size=8, color=NEGATIVE_COLOR),
    ]


__all__ = [
    "PLACEHOLDER_TEXT",
    "ChartScale",
    "EventMarker",
    "event_color",
    "match_events_to_series",
    "locate_event_markers",
    "x_label_indices",
    "layout_timeline_chart",
    "layout_monte_carlo_chart",
    "layout_comparison_chart",
]
