"""Tests for chart layout geometry."""

from networth_report.domain.constants import (
    LINE_COLOR,
    NEGATIVE_COLOR,
    POSITIVE_COLOR,
)
from networth_report.domain.models import (
    ComparisonPath,
    LifeEvent,
    MonteCarloPoint,
    ProjectionPoint,
    ScenarioComparison,
)
from networth_report.domain.models.drawing import (
    Circle,
    Polygon,
    Polyline,
    Region,
    Text,
)
from networth_report.domain.services.chart_layout import (
    PLACEHOLDER_TEXT,
    ChartScale,
    layout_comparison_chart,
    layout_monte_carlo_chart,
    layout_timeline_chart,
    locate_event_markers,
    x_label_indices,
)

REGION = Region(x=0, y=0, width=200, height=100)


def _series(*values: float, start_year: int = 2025) -> list[ProjectionPoint]:
    return [
        ProjectionPoint(year=start_year + offset, net_worth=value)
        for offset, value in enumerate(values)
    ]


def _texts(primitives) -> list[str]:
    return [p.text for p in primitives if isinstance(p, Text)]


def test_scale_maps_series_ends_to_region_corners() -> None:
    scale = ChartScale.from_values([0, 50, 100], REGION)

    assert scale.map_point(0, 0) == (0, 100)
    assert scale.map_point(1, 50) == (100, 50)
    assert scale.map_point(2, 100) == (200, 0)


def test_scale_floors_minimum_at_zero() -> None:
    scale = ChartScale.from_values([40, 80], REGION)

    assert scale.min_value == 0
    assert scale.map_y(40) == 50


def test_scale_includes_negative_minimum() -> None:
    scale = ChartScale.from_values([-100, 100], REGION)

    assert scale.min_value == -100
    assert scale.map_y(0) == 50


def test_flat_series_is_drawn_at_mid_height() -> None:
    scale = ChartScale.from_values([0, 0, 0], REGION)

    assert scale.scale_y is None
    assert scale.map_y(0) == 50


def test_single_point_sits_on_region_left_edge() -> None:
    scale = ChartScale.from_values([10], REGION)

    assert scale.map_x(0) == 0


def test_timeline_polyline_follows_scale() -> None:
    primitives = layout_timeline_chart(_series(0, 50, 100), [], REGION)

    lines = [p for p in primitives if isinstance(p, Polyline)]
    assert len(lines) == 1
    assert lines[0].points == ((0, 100), (100, 50), (200, 0))
    assert lines[0].color == LINE_COLOR


def test_events_outside_series_are_skipped() -> None:
    series = _series(0, 50, 100)
    events = [
        LifeEvent(year=2026, impact=-5000, icon="H"),
        LifeEvent(year=2040, impact=1000, icon="X"),
        LifeEvent(year=2027, impact=0),
    ]

    markers = locate_event_markers(
        series,
        events,
        ChartScale.from_values([0, 50, 100], REGION),
    )

    assert [(m.index, m.x, m.y) for m in markers] == [(1, 100, 50), (2, 200, 0)]
    assert markers[0].color == NEGATIVE_COLOR
    assert markers[1].color == POSITIVE_COLOR


def test_timeline_draws_marker_circles_and_icons() -> None:
    primitives = layout_timeline_chart(
        _series(0, 50, 100),
        [LifeEvent(year=2026, impact=-5000, icon="H")],
        REGION,
    )

    markers = [
        p for p in primitives if isinstance(p, Circle) and p.radius == 2
    ]
    assert [m.center for m in markers] == [(100, 50)]
    assert "H" in _texts(primitives)


def test_empty_timeline_draws_placeholder() -> None:
    primitives = layout_timeline_chart([], [], REGION)

    assert PLACEHOLDER_TEXT in _texts(primitives)
    assert not [p for p in primitives if isinstance(p, Polyline)]


def test_single_point_timeline_is_a_dot() -> None:
    primitives = layout_timeline_chart(_series(1000), [], REGION)

    assert not [p for p in primitives if isinstance(p, Polyline)]
    dots = [p for p in primitives if isinstance(p, Circle) and p.fill == LINE_COLOR]
    assert dots[0].center == (0, 0)


def test_x_labels_are_thinned_to_about_six() -> None:
    assert x_label_indices(0) == []
    assert x_label_indices(3) == [0, 1, 2]
    assert x_label_indices(13) == [0, 3, 6, 9, 12]


def test_monte_carlo_cone_shares_one_scale() -> None:
    points = [
        MonteCarloPoint(year=2025, age=35, median=50, p10=0, p90=100),
        MonteCarloPoint(year=2026, age=36, median=60, p10=20, p90=100),
    ]

    primitives = layout_monte_carlo_chart(points, REGION)

    bands = [p for p in primitives if isinstance(p, Polygon)]
    assert len(bands) == 1
    assert bands[0].points == ((0, 0), (200, 0), (200, 80), (0, 100))
    assert bands[0].alpha == 0.2
    lines = [p for p in primitives if isinstance(p, Polyline)]
    median = [line for line in lines if line.width == 1.5][0]
    assert median.points == ((0, 50), (200, 40))
    assert {"P90 (Optimistic)", "P50 (Median)", "P10 (Pessimistic)"} <= set(
        _texts(primitives)
    )


def test_comparison_draws_both_named_paths() -> None:
    comparison = ScenarioComparison(
        path_a=ComparisonPath(name="Rent", timeline=_series(0, 100)),
        path_b=ComparisonPath(name="Buy", timeline=_series(0, 50)),
    )

    primitives = layout_comparison_chart(comparison, REGION)

    lines = [p for p in primitives if isinstance(p, Polyline)]
    assert [line.points[-1] for line in lines] == [(200, 0), (200, 50)]
    assert "Path A: Rent" in _texts(primitives)
    assert "Path B: Buy" in _texts(primitives)
