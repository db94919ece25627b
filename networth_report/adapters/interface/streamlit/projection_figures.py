"""Projection and trend presentation logic for the Streamlit UI.

This module contains pure transformations from domain objects to chart
data: Altair-ready records for the monthly trend and a Plotly figure for a
scenario projection. Event placement reuses the report layout rules, so
the dashboard and the PDF agree on which events are shown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from networth_report.domain.constants import (
    COMPARISON_B_COLOR,
    LINE_COLOR,
    NEGATIVE_COLOR,
    POSITIVE_COLOR,
)
from networth_report.domain.models import NetWorthSummary, ScenarioReport
from networth_report.domain.models.drawing import RGB
from networth_report.domain.services.chart_layout import (
    event_color,
    match_events_to_series,
)
from networth_report.domain.services.formatting import format_currency

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


def rgb_css(color: RGB, alpha: float | None = None) -> str:
    """Return a CSS color string for an RGB tuple."""
    red, green, blue = color
    if alpha is None:
        return f"rgb({red},{green},{blue})"
    return f"rgba({red},{green},{blue},{alpha})"


def build_trend_chart_data(
    summary: NetWorthSummary,
) -> list[dict[str, str | float | int]]:
    """Return Altair records for the trend series, in series order.

    Args:
        summary: Net worth summary with its trend series.

    Returns:
        Records with the period label, its position and value.
    """
    return [
        {
            "period": point.period_label,
            "order": position,
            "net_worth": float(point.value),
            "net_worth_label": format_currency(point.value),
        }
        for position, point in enumerate(summary.trend_series)
    ]


def build_projection_figure(report: ScenarioReport) -> "go.Figure":
    """Build a Plotly figure of a scenario projection.

    The figure shows the projected timeline, event markers on the years
    present in the timeline, the Monte Carlo cone when available and the
    two comparison paths when available.

    Args:
        report: Scenario to display.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    fig = go.Figure()
    timeline = report.timeline

    if report.monte_carlo:
        years = [point.year for point in report.monte_carlo]
        fig.add_trace(
            go.Scatter(
                x=years,
                y=[point.p90 for point in report.monte_carlo],
                name="P90 (Optimistic)",
                mode="lines",
                line=dict(color=rgb_css(POSITIVE_COLOR), width=1),
            )
        )
        fig.add_trace(
            go.Scatter(
                x=years,
                y=[point.p10 for point in report.monte_carlo],
                name="P10 (Pessimistic)",
                mode="lines",
                fill="tonexty",
                fillcolor=rgb_css((150, 150, 150), alpha=0.2),
                line=dict(color=rgb_css(NEGATIVE_COLOR), width=1),
            )
        )
        fig.add_trace(
            go.Scatter(
                x=years,
                y=[point.median for point in report.monte_carlo],
                name="P50 (Median)",
                mode="lines",
                line=dict(color=rgb_css(LINE_COLOR), width=2, dash="dot"),
            )
        )

    fig.add_trace(
        go.Scatter(
            x=[point.year for point in timeline],
            y=[point.net_worth for point in timeline],
            name="Projected Net Worth",
            mode="lines",
            line=dict(color=rgb_css(LINE_COLOR), width=3),
        )
    )

    matched = match_events_to_series(timeline, report.events)
    if matched:
        fig.add_trace(
            go.Scatter(
                x=[timeline[index].year for _, index in matched],
                y=[timeline[index].net_worth for _, index in matched],
                name="Life Events",
                mode="markers",
                marker=dict(
                    size=11,
                    color=[rgb_css(event_color(event)) for event, _ in matched],
                ),
                text=[
                    f"{event.label}: {format_currency(event.impact)}"
                    for event, _ in matched
                ],
                hoverinfo="text",
            )
        )

    if report.comparison is not None:
        for path, color in (
            (report.comparison.path_a, LINE_COLOR),
            (report.comparison.path_b, COMPARISON_B_COLOR),
        ):
            fig.add_trace(
                go.Scatter(
                    x=[point.year for point in path.timeline],
                    y=[point.net_worth for point in path.timeline],
                    name=path.name,
                    mode="lines",
                    line=dict(color=rgb_css(color), width=2, dash="dash"),
                )
            )

    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=480,
        hovermode="x unified",
        legend=dict(orientation="h", y=-0.15),
    )
    return fig


__all__ = [
    "rgb_css",
    "build_trend_chart_data",
    "build_projection_figure",
]
