"""Page layout of the scenario projection report."""

from collections.abc import Sequence
from datetime import date
import math

from networth_report.domain.constants import (
    AXIS_COLOR,
    BOX_COLOR,
    DISCLAIMER,
    FOOTER_COLOR,
    LINE_COLOR,
    NEGATIVE_COLOR,
    POSITIVE_COLOR,
    PRODUCT_LABEL,
    TEXT_COLOR,
)
from networth_report.domain.models import LifeEvent, ScenarioReport
from networth_report.domain.models.drawing import (
    Line,
    Page,
    Primitive,
    Rect,
    Region,
    ReportDocument,
    Table,
    Text,
)
from networth_report.domain.services.chart_layout import (
    layout_comparison_chart,
    layout_monte_carlo_chart,
    layout_timeline_chart,
)
from networth_report.domain.services.formatting import (
    build_report_filename,
    format_currency,
)

PAGE_WIDTH = 210.0
PAGE_HEIGHT = 297.0
MARGIN = 20.0
CHART_REGION = Region(
    x=MARGIN,
    y=50.0,
    width=PAGE_WIDTH - 2 * MARGIN,
    height=100.0,
)

METRIC_BOX_WIDTH = 50.0
METRIC_BOX_HEIGHT = 20.0
METRIC_BOX_GAP = 5.0

EVENTS_TABLE_HEADER = ("Age/Year", "Event", "Impact ($)", "Description")
EVENTS_TITLE_Y = 110.0
CONTINUATION_TABLE_Y = 45.0
# Tables end above the footer line.
TABLE_BOTTOM = PAGE_HEIGHT - 20.0

# Row height estimate matching the PDF backend cell metrics (points).
POINT_MM = 25.4 / 72
TABLE_LINE_HEIGHT_PT = 12.0
TABLE_CELL_PADDING_PT = 6.0
DESCRIPTION_CHARS_PER_LINE = 30


def layout_scenario_report(
    report: ScenarioReport,
    *,
    generated_on: date,
) -> ReportDocument:
    """Lay out every page of a scenario report.

    Page 1 holds the key metrics and the events table, followed by
    continuation pages when the table does not fit, then the timeline
    chart. The Monte Carlo and comparison pages are only emitted when their
    data is present; page numbers follow the emitted pages.

    Args:
        report: Scenario data to export.
        generated_on: Date printed in headers and used in the file name.

    Returns:
        ReportDocument: Pages of primitives plus the output file name.
    """
    rows = [_event_row(event) for event in report.events]
    first_rows, *continued_rows = paginate_table_rows(
        rows,
        first_height=TABLE_BOTTOM - (EVENTS_TITLE_Y + 5),
        next_height=TABLE_BOTTOM - CONTINUATION_TABLE_Y,
    ) or [()]
    sections: list[tuple[str, list[Primitive]]] = [
        (
            report.name,
            _key_metrics(report, MARGIN, 40.0)
            + _events_table(first_rows, MARGIN, EVENTS_TITLE_Y),
        ),
    ]
    sections.extend(
        (
            f"{report.name} - Life Events (continued)",
            [_events_table_grid(chunk, MARGIN, CONTINUATION_TABLE_Y)],
        )
        for chunk in continued_rows
    )
    sections.append(
        (
            f"{report.name} - Timeline Projection",
            layout_timeline_chart(report.timeline, report.events, CHART_REGION),
        )
    )
    if report.monte_carlo:
        sections.append(
            (
                f"{report.name} - Monte Carlo Projections",
                layout_monte_carlo_chart(report.monte_carlo, CHART_REGION),
            )
        )
    if report.comparison is not None:
        sections.append(
            (
                "Scenario Comparison",
                layout_comparison_chart(report.comparison, CHART_REGION),
            )
        )

    pages = []
    for number, (title, body) in enumerate(sections, start=1):
        primitives = _header(title, generated_on)
        primitives.extend(body)
        primitives.extend(_footer(number))
        pages.append(Page(number=number, primitives=primitives))

    return ReportDocument(
        filename=build_report_filename(report.name, generated_on),
        page_width=PAGE_WIDTH,
        page_height=PAGE_HEIGHT,
        pages=pages,
    )


def _header(title: str, generated_on: date) -> list[Primitive]:
    return [
        Text(x=MARGIN, y=20, text=PRODUCT_LABEL.upper(), size=20),
        Text(x=MARGIN, y=30, text=title, size=14),
        Text(
            x=MARGIN,
            y=35,
            text=f"Generated: {generated_on.isoformat()}",
            size=10,
            color=AXIS_COLOR,
        ),
        Line(
            start=(MARGIN, 37),
            end=(PAGE_WIDTH - MARGIN, 37),
            color=LINE_COLOR,
            width=0.5,
        ),
    ]


def _footer(page_number: int) -> list[Primitive]:
    footer_y = PAGE_HEIGHT - 10
    return [
        Text(
            x=PAGE_WIDTH / 2,
            y=footer_y,
            text=f"Page {page_number}",
            size=8,
            color=FOOTER_COLOR,
            align="center",
        ),
        Text(
            x=MARGIN,
            y=footer_y,
            text=PRODUCT_LABEL,
            size=8,
            color=FOOTER_COLOR,
        ),
        Text(
            x=PAGE_WIDTH - MARGIN,
            y=footer_y,
            text=DISCLAIMER,
            size=8,
            color=FOOTER_COLOR,
            align="right",
        ),
    ]


def _key_metrics(report: ScenarioReport, x: float, y: float) -> list[Primitive]:
    primitives: list[Primitive] = [
        Text(x=x, y=y, text="KEY METRICS", size=12, color=TEXT_COLOR)
    ]
    box_y = y + 5
    metrics = (
        ("Current Net Worth", format_currency(report.initial_net_worth)),
        ("Projected Net Worth", format_currency(report.projected_net_worth)),
        ("Years to Target", str(report.years_to_target)),
    )
    for position, (label, value) in enumerate(metrics):
        box_x = x + (METRIC_BOX_WIDTH + METRIC_BOX_GAP) * position
        primitives.append(
            Rect(
                x=box_x,
                y=box_y,
                width=METRIC_BOX_WIDTH,
                height=METRIC_BOX_HEIGHT,
                stroke=BOX_COLOR,
            )
        )
        primitives.append(Text(x=box_x + 2, y=box_y + 5, text=label, size=10))
        primitives.append(Text(x=box_x + 2, y=box_y + 12, text=value, size=12))

    total_impact = report.total_event_impact
    summary_y = box_y + METRIC_BOX_HEIGHT
    primitives.append(
        Text(x=x, y=summary_y + 10, text=f"Life Events: {len(report.events)}")
    )
    primitives.append(
        Text(
            x=x,
            y=summary_y + 15,
            text=f"Total Impact: {format_currency(total_impact)}",
        )
    )
    positive = total_impact >= 0
    primitives.append(
        Text(
            x=x + 50,
            y=summary_y + 15,
            text="Positive" if positive else "Negative",
            color=POSITIVE_COLOR if positive else NEGATIVE_COLOR,
        )
    )
    return primitives


def estimate_row_height(row: Sequence[str]) -> float:
    """Estimate the drawn height of an events table row in millimetres.

    Descriptions wrap inside their column; the other cells hold one line.
    The estimate errs on the tall side so a page never overflows.
    """
    lines = max(1, math.ceil(len(row[-1]) / DESCRIPTION_CHARS_PER_LINE))
    return (lines * TABLE_LINE_HEIGHT_PT + TABLE_CELL_PADDING_PT) * POINT_MM


def paginate_table_rows(
    rows: Sequence[tuple[str, ...]],
    *,
    first_height: float,
    next_height: float,
) -> list[tuple[tuple[str, ...], ...]]:
    """Split table rows into chunks fitting the available page heights.

    Every chunk repeats the header row. A row taller than a whole page
    still gets a chunk of its own.

    Args:
        rows: Table body rows.
        first_height: Height available for the table on its first page.
        next_height: Height available on each continuation page.

    Returns:
        Row chunks, one per page; empty when there are no rows.
    """
    header_height = estimate_row_height(EVENTS_TABLE_HEADER)
    chunks: list[tuple[tuple[str, ...], ...]] = []
    current: list[tuple[str, ...]] = []
    available = first_height - header_height
    for row in rows:
        height = estimate_row_height(row)
        if current and height > available:
            chunks.append(tuple(current))
            current = []
            available = next_height - header_height
        current.append(row)
        available -= height
    if current:
        chunks.append(tuple(current))
    return chunks


def _event_row(event: LifeEvent) -> tuple[str, ...]:
    return (
        str(event.year),
        f"{event.icon} {event.label}".strip(),
        format_currency(event.impact),
        event.description,
    )


def _events_table(
    rows: Sequence[tuple[str, ...]],
    x: float,
    y: float,
) -> list[Primitive]:
    primitives: list[Primitive] = [
        Text(x=x, y=y, text="LIFE EVENTS", size=12, color=TEXT_COLOR)
    ]
    if not rows:
        primitives.append(
            Text(
                x=x,
                y=y + 8,
                text="No life events recorded.",
                size=9,
                color=AXIS_COLOR,
            )
        )
        return primitives
    primitives.append(_events_table_grid(rows, x, y + 5))
    return primitives


def _events_table_grid(
    rows: Sequence[tuple[str, ...]],
    x: float,
    y: float,
) -> Table:
    return Table(
        x=x,
        y=y,
        width=PAGE_WIDTH - 2 * MARGIN,
        header=EVENTS_TABLE_HEADER,
        rows=tuple(rows),
        header_fill=LINE_COLOR,
        right_aligned_columns=(2,),
    )


__all__ = [
    "PAGE_WIDTH",
    "PAGE_HEIGHT",
    "MARGIN",
    "CHART_REGION",
    "EVENTS_TABLE_HEADER",
    "TABLE_BOTTOM",
    "estimate_row_height",
    "paginate_table_rows",
    "layout_scenario_report",
]
