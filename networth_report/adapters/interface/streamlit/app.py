"""Streamlit dashboard entry point."""

from decimal import Decimal
import json
from pathlib import Path
import tempfile

import altair as alt
import streamlit as st

from networth_report.application.use_cases.get_net_worth_summary import (
    NetWorthSummary,
)
from networth_report.adapters.interface.streamlit.projection_figures import (
    build_projection_figure,
    build_trend_chart_data,
    rgb_css,
)
from networth_report.domain.constants import LINE_COLOR
from networth_report.domain.models import ScenarioReport
from networth_report.infrastructure.container import (
    build_export_scenario_report_use_case,
    build_net_worth_summary_use_case,
)
from networth_report.infrastructure.logging.logger import get_usage_logger
from networth_report.infrastructure.scenario_file import parse_scenario_report

SUMMARY_TTL_SECONDS = 300


def _fetch_net_worth_summary() -> NetWorthSummary:
    """Fetch the net worth summary from the finance store."""
    use_case = build_net_worth_summary_use_case()
    return use_case.execute()


@st.cache_data(show_spinner=False, ttl=SUMMARY_TTL_SECONDS)
def _load_net_worth_summary(schema_version: int = 1) -> NetWorthSummary:
    """Cached wrapper around _fetch_net_worth_summary."""
    _ = schema_version
    return _fetch_net_worth_summary()


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the libraries Altair charts rely on import cleanly.

    Returns:
        Tuple with a success flag and an error message when it failed.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Chart dependencies are unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (missing Timestamp)."
    return True, None


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    return f"${value:,.2f}"


def _format_delta_with_percent(delta: Decimal, percent: Decimal) -> str:
    """Format delta value with percentage change."""
    sign = "+" if delta >= 0 else ""
    percent_sign = "+" if percent >= 0 else ""
    return f"{sign}{delta:,.2f} ({percent_sign}{percent:.2f}%)"


def _render_metrics(summary: NetWorthSummary) -> None:
    """Render the net worth, assets and debts metrics."""
    net_worth_col, assets_col, debts_col = st.columns(3)
    net_worth_col.metric(
        "Net Worth",
        _format_currency(summary.current_net_worth),
        _format_delta_with_percent(
            summary.monthly_change,
            summary.monthly_change_percent,
        ),
    )
    assets_col.metric("Assets", _format_currency(summary.total_assets))
    debts_col.metric("Debts", _format_currency(summary.total_debts))
    st.caption(
        "Since start of trend: "
        + _format_delta_with_percent(
            summary.ytd_change,
            summary.ytd_change_percent,
        )
    )


def _render_trend_chart(summary: NetWorthSummary) -> None:
    """Render the monthly trend line chart."""
    st.subheader("Net Worth Trend")
    data = build_trend_chart_data(summary)
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        st.dataframe(data, width="stretch", hide_index=True)
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
        color=rgb_css(LINE_COLOR),
    ).encode(
        x=alt.X(
            "period:N",
            sort=alt.SortField("order", order="ascending"),
            title=None,
        ),
        y=alt.Y("net_worth:Q", title="Net worth ($)"),
        tooltip=[
            alt.Tooltip("period:N"),
            alt.Tooltip("net_worth_label:N", title="Net worth"),
        ],
    ).properties(height=320)
    st.altair_chart(chart, width="stretch")


def _render_warnings(summary: NetWorthSummary) -> None:
    """List data quality warnings, if any."""
    if not summary.warnings:
        return
    with st.expander(f"{len(summary.warnings)} data quality warnings"):
        for warning in summary.warnings:
            st.write(f"- {warning.message}")


def _export_report_pdf(report: ScenarioReport) -> tuple[str, bytes]:
    """Export a report to PDF and return its file name and bytes."""
    use_case = build_export_scenario_report_use_case()
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = use_case.execute(report, Path(tmp_dir))
        return path.name, path.read_bytes()


def _render_scenario_page() -> None:
    """Render the scenario upload, projection figure and PDF export."""
    st.subheader("Scenario Projection")
    uploaded = st.file_uploader("Scenario JSON", type=["json"])
    if uploaded is None:
        st.info("Upload a scenario export to preview and download its report.")
        return
    # Bad encodings, bad JSON and ScenarioFileError are all ValueErrors.
    try:
        report = parse_scenario_report(json.loads(uploaded.getvalue()))
    except ValueError as exc:
        st.error(f"Could not read the scenario: {exc}")
        return

    st.plotly_chart(build_projection_figure(report), width="stretch")
    file_name, payload = _export_report_pdf(report)
    st.download_button(
        "Download PDF report",
        data=payload,
        file_name=file_name,
        mime="application/pdf",
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Net Worth Report", layout="wide")
    st.title("Net Worth Report")

    page = st.sidebar.selectbox("Page", ["Net Worth", "Scenario Report"])
    get_usage_logger().info(f"Dashboard page viewed: {page}")

    if page == "Net Worth":
        summary = _load_net_worth_summary(schema_version=1)
        _render_metrics(summary)
        _render_trend_chart(summary)
        _render_warnings(summary)
    else:
        _render_scenario_page()


if __name__ == "__main__":  # pragma: no cover
    main()
