"""CLI adapter printing the net worth summary and its monthly trend.

This module wires the GetNetWorthSummaryUseCase to the finance store and
prints the figures, one line per trend point.
"""

from networth_report.domain.models import NetWorthSummary
from networth_report.infrastructure.container import (
    build_net_worth_summary_use_case,
)
from networth_report.infrastructure.logging.logger import get_app_logger


def format_summary(summary: NetWorthSummary) -> list[str]:
    """Return the printable lines for a summary.

    Args:
        summary: Summary returned by the use case.

    Returns:
        list[str]: Lines to print.
    """
    lines = [
        f"Net worth: {summary.current_net_worth:,.2f}",
        f"Assets: {summary.total_assets:,.2f}",
        f"Debts: {summary.total_debts:,.2f}",
        (
            f"Monthly change: {summary.monthly_change:+,.2f} "
            f"({summary.monthly_change_percent:+.2f}%)"
        ),
        (
            f"YTD change: {summary.ytd_change:+,.2f} "
            f"({summary.ytd_change_percent:+.2f}%)"
        ),
        "Trend:",
    ]
    lines.extend(
        f"  {point.period_label}: {point.value:,.2f}"
        for point in summary.trend_series
    )
    if summary.warnings:
        lines.append(f"Data quality warnings: {len(summary.warnings)}")
        lines.extend(f"  - {warning.message}" for warning in summary.warnings)
    return lines


def main() -> None:
    """Run the net worth summary use case and print the result."""
    logger = get_app_logger()
    use_case = build_net_worth_summary_use_case()

    summary = use_case.execute()
    logger.info("Net worth summary printed from CLI")

    for line in format_summary(summary):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
