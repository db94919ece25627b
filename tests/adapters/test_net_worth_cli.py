"""Tests for the net_worth_cli adapter."""

from decimal import Decimal
from unittest.mock import MagicMock

from networth_report.adapters import net_worth_cli
from networth_report.domain.models import (
    DataQualityWarning,
    NetWorthPoint,
    NetWorthSummary,
)


def _summary(warnings=()) -> NetWorthSummary:
    return NetWorthSummary(
        current_net_worth=Decimal("6000"),
        total_assets=Decimal("8000"),
        total_debts=Decimal("2000"),
        monthly_change=Decimal("-1000"),
        monthly_change_percent=Decimal("-14.2857"),
        ytd_change=Decimal("4000"),
        ytd_change_percent=Decimal("200"),
        trend_series=[
            NetWorthPoint(period_label="Mar 2025", value=Decimal("2000")),
            NetWorthPoint(period_label="Today", value=Decimal("6000")),
        ],
        warnings=warnings,
    )


def test_format_summary_lists_totals_and_trend() -> None:
    lines = net_worth_cli.format_summary(_summary())

    assert lines == [
        "Net worth: 6,000.00",
        "Assets: 8,000.00",
        "Debts: 2,000.00",
        "Monthly change: -1,000.00 (-14.29%)",
        "YTD change: +4,000.00 (+200.00%)",
        "Trend:",
        "  Mar 2025: 2,000.00",
        "  Today: 6,000.00",
    ]


def test_format_summary_appends_warnings() -> None:
    warning = DataQualityWarning(
        source="account",
        record_id="7",
        message="Missing account balance for 7; counted as 0",
    )

    lines = net_worth_cli.format_summary(_summary(warnings=(warning,)))

    assert lines[-2:] == [
        "Data quality warnings: 1",
        "  - Missing account balance for 7; counted as 0",
    ]


def test_main_runs_use_case_and_prints_result(monkeypatch, capsys):
    """The CLI should build the use case and print the summary."""
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = _summary()
    monkeypatch.setattr(net_worth_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        net_worth_cli,
        "build_net_worth_summary_use_case",
        lambda: fake_use_case,
    )

    net_worth_cli.main()

    fake_use_case.execute.assert_called_once()
    captured = capsys.readouterr()
    assert "Net worth: 6,000.00" in captured.out
    assert "Today: 6,000.00" in captured.out
