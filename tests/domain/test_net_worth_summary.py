"""End-to-end tests for the net worth summary computation."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from networth_report.domain.models import (
    AccountBalance,
    BalanceHistoryRecord,
    DebtBalance,
)
from networth_report.domain.services.finance import compute_net_worth_summary


def test_summary_for_two_accounts_one_debt_and_two_months() -> None:
    """Totals, trend and monthly change for a small household."""
    summary = compute_net_worth_summary(
        [
            AccountBalance(account_id="1", current_balance=5000),
            AccountBalance(account_id="2", current_balance=3000),
        ],
        [DebtBalance(debt_id="1", current_balance=2000)],
        [
            BalanceHistoryRecord(
                account_id="1",
                recorded_at=datetime(2025, 4, 12),
                balance=9000,
            ),
            BalanceHistoryRecord(
                account_id="1",
                recorded_at=datetime(2025, 3, 12),
                balance=4000,
            ),
        ],
        logger=MagicMock(),
    )

    assert summary.total_assets == Decimal("8000")
    assert summary.total_debts == Decimal("2000")
    assert summary.current_net_worth == Decimal("6000")
    assert [
        (point.period_label, point.value) for point in summary.trend_series
    ] == [
        ("Mar 2025", Decimal("2000")),
        ("Apr 2025", Decimal("7000")),
        ("Today", Decimal("6000")),
    ]
    assert summary.monthly_change == Decimal("-1000")
    assert round(summary.monthly_change_percent, 2) == Decimal("-14.29")
    assert summary.ytd_change == Decimal("4000")
    assert summary.ytd_change_percent == Decimal("200")
    assert summary.warnings == ()


def test_summary_for_empty_inputs_is_zeroed() -> None:
    summary = compute_net_worth_summary([], [], [], logger=MagicMock())

    assert summary.current_net_worth == Decimal("0")
    assert len(summary.trend_series) == 1
    assert summary.trend_series[0].value == Decimal("0")
    assert summary.monthly_change == Decimal("0")
    assert summary.monthly_change_percent == Decimal("0")
    assert summary.ytd_change_percent == Decimal("0")


def test_summary_percentages_are_zero_for_negative_baselines() -> None:
    """Debts larger than past assets make baselines negative."""
    summary = compute_net_worth_summary(
        [AccountBalance(account_id="1", current_balance=1000)],
        [DebtBalance(debt_id="1", current_balance=5000)],
        [
            BalanceHistoryRecord(
                account_id="1",
                recorded_at=datetime(2025, 2, 1),
                balance=800,
            )
        ],
        logger=MagicMock(),
    )

    assert summary.trend_series[0].value == Decimal("-4200")
    assert summary.monthly_change == Decimal("200")
    assert summary.monthly_change_percent == Decimal("0")
    assert summary.ytd_change_percent == Decimal("0")


def test_summary_collects_account_and_history_warnings() -> None:
    summary = compute_net_worth_summary(
        [AccountBalance(account_id="1", current_balance=None)],
        [],
        [
            BalanceHistoryRecord(
                account_id="1",
                recorded_at=datetime(2025, 2, 1),
                balance="oops",
            )
        ],
        logger=MagicMock(),
    )

    assert [w.source for w in summary.warnings] == ["account", "history"]


class _WrappedLogger:
    """Logger wrapper exposing only the logging methods, like AppLogger."""

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        self.warnings.append(message)


def test_summary_accepts_logger_wrappers() -> None:
    logger = _WrappedLogger()

    summary = compute_net_worth_summary(
        [AccountBalance(account_id="1", current_balance=-5)],
        [DebtBalance(debt_id="1", current_balance="n/a")],
        [
            BalanceHistoryRecord(
                account_id="1",
                recorded_at=datetime(2025, 2, 1),
                balance=None,
            )
        ],
        logger=logger,
    )

    assert len(summary.warnings) == 3
    assert len(logger.warnings) == 3
