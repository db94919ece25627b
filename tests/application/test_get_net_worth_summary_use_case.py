"""Tests for the GetNetWorthSummaryUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from networth_report.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from networth_report.domain.models import (
    AccountBalance,
    BalanceHistoryRecord,
    DebtBalance,
)


def _build_repository(accounts=None, debts=None, history=None) -> MagicMock:
    repository = MagicMock()
    repository.fetch_accounts.return_value = accounts or []
    repository.fetch_debts.return_value = debts or []
    repository.fetch_balance_history.return_value = history or []
    return repository


def test_execute_returns_summary_totals_and_trend() -> None:
    """Use case should aggregate balances and build the trend."""
    repository = _build_repository(
        accounts=[
            AccountBalance(account_id="1", current_balance=5000),
            AccountBalance(account_id="2", current_balance=3000),
        ],
        debts=[DebtBalance(debt_id="1", current_balance=2000)],
        history=[
            BalanceHistoryRecord(
                account_id="1",
                recorded_at=datetime(2025, 3, 12),
                balance=4000,
            ),
            BalanceHistoryRecord(
                account_id="1",
                recorded_at=datetime(2025, 4, 12),
                balance=9000,
            ),
        ],
    )
    use_case = GetNetWorthSummaryUseCase(
        repository=repository,
        logger=MagicMock(),
        clock=lambda: datetime(2025, 4, 15, 9, 30),
    )

    result = use_case.execute()

    assert result.current_net_worth == Decimal("6000")
    assert [point.period_label for point in result.trend_series] == [
        "Mar 2025",
        "Apr 2025",
        "Today",
    ]
    assert result.monthly_change == Decimal("-1000")


def test_execute_queries_active_records_inside_window() -> None:
    """Use case should only ask for active records and the trend window."""
    repository = _build_repository()
    use_case = GetNetWorthSummaryUseCase(
        repository=repository,
        logger=MagicMock(),
        clock=lambda: datetime(2025, 4, 15, 9, 30),
        trend_months=3,
    )

    use_case.execute()

    repository.fetch_accounts.assert_called_once_with(active_only=True)
    repository.fetch_debts.assert_called_once_with(active_only=True)
    repository.fetch_balance_history.assert_called_once_with(
        datetime(2025, 1, 15, 9, 30)
    )


def test_execute_uses_latest_snapshot_when_configured() -> None:
    history = [
        BalanceHistoryRecord(
            account_id="1",
            recorded_at=datetime(2025, 3, day),
            balance=balance,
        )
        for day, balance in ((1, 100), (20, 300))
    ]
    use_case = GetNetWorthSummaryUseCase(
        repository=_build_repository(history=history),
        logger=MagicMock(),
        clock=lambda: datetime(2025, 4, 15),
        use_latest_per_account=True,
    )

    result = use_case.execute()

    assert result.trend_series[0].value == Decimal("300")


def test_execute_logs_warning_for_bad_balances() -> None:
    logger = MagicMock()
    use_case = GetNetWorthSummaryUseCase(
        repository=_build_repository(
            accounts=[AccountBalance(account_id="1", current_balance=None)]
        ),
        logger=logger,
        clock=lambda: datetime(2025, 4, 15),
    )

    result = use_case.execute()

    assert len(result.warnings) == 1
    assert any(
        "balances need attention" in call.args[0]
        for call in logger.warning.call_args_list
    )
