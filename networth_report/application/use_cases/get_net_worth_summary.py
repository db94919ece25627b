"""Use case to compute net worth and its recent trend."""

from datetime import datetime
from typing import Callable

from networth_report.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from networth_report.domain.constants import (
    DEFAULT_TREND_MONTHS,
    USE_LATEST_PER_ACCOUNT_PER_MONTH,
)
from networth_report.domain.models import NetWorthSummary
from networth_report.domain.services.finance import compute_net_worth_summary
from networth_report.domain.services.trend import trend_window_start
from networth_report.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute net worth, monthly trend and momentum from the store."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
        trend_months: int = DEFAULT_TREND_MONTHS,
        use_latest_per_account: bool = USE_LATEST_PER_ACCOUNT_PER_MONTH,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing balances and balance history.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current time.
            trend_months: Length of the trend window in calendar months.
            use_latest_per_account: Keep only the latest monthly snapshot
                per account instead of summing them.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now
        self._trend_months = trend_months
        self._use_latest_per_account = use_latest_per_account

    def execute(self) -> NetWorthSummary:
        """Return the net worth summary as of the clock's current time.

        Returns:
            NetWorthSummary: Totals, trend series and change metrics.
        """
        now = self._clock()
        since = trend_window_start(now, self._trend_months)

        accounts = self._repository.fetch_accounts(active_only=True)
        debts = self._repository.fetch_debts(active_only=True)
        history = self._repository.fetch_balance_history(since)
        self._logger.info(
            f"Fetched {len(accounts)} accounts, {len(debts)} debts and "
            f"{len(history)} history records since {since.isoformat()}"
        )

        summary = compute_net_worth_summary(
            accounts,
            debts,
            history,
            logger=self._logger,
            use_latest_per_account=self._use_latest_per_account,
        )
        self._logger.info(
            f"Net worth computed: assets={summary.total_assets}, "
            f"debts={summary.total_debts}, "
            f"net_worth={summary.current_net_worth}, "
            f"points={len(summary.trend_series)}"
        )
        if summary.warnings:
            self._logger.warning(
                f"{len(summary.warnings)} balances need attention"
            )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
