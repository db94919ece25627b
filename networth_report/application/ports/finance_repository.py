"""Application port for finance store reads."""

from datetime import datetime
from typing import Protocol

from networth_report.domain.models import (
    AccountBalance,
    BalanceHistoryRecord,
    DebtBalance,
)


class FinanceRepositoryPort(Protocol):
    """Port exposing the balances needed for net worth computations.

    Implementations surface store failures unchanged; callers do not retry.
    """

    def fetch_accounts(self, active_only: bool = True) -> list[AccountBalance]:
        """Return accounts with their latest balance."""

    def fetch_debts(self, active_only: bool = True) -> list[DebtBalance]:
        """Return debts with their latest balance."""

    def fetch_balance_history(
        self,
        since: datetime,
    ) -> list[BalanceHistoryRecord]:
        """Return balance snapshots recorded at or after ``since``."""


__all__ = ["FinanceRepositoryPort"]
