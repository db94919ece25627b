"""Domain models for balances read from the finance store."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class AccountBalance:
    """Latest known balance of one connected account.

    ``current_balance`` is kept raw: it may be missing or malformed and is
    only normalized by the balance aggregator.
    """

    account_id: str
    current_balance: Any = None


@dataclass(frozen=True)
class DebtBalance:
    """Latest known balance of one active debt."""

    debt_id: str
    current_balance: Any = None


@dataclass(frozen=True)
class BalanceHistoryRecord:
    """Immutable balance snapshot recorded for an account."""

    account_id: str
    recorded_at: datetime
    balance: Any = None


@dataclass(frozen=True)
class DataQualityWarning:
    """Warning raised alongside figures computed from suspicious data.

    Attributes:
        source: Origin of the value ("account", "debt", or "history").
        record_id: Identifier of the offending record.
        message: Human readable description.
    """

    source: str
    record_id: str
    message: str


@dataclass(frozen=True)
class BalanceTotals:
    """Point-in-time totals of assets and debts."""

    total_assets: Decimal
    total_debts: Decimal
    warnings: tuple[DataQualityWarning, ...] = ()

    @property
    def current_net_worth(self) -> Decimal:
        """Return total assets minus total debts."""
        return self.total_assets - self.total_debts


__all__ = [
    "AccountBalance",
    "DebtBalance",
    "BalanceHistoryRecord",
    "DataQualityWarning",
    "BalanceTotals",
]
