"""Domain models for net worth aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal

from .balances import DataQualityWarning


@dataclass(frozen=True)
class NetWorthPoint:
    """Net worth value for a labelled period."""

    period_label: str
    value: Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures and their recent momentum.

    Attributes:
        current_net_worth: Total assets minus total debts, today.
        total_assets: Sum of active account balances.
        total_debts: Sum of active debt balances.
        monthly_change: Change against the previous trend point.
        monthly_change_percent: Monthly change relative to that point.
        ytd_change: Change against the first trend point.
        ytd_change_percent: YTD change relative to the first point.
        trend_series: Monthly points followed by the live point.
        warnings: Data quality warnings collected while aggregating.
    """

    current_net_worth: Decimal
    total_assets: Decimal
    total_debts: Decimal
    monthly_change: Decimal
    monthly_change_percent: Decimal
    ytd_change: Decimal
    ytd_change_percent: Decimal
    trend_series: list[NetWorthPoint] = field(default_factory=list)
    warnings: tuple[DataQualityWarning, ...] = ()


__all__ = ["NetWorthPoint", "NetWorthSummary"]
