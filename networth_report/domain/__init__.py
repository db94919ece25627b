"""Domain package for net worth rules and report layout."""

from .constants import DEFAULT_TREND_MONTHS, USE_LATEST_PER_ACCOUNT_PER_MONTH
from .models import (
    AccountBalance,
    BalanceHistoryRecord,
    BalanceTotals,
    DataQualityWarning,
    DebtBalance,
    LifeEvent,
    MonteCarloPoint,
    NetWorthPoint,
    NetWorthSummary,
    ProjectionPoint,
    ScenarioComparison,
    ScenarioReport,
)
from .services import (
    aggregate_balances,
    compute_net_worth_summary,
    format_currency,
    layout_scenario_report,
    trend_window_start,
)

__all__ = [
    "DEFAULT_TREND_MONTHS",
    "USE_LATEST_PER_ACCOUNT_PER_MONTH",
    "AccountBalance",
    "BalanceHistoryRecord",
    "BalanceTotals",
    "DataQualityWarning",
    "DebtBalance",
    "LifeEvent",
    "MonteCarloPoint",
    "NetWorthPoint",
    "NetWorthSummary",
    "ProjectionPoint",
    "ScenarioComparison",
    "ScenarioReport",
    "aggregate_balances",
    "compute_net_worth_summary",
    "format_currency",
    "layout_scenario_report",
    "trend_window_start",
]
