"""Domain models package."""

from .balances import (
    AccountBalance,
    BalanceHistoryRecord,
    BalanceTotals,
    DataQualityWarning,
    DebtBalance,
)
from .finance import NetWorthPoint, NetWorthSummary
from .projection import (
    ComparisonPath,
    LifeEvent,
    MonteCarloPoint,
    ProjectionPoint,
    ScenarioComparison,
    ScenarioReport,
)

__all__ = [
    "AccountBalance",
    "DebtBalance",
    "BalanceHistoryRecord",
    "BalanceTotals",
    "DataQualityWarning",
    "NetWorthPoint",
    "NetWorthSummary",
    "LifeEvent",
    "ProjectionPoint",
    "MonteCarloPoint",
    "ComparisonPath",
    "ScenarioComparison",
    "ScenarioReport",
]
