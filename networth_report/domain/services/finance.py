"""Domain services composing balances and trend into a summary."""

from collections.abc import Iterable

from networth_report.domain.constants import (
    TODAY_LABEL,
    USE_LATEST_PER_ACCOUNT_PER_MONTH,
)
from networth_report.domain.models import (
    AccountBalance,
    BalanceHistoryRecord,
    DataQualityWarning,
    DebtBalance,
    NetWorthSummary,
)
from networth_report.domain.services.balances import aggregate_balances
from networth_report.domain.services.trend import (
    build_trend_series,
    summarize_trend,
)


def compute_net_worth_summary(
    accounts: Iterable[AccountBalance],
    debts: Iterable[DebtBalance],
    history: Iterable[BalanceHistoryRecord],
    *,
    logger,
    today_label: str = TODAY_LABEL,
    use_latest_per_account: bool = USE_LATEST_PER_ACCOUNT_PER_MONTH,
) -> NetWorthSummary:
    """Compute the net worth summary from balances and history.

    Args:
        accounts: Active accounts with their latest balance.
        debts: Active debts with their latest balance.
        history: Balance snapshots inside the trend window.
        logger: Logger compatible with logging.Logger-like API, used
            for warnings.
        today_label: Label of the live trend point.
        use_latest_per_account: Keep only the latest monthly snapshot
            per account instead of summing them.

    Returns:
        NetWorthSummary: Totals, trend series and momentum metrics.
    """
    totals = aggregate_balances(accounts, debts, logger=logger)
    history_warnings: list[DataQualityWarning] = []
    series = build_trend_series(
        history,
        total_debts=totals.total_debts,
        current_net_worth=totals.current_net_worth,
        logger=logger,
        today_label=today_label,
        use_latest_per_account=use_latest_per_account,
        warnings=history_warnings,
    )
    change = summarize_trend(series, totals.current_net_worth)
    return NetWorthSummary(
        current_net_worth=totals.current_net_worth,
        total_assets=totals.total_assets,
        total_debts=totals.total_debts,
        monthly_change=change.monthly_change,
        monthly_change_percent=change.monthly_change_percent,
        ytd_change=change.ytd_change,
        ytd_change_percent=change.ytd_change_percent,
        trend_series=series,
        warnings=totals.warnings + tuple(history_warnings),
    )


__all__ = ["compute_net_worth_summary"]
