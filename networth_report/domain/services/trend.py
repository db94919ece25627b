"""Monthly net worth trend and momentum metrics."""

import calendar
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from networth_report.domain.constants import (
    DEFAULT_TREND_MONTHS,
    TODAY_LABEL,
    TREND_MONTH_LABEL_FORMAT,
    USE_LATEST_PER_ACCOUNT_PER_MONTH,
)
from networth_report.domain.models import (
    BalanceHistoryRecord,
    DataQualityWarning,
    NetWorthPoint,
)
from networth_report.domain.services.balances import read_balance

MonthKey = tuple[int, int]


@dataclass(frozen=True)
class TrendChange:
    """Period-over-period changes derived from a trend series."""

    monthly_change: Decimal
    monthly_change_percent: Decimal
    ytd_change: Decimal
    ytd_change_percent: Decimal


def trend_window_start(
    now: datetime,
    months: int = DEFAULT_TREND_MONTHS,
) -> datetime:
    """Return ``now`` shifted back by a number of calendar months.

    The day of month is clamped to the length of the target month, so
    31 August minus 6 months gives 28 (or 29) February.

    Args:
        now: Reference timestamp.
        months: Number of calendar months to go back.

    Returns:
        datetime: Start of the trend window.
    """
    month_index = now.year * 12 + (now.month - 1) - months
    year, month_zero_based = divmod(month_index, 12)
    month = month_zero_based + 1
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def month_label(key: MonthKey) -> str:
    """Format a (year, month) bucket key, e.g. ``"Mar 2025"``."""
    year, month = key
    return date(year, month, 1).strftime(TREND_MONTH_LABEL_FORMAT)


def bucket_history_by_month(
    history: Iterable[BalanceHistoryRecord],
    *,
    use_latest_per_account: bool,
    warnings: list[DataQualityWarning],
    logger,
) -> dict[MonthKey, Decimal]:
    """Aggregate balance snapshots per calendar month.

    By default every snapshot of the month is added to the bucket, which
    approximates aggregate asset value rather than a point-in-time balance.
    With ``use_latest_per_account`` only the most recent snapshot of each
    account in the month is kept.

    Args:
        history: Snapshots in any order.
        use_latest_per_account: Keep only the latest snapshot per account.
        warnings: Accumulator receiving data quality warnings.
        logger: Logger compatible with logging.Logger-like API, used
            for warnings.

    Returns:
        dict[MonthKey, Decimal]: Asset total per (year, month).
    """
    totals: dict[MonthKey, Decimal] = {}
    latest: dict[MonthKey, dict[str, tuple[datetime, Decimal]]] = {}

    for record in history:
        key = (record.recorded_at.year, record.recorded_at.month)
        balance = read_balance(
            "history",
            record.account_id,
            record.balance,
            warnings,
            logger,
        )
        if not use_latest_per_account:
            totals[key] = totals.get(key, Decimal("0")) + balance
            continue
        per_account = latest.setdefault(key, {})
        previous = per_account.get(record.account_id)
        if previous is None or record.recorded_at >= previous[0]:
            per_account[record.account_id] = (record.recorded_at, balance)

    for key, per_account in latest.items():
        totals[key] = sum(
            (balance for _, balance in per_account.values()),
            Decimal("0"),
        )
    return totals


def build_trend_series(
    history: Iterable[BalanceHistoryRecord],
    *,
    total_debts: Decimal,
    current_net_worth: Decimal,
    logger,
    today_label: str = TODAY_LABEL,
    use_latest_per_account: bool = USE_LATEST_PER_ACCOUNT_PER_MONTH,
    warnings: list[DataQualityWarning] | None = None,
) -> list[NetWorthPoint]:
    """Build the monthly net worth series followed by the live point.

    Debts are not historized, so the current ``total_debts`` is subtracted
    from every monthly bucket.

    Args:
        history: Snapshots inside the trend window, in any order.
        total_debts: Current total of active debts.
        current_net_worth: Live net worth used for the final point.
        logger: Logger compatible with logging.Logger-like API, used
            for warnings.
        today_label: Label of the live point.
        use_latest_per_account: Bucket mode, see ``bucket_history_by_month``.
        warnings: Optional accumulator for data quality warnings.

    Returns:
        list[NetWorthPoint]: Points in ascending month order, live point last.
    """
    collected = warnings if warnings is not None else []
    buckets = bucket_history_by_month(
        history,
        use_latest_per_account=use_latest_per_account,
        warnings=collected,
        logger=logger,
    )
    series = [
        NetWorthPoint(
            period_label=month_label(key),
            value=buckets[key] - total_debts,
        )
        for key in sorted(buckets)
    ]
    series.append(
        NetWorthPoint(period_label=today_label, value=current_net_worth)
    )
    return series


def compute_change(
    current: Decimal,
    baseline: Decimal,
) -> tuple[Decimal, Decimal]:
    """Return the absolute and percent change from a baseline.

    The percent change is 0 when the baseline is zero or negative.
    """
    change = current - baseline
    if baseline <= 0:
        return change, Decimal("0")
    return change, change / baseline * Decimal("100")


def summarize_trend(
    series: Sequence[NetWorthPoint],
    current_net_worth: Decimal,
) -> TrendChange:
    """Compute monthly and year-to-date changes for a trend series.

    Args:
        series: Trend points, live point last.
        current_net_worth: Live net worth.

    Returns:
        TrendChange: Zeroed when the series holds fewer than two points.
    """
    if len(series) < 2:
        zero = Decimal("0")
        return TrendChange(zero, zero, zero, zero)
    monthly_change, monthly_percent = compute_change(
        current_net_worth,
        series[-2].value,
    )
    ytd_change, ytd_percent = compute_change(
        current_net_worth,
        series[0].value,
    )
    return TrendChange(
        monthly_change=monthly_change,
        monthly_change_percent=monthly_percent,
        ytd_change=ytd_change,
        ytd_change_percent=ytd_percent,
    )


__all__ = [
    "TrendChange",
    "trend_window_start",
    "month_label",
    "bucket_history_by_month",
    "build_trend_series",
    "compute_change",
    "summarize_trend",
]
