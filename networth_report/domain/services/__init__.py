"""Domain services package."""

from .balances import aggregate_balances, read_balance
from .chart_layout import (
    ChartScale,
    EventMarker,
    layout_comparison_chart,
    layout_monte_carlo_chart,
    layout_timeline_chart,
    locate_event_markers,
)
from .finance import compute_net_worth_summary
from .formatting import build_report_filename, format_currency
from .report_layout import layout_scenario_report
from .trend import (
    TrendChange,
    build_trend_series,
    compute_change,
    summarize_trend,
    trend_window_start,
)
from .validation import missing_balance_warning, validate_balance_sign

__all__ = [
    "aggregate_balances",
    "read_balance",
    "ChartScale",
    "EventMarker",
    "layout_comparison_chart",
    "layout_monte_carlo_chart",
    "layout_timeline_chart",
    "locate_event_markers",
    "compute_net_worth_summary",
    "build_report_filename",
    "format_currency",
    "layout_scenario_report",
    "TrendChange",
    "build_trend_series",
    "compute_change",
    "summarize_trend",
    "trend_window_start",
    "missing_balance_warning",
    "validate_balance_sign",
]
