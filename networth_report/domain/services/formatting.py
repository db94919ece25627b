"""Formatting helpers shared by report layouts and the dashboard."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
import re

_WHITESPACE = re.compile(r"\s+")

_MILLIONS = (1_000_000, Decimal("0.01"), "M")
_THOUSANDS = (1_000, Decimal("0.1"), "k")
_UNITS = (1, Decimal("1"), "")


def format_currency(value: float | Decimal) -> str:
    """Format an amount as abbreviated dollars.

    Values of at least one million render as ``$1.20M``, values of at least
    one thousand as ``$45.0k``, smaller values without decimals (``$120``).
    Ties round away from zero, so 1250 gives ``$1.3k``.

    Args:
        value: Amount to format.

    Returns:
        str: Abbreviated currency label.
    """
    amount = float(value)
    if abs(amount) >= 1_000_000:
        scale, quantum, suffix = _MILLIONS
    elif abs(amount) >= 1_000:
        scale, quantum, suffix = _THOUSANDS
    else:
        scale, quantum, suffix = _UNITS
    # Decimal(float) is exact, so only genuine ties are rounded up.
    rounded = Decimal(amount / scale).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"${rounded:f}{suffix}"


def build_report_filename(scenario_name: str, on_date: date) -> str:
    """Return ``{name-with-hyphens}-{YYYY-MM-DD}.pdf``."""
    slug = _WHITESPACE.sub("-", scenario_name)
    return f"{slug}-{on_date.isoformat()}.pdf"


__all__ = ["format_currency", "build_report_filename"]
