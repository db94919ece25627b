"""Balance aggregation for point-in-time net worth."""

from collections.abc import Iterable
from decimal import Decimal

from networth_report.domain.models import (
    AccountBalance,
    BalanceTotals,
    DataQualityWarning,
    DebtBalance,
)
from networth_report.domain.services.validation import (
    missing_balance_warning,
    validate_balance_sign,
)
from networth_report.utils.decimal_utils import try_coerce_decimal


def read_balance(
    source: str,
    record_id: str,
    raw_value,
    warnings: list[DataQualityWarning],
    logger,
) -> Decimal:
    """Return a balance as Decimal, zeroing missing or malformed values.

    Args:
        source: Origin of the balance, used in warnings.
        record_id: Identifier of the record, used in warnings.
        raw_value: Raw balance value from the store.
        warnings: Accumulator receiving data quality warnings.
        logger: Logger compatible with logging.Logger-like API, used
            for warnings.

    Returns:
        Decimal: Normalized balance, or zero when unreadable.
    """
    balance = try_coerce_decimal(raw_value)
    if balance is None:
        warnings.append(
            missing_balance_warning(source, record_id, raw_value, logger)
        )
        return Decimal("0")
    return balance


def _sum_balances(
    source: str,
    items: Iterable[tuple[str, object]],
    warnings: list[DataQualityWarning],
    logger,
) -> Decimal:
    total = Decimal("0")
    for record_id, raw_value in items:
        balance = read_balance(source, record_id, raw_value, warnings, logger)
        sign_warning = validate_balance_sign(source, record_id, balance, logger)
        if sign_warning is not None:
            warnings.append(sign_warning)
        total += balance
    return total


def aggregate_balances(
    accounts: Iterable[AccountBalance],
    debts: Iterable[DebtBalance],
    *,
    logger,
) -> BalanceTotals:
    """Compute total assets, total debts and current net worth.

    Args:
        accounts: Active accounts with their latest balance.
        debts: Active debts with their latest balance.
        logger: Logger compatible with logging.Logger-like API, used
            for data quality warnings.

    Returns:
        BalanceTotals: Totals plus the warnings collected on the way.
    """
    warnings: list[DataQualityWarning] = []
    total_assets = _sum_balances(
        "account",
        ((account.account_id, account.current_balance) for account in accounts),
        warnings,
        logger,
    )
    total_debts = _sum_balances(
        "debt",
        ((debt.debt_id, debt.current_balance) for debt in debts),
        warnings,
        logger,
    )
    return BalanceTotals(
        total_assets=total_assets,
        total_debts=total_debts,
        warnings=tuple(warnings),
    )


__all__ = ["aggregate_balances", "read_balance"]
