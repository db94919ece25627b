"""Domain validation helpers."""

from decimal import Decimal

from networth_report.domain.models import DataQualityWarning


def validate_balance_sign(
    source: str,
    record_id: str,
    balance: Decimal,
    logger,
) -> DataQualityWarning | None:
    """Warn when a balance violates the expected sign convention.

    Account and debt balances are both expected to be non-negative: debts
    are stored as positive amounts owed and subtracted downstream.

    Args:
        source: Origin of the balance ("account" or "debt").
        record_id: Identifier of the account or debt.
        balance: Normalized balance amount.
        logger: Logger compatible with logging.Logger-like API, used
            for warnings.

    Returns:
        DataQualityWarning | None: Warning describing the violation, if any.
    """
    if balance >= 0:
        return None
    message = f"Negative {source} balance for {record_id}: {balance}"
    logger.warning(message)
    return DataQualityWarning(
        source=source,
        record_id=record_id,
        message=message,
    )


def missing_balance_warning(
    source: str,
    record_id: str,
    raw_value,
    logger,
) -> DataQualityWarning:
    """Build the warning emitted when a balance is treated as zero.

    Args:
        source: Origin of the balance ("account", "debt", or "history").
        record_id: Identifier of the record.
        raw_value: Value that could not be read as a number.
        logger: Logger compatible with logging.Logger-like API, used
            for warnings.

    Returns:
        DataQualityWarning: Warning describing the zeroed balance.
    """
    if raw_value is None:
        message = f"Missing {source} balance for {record_id}; counted as 0"
    else:
        message = (
            f"Non-numeric {source} balance for {record_id} "
            f"({raw_value!r}); counted as 0"
        )
    logger.warning(message)
    return DataQualityWarning(
        source=source,
        record_id=record_id,
        message=message,
    )


__all__ = ["validate_balance_sign", "missing_balance_warning"]
