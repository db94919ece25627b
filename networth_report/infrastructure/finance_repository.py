"""SQLAlchemy-backed repository for account, debt and history reads."""

from datetime import datetime

from sqlalchemy import DateTime, bindparam, text

from networth_report.application.ports.database import DatabaseEnginePort
from networth_report.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from networth_report.domain.models import (
    AccountBalance,
    BalanceHistoryRecord,
    DebtBalance,
)


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Repository reading the ``accounts``, ``debts`` and
    ``balance_history`` tables of the finance store.

    Balances are returned raw; normalization happens in the domain.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_accounts(self, active_only: bool = True) -> list[AccountBalance]:
        rows = self._fetch_balances("accounts", active_only)
        return [
            AccountBalance(
                account_id=str(row.id),
                current_balance=row.current_balance,
            )
            for row in rows
        ]

    def fetch_debts(self, active_only: bool = True) -> list[DebtBalance]:
        rows = self._fetch_balances("debts", active_only)
        return [
            DebtBalance(debt_id=str(row.id), current_balance=row.current_balance)
            for row in rows
        ]

    def fetch_balance_history(
        self,
        since: datetime,
    ) -> list[BalanceHistoryRecord]:
        query = (
            text(
                """
                SELECT account_id, recorded_at, balance
                FROM balance_history
                WHERE recorded_at >= :since
                ORDER BY recorded_at, account_id
                """
            )
            .bindparams(bindparam("since", type_=DateTime()))
            .columns(recorded_at=DateTime())
        )
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"since": since}).all()
        return [
            BalanceHistoryRecord(
                account_id=str(row.account_id),
                recorded_at=row.recorded_at,
                balance=row.balance,
            )
            for row in rows
        ]

    def _fetch_balances(self, table: str, active_only: bool):
        query = self._build_balances_query(table, active_only)
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            return conn.execute(query).all()

    @staticmethod
    def _build_balances_query(table: str, active_only: bool):
        if table not in ("accounts", "debts"):
            raise ValueError(f"Unsupported balances table: {table}")
        base_sql = f"SELECT id, current_balance FROM {table} WHERE 1=1"
        if active_only:
            base_sql += " AND is_active = :is_active"
        base_sql += " ORDER BY id"
        query = text(base_sql)
        if active_only:
            query = query.bindparams(is_active=True)
        return query


__all__ = ["SqlAlchemyFinanceRepository"]
