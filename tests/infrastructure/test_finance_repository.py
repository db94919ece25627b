"""Tests for the SQLAlchemy finance repository against SQLite."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
from sqlalchemy import DateTime, bindparam, create_engine, text
from sqlalchemy.pool import StaticPool

from networth_report.infrastructure.finance_repository import (
    SqlAlchemyFinanceRepository,
)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        for table in ("accounts", "debts"):
            conn.execute(
                text(
                    f"CREATE TABLE {table} ("
                    "id INTEGER PRIMARY KEY, "
                    "current_balance NUMERIC, "
                    "is_active BOOLEAN)"
                )
            )
        conn.execute(
            text(
                "CREATE TABLE balance_history ("
                "account_id INTEGER, recorded_at DATETIME, balance NUMERIC)"
            )
        )
        conn.execute(
            text(
                "INSERT INTO accounts VALUES "
                "(2, 3000, 1), (1, 5000, 1), (3, 999, 0), (4, NULL, 1)"
            )
        )
        conn.execute(text("INSERT INTO debts VALUES (1, 2000, 1), (2, 50, 0)"))
        insert_history = text(
            "INSERT INTO balance_history VALUES (:account_id, :recorded_at, "
            ":balance)"
        ).bindparams(bindparam("recorded_at", type_=DateTime()))
        for account_id, recorded_at, balance in (
            (1, datetime(2025, 4, 12), 9000),
            (1, datetime(2024, 1, 5), 100),
            (2, datetime(2025, 3, 12), 4000),
        ):
            conn.execute(
                insert_history,
                {
                    "account_id": account_id,
                    "recorded_at": recorded_at,
                    "balance": balance,
                },
            )
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    return SqlAlchemyFinanceRepository(db_port)


def test_fetch_accounts_returns_active_accounts_by_id(repository):
    accounts = repository.fetch_accounts()

    assert [account.account_id for account in accounts] == ["1", "2", "4"]
    assert accounts[0].current_balance == 5000
    assert accounts[2].current_balance is None


def test_fetch_accounts_can_include_inactive(repository):
    accounts = repository.fetch_accounts(active_only=False)

    assert [account.account_id for account in accounts] == ["1", "2", "3", "4"]


def test_fetch_debts_returns_active_debts(repository):
    debts = repository.fetch_debts(active_only=True)

    assert [(debt.debt_id, debt.current_balance) for debt in debts] == [
        ("1", 2000)
    ]


def test_fetch_balance_history_filters_and_orders(repository):
    history = repository.fetch_balance_history(datetime(2024, 10, 15))

    assert [
        (record.account_id, record.recorded_at) for record in history
    ] == [
        ("2", datetime(2025, 3, 12)),
        ("1", datetime(2025, 4, 12)),
    ]
    assert isinstance(history[0].recorded_at, datetime)


def test_build_balances_query_rejects_unknown_table():
    with pytest.raises(ValueError):
        SqlAlchemyFinanceRepository._build_balances_query("users", True)
