"""Helper utilities for tests."""

from datetime import date
from decimal import Decimal
from pathlib import Path
import sqlite3

from models.transaction import Transaction


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        with open(migration_file, "r") as f:
            conn.executescript(f.read())

    conn.commit()


_next_id = iter(range(1, 1_000_000))


def make_transaction(
    category: str,
    amount: str,
    type: str = "expense",
    description: str = "",
    transaction_date: date = date(2024, 1, 15),
    id: int = None,
) -> Transaction:
    """Build a Transaction with sensible defaults for tests."""
    return Transaction(
        id=id if id is not None else next(_next_id),
        type=type,
        category=category,
        description=description,
        amount=Decimal(amount),
        transaction_date=transaction_date,
    )
