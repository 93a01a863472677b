"""SQLAlchemy-backed repository implementations."""

from .ledger_repository import SqlLedgerStore

__all__ = [
    "SqlLedgerStore",
]
