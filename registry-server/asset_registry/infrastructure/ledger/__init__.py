"""Ledger store backends that do not depend on a database."""

from .memory import InMemoryLedgerStore
from .namespace import NamespacedLedgerStore

__all__ = ["InMemoryLedgerStore", "NamespacedLedgerStore"]
