"""Asset registry service over a key-addressed ledger store."""

__version__ = "0.1.0"
