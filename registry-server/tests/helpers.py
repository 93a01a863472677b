"""
helpers.py - Settings builders shared by adapter tests.
"""

from asset_registry.core.config import LedgerSettings, Settings


def memory_settings(namespace: str = "") -> Settings:
    return Settings(
        environment="test",
        ledger=LedgerSettings(backend="memory", namespace=namespace),
    )
