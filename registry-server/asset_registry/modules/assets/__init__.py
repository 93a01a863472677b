"""Dealer asset domain exports."""

from .exceptions import (
    AssetAlreadyExistsError,
    AssetDecodeError,
    AssetEncodeError,
    AssetError,
    AssetNotFoundError,
    LedgerStoreError,
)
from .models import Asset
from .repository import LedgerEntry, LedgerStore
from .service import SAMPLE_ASSETS, AssetRegistry

__all__ = [
    "Asset",
    "AssetAlreadyExistsError",
    "AssetDecodeError",
    "AssetEncodeError",
    "AssetError",
    "AssetNotFoundError",
    "AssetRegistry",
    "LedgerEntry",
    "LedgerStore",
    "LedgerStoreError",
    "SAMPLE_ASSETS",
]
