"""Asset domain specific exceptions."""

from __future__ import annotations


class AssetError(Exception):
    """Base class for asset registry errors."""


class LedgerStoreError(AssetError):
    """Raised when the underlying ledger store fails to serve a request."""

    def __init__(self, message: str, dealer_id: str | None = None) -> None:
        super().__init__(message)
        self.dealer_id = dealer_id


class AssetNotFoundError(AssetError):
    """Raised when an operation requires an asset that is not in the ledger."""

    def __init__(self, dealer_id: str) -> None:
        super().__init__(f"the asset {dealer_id} does not exist")
        self.dealer_id = dealer_id


class AssetAlreadyExistsError(AssetError):
    """Raised when creating an asset under a key that is already present."""

    def __init__(self, dealer_id: str) -> None:
        super().__init__(f"the asset {dealer_id} already exists")
        self.dealer_id = dealer_id


class AssetDecodeError(AssetError):
    """Raised when stored bytes do not match the asset record encoding."""

    def __init__(self, dealer_id: str, reason: str) -> None:
        super().__init__(f"failed to decode asset {dealer_id}: {reason}")
        self.dealer_id = dealer_id
        self.reason = reason


class AssetEncodeError(AssetError):
    """Raised when an asset's fields cannot be rendered into the record encoding."""

    def __init__(self, dealer_id: str, reason: str) -> None:
        super().__init__(f"failed to encode asset {dealer_id}: {reason}")
        self.dealer_id = dealer_id
        self.reason = reason
