"""Canonical byte encoding for asset records.

Records are stored as compact JSON objects whose keys are the canonical field
names in alphabetical order, so every peer that re-encodes the same record
produces byte-identical output.
"""

from __future__ import annotations

import json
from typing import Any

from .exceptions import AssetDecodeError, AssetEncodeError
from .models import Asset

# Canonical name -> (attribute, expected type)
FIELDS: dict[str, tuple[str, type]] = {
    "Balance": ("balance", int),
    "DealerID": ("dealer_id", str),
    "Mpin": ("mpin", str),
    "Msisdn": ("msisdn", str),
    "Remarks": ("remarks", str),
    "Status": ("status", str),
    "TransAmount": ("trans_amount", int),
    "TransType": ("trans_type", str),
}
FIELD_ORDER: tuple[str, ...] = tuple(sorted(FIELDS))


def asset_to_document(asset: Asset) -> dict[str, Any]:
    return {name: getattr(asset, FIELDS[name][0]) for name in FIELD_ORDER}


def encode_asset(asset: Asset) -> bytes:
    """Render ``asset`` as canonical UTF-8 JSON.

    Strings that have no UTF-8 form (lone surrogates) and values JSON cannot
    represent raise :class:`AssetEncodeError`.
    """
    document = asset_to_document(asset)
    try:
        return json.dumps(
            document,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise AssetEncodeError(asset.dealer_id, str(exc)) from exc


def decode_asset(key: str, data: bytes) -> Asset:
    """Decode stored bytes under ``key`` back into an :class:`Asset`.

    Unknown keys are ignored; every canonical field must be present with the
    expected type. ``bool`` is rejected for integer fields.
    """
    try:
        document = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise AssetDecodeError(key, str(exc)) from exc

    if not isinstance(document, dict):
        raise AssetDecodeError(key, f"expected a JSON object, got {type(document).__name__}")

    values: dict[str, Any] = {}
    for name in FIELD_ORDER:
        attribute, expected = FIELDS[name]
        if name not in document:
            raise AssetDecodeError(key, f"missing field {name}")
        value = document[name]
        if not isinstance(value, expected) or isinstance(value, bool):
            raise AssetDecodeError(
                key,
                f"field {name} must be {expected.__name__}, got {type(value).__name__}",
            )
        values[attribute] = value
    return Asset(**values)
