"""Domain models for dealer assets."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(slots=True)
class Asset:
    dealer_id: str
    msisdn: str
    mpin: str = field(repr=False)
    balance: int
    status: str
    trans_amount: int
    trans_type: str
    remarks: str

    def with_balance(self, balance: int) -> "Asset":
        return replace(self, balance=balance)
