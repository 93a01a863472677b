"""Pydantic schemas used by the HTTP interface.

JSON field names follow the canonical record encoding (``DealerID``,
``Msisdn``, ...), so request and response bodies match what is stored.
"""
from pydantic import BaseModel, ConfigDict, Field


class AssetFields(BaseModel):
    """Every record field except the key."""

    model_config = ConfigDict(populate_by_name=True, strict=True)

    msisdn: str = Field(..., alias="Msisdn")
    mpin: str = Field(..., alias="Mpin")
    balance: int = Field(..., alias="Balance")
    status: str = Field(..., alias="Status")
    trans_amount: int = Field(..., alias="TransAmount")
    trans_type: str = Field(..., alias="TransType")
    remarks: str = Field(..., alias="Remarks")


class AssetCreate(AssetFields):
    dealer_id: str = Field(..., alias="DealerID")


class AssetUpdate(AssetFields):
    pass


class AssetResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    dealer_id: str = Field(..., alias="DealerID")
    msisdn: str = Field(..., alias="Msisdn")
    mpin: str = Field(..., alias="Mpin")
    balance: int = Field(..., alias="Balance")
    status: str = Field(..., alias="Status")
    trans_amount: int = Field(..., alias="TransAmount")
    trans_type: str = Field(..., alias="TransType")
    remarks: str = Field(..., alias="Remarks")


class AssetListResponse(BaseModel):
    total: int
    assets: list[AssetResponse]


class AssetExistsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dealer_id: str = Field(..., alias="DealerID")
    exists: bool


class TransferRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, strict=True)

    new_balance: int = Field(..., alias="newBalance")


class TransferResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dealer_id: str = Field(..., alias="DealerID")
    # Decimal string, kept as text for compatibility with existing clients.
    old_balance: str = Field(..., alias="oldBalance")


class HealthResponse(BaseModel):
    status: str = "ok"
    backend: str
    namespace: str = ""
