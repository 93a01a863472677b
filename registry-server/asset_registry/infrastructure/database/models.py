"""SQLAlchemy ORM models."""

from sqlalchemy import Column, DateTime, LargeBinary, String
from sqlalchemy.sql import func

from .base import Base


class LedgerEntry(Base):
    """One key of the ledger world state."""

    __tablename__ = "ledger_entries"

    key = Column(String(255), primary_key=True)
    value = Column(LargeBinary, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
