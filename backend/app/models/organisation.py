"""Organisation model: the issuer of invoices."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Organisation(Base):
    __tablename__ = "organisations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    full_name = Column(String(255), nullable=True)
    is_vat_payer = Column(Boolean, nullable=False, default=False)
    destroyed_at = Column(DateTime(timezone=True), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    bank_accounts = relationship("BankAccount", back_populates="organisation", passive_deletes=True)
