"""Invoice model.

``amount`` and ``vat`` are derived from the invoice's items and are only ever
written by the totals reconciler; header updates leave them alone.
"""

from decimal import Decimal
from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


# Invoice numbers are decimal digits stored as text.
NUMBER_MAX_LENGTH = 11


def _new_uuid() -> str:
    return str(uuid4())


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    is_active = Column(Boolean, nullable=False, default=False)
    date = Column(DateTime, nullable=True, index=True)
    number = Column(String(NUMBER_MAX_LENGTH), nullable=True)
    organisation_id = Column(
        Integer, ForeignKey("organisations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    bank_account_id = Column(Integer, ForeignKey("bank_accounts.id"), nullable=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    agreement_id = Column(Integer, ForeignKey("agreements.id"), nullable=True, index=True)

    amount = Column(Numeric(15, 2), nullable=False, default=Decimal("0.00"))
    discount = Column(Numeric(15, 2), nullable=False, default=Decimal("0.00"))
    vat = Column(Numeric(15, 2), nullable=False, default=Decimal("0.00"))

    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    uuid = Column(String(36), nullable=False, unique=True, index=True, default=_new_uuid)
    destroyed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    organisation = relationship("Organisation")
    bank_account = relationship("BankAccount")
    company = relationship("Company")
    agreement = relationship("Agreement")
    invoice_items = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[InvoiceItem.position, InvoiceItem.id]",
    )
