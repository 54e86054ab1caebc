"""Invoice item model: one priced line of an invoice."""

from decimal import Decimal

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class InvoiceItem(Base):
    __tablename__ = "invoice_items"

    id = Column(Integer, primary_key=True, index=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    description = Column(String(1024), nullable=False, default="")
    unit_id = Column(Integer, ForeignKey("units.id"), nullable=True)
    quantity = Column(Numeric(8, 3), nullable=False, default=Decimal("0"))
    price = Column(Numeric(15, 2), nullable=False, default=Decimal("0.00"))
    # amount and vat are computed by the caller (quantity * price, amount * rate / 100).
    amount = Column(Numeric(15, 2), nullable=False, default=Decimal("0.00"))
    discount_rate = Column(Integer, nullable=False, default=0)
    discount = Column(Numeric(15, 2), nullable=False, default=Decimal("0.00"))
    vat_rate_id = Column(Integer, ForeignKey("vat_rates.id"), nullable=True)
    vat = Column(Numeric(15, 2), nullable=False, default=Decimal("0.00"))
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    invoice = relationship("Invoice", back_populates="invoice_items")
    product = relationship("Product")
    unit = relationship("Unit")
    vat_rate = relationship("VatRate")
