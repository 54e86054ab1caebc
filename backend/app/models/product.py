from decimal import Decimal

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    sku = Column(String(25), nullable=True)
    price = Column(Numeric(15, 2), nullable=False, default=Decimal("0.00"))
    vat_rate_id = Column(Integer, ForeignKey("vat_rates.id"), nullable=True)
    unit_id = Column(Integer, ForeignKey("units.id"), nullable=True)
    destroyed_at = Column(DateTime(timezone=True), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    unit = relationship("Unit")
    vat_rate = relationship("VatRate")
