from decimal import Decimal

from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class VatRate(Base):
    __tablename__ = "vat_rates"

    id = Column(Integer, primary_key=True, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_default = Column(Boolean, nullable=False, default=False)
    rate = Column(Numeric(8, 2), nullable=False, default=Decimal("0.00"))
    name = Column(String(50), nullable=False)
    destroyed_at = Column(DateTime(timezone=True), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
