"""Invoice item schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.schemas.reference import NamedRef, UnitRef, VatRateRef

# Item columns an update may set back to null.
CLEARABLE_ITEM_FIELDS = ("unit_id", "vat_rate_id")


class InvoiceItemBase(BaseModel):
    position: int = Field(default=0, ge=0)
    product_id: int = Field(gt=0)
    description: str = Field(default="", max_length=1024)
    unit_id: Optional[int] = Field(default=None, gt=0)
    quantity: Decimal = Field(default=Decimal("0"), ge=0)
    price: Decimal = Field(default=Decimal("0.00"), ge=0)
    amount: Decimal = Field(default=Decimal("0.00"), ge=0)
    discount_rate: int = Field(default=0, ge=0, le=100)
    discount: Decimal = Field(default=Decimal("0.00"), ge=0)
    vat_rate_id: Optional[int] = Field(default=None, gt=0)
    vat: Decimal = Field(default=Decimal("0.00"), ge=0)


class InvoiceItemCreate(InvoiceItemBase):
    pass


class InvoiceItemUpdate(BaseModel):
    position: Optional[int] = Field(default=None, ge=0)
    product_id: Optional[int] = Field(default=None, gt=0)
    description: Optional[str] = Field(default=None, max_length=1024)
    unit_id: Optional[int] = Field(default=None, gt=0)
    quantity: Optional[Decimal] = Field(default=None, ge=0)
    price: Optional[Decimal] = Field(default=None, ge=0)
    amount: Optional[Decimal] = Field(default=None, ge=0)
    discount_rate: Optional[int] = Field(default=None, ge=0, le=100)
    discount: Optional[Decimal] = Field(default=None, ge=0)
    vat_rate_id: Optional[int] = Field(default=None, gt=0)
    vat: Optional[Decimal] = Field(default=None, ge=0)


class InvoiceItemRead(InvoiceItemBase):
    id: int
    invoice_id: int
    product: Optional[NamedRef] = None
    unit: Optional[UnitRef] = None
    vat_rate: Optional[VatRateRef] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
