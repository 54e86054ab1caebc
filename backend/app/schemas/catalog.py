"""Unit, VAT rate and product schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UnitCreate(BaseModel):
    code: Optional[str] = Field(default=None, max_length=10)
    name: str = Field(min_length=1, max_length=25)


class UnitUpdate(BaseModel):
    code: Optional[str] = Field(default=None, max_length=10)
    name: Optional[str] = Field(default=None, min_length=1, max_length=25)


class UnitRead(UnitCreate):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class VatRateCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    rate: Decimal = Field(ge=0, max_digits=8, decimal_places=2)
    is_active: bool = True
    is_default: bool = False


class VatRateUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    rate: Optional[Decimal] = Field(default=None, ge=0, max_digits=8, decimal_places=2)
    is_active: Optional[bool] = None
    is_default: Optional[bool] = None


class VatRateRead(VatRateCreate):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    sku: Optional[str] = Field(default=None, max_length=25)
    price: Decimal = Field(default=Decimal("0.00"), ge=0)
    unit_id: Optional[int] = Field(default=None, gt=0)
    vat_rate_id: Optional[int] = Field(default=None, gt=0)
    is_active: bool = True


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    sku: Optional[str] = Field(default=None, max_length=25)
    price: Optional[Decimal] = Field(default=None, ge=0)
    unit_id: Optional[int] = Field(default=None, gt=0)
    vat_rate_id: Optional[int] = Field(default=None, gt=0)
    is_active: Optional[bool] = None


class ProductRead(ProductCreate):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
