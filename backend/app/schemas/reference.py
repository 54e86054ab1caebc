"""Minimal read-only projections of reference entities embedded in invoice reads."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class NamedRef(BaseModel):
    id: int
    name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class UnitRef(NamedRef):
    code: Optional[str] = None


class VatRateRef(NamedRef):
    rate: Optional[Decimal] = None
