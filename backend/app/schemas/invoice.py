"""Invoice schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.models.invoice import NUMBER_MAX_LENGTH
from backend.app.schemas.invoice_item import InvoiceItemCreate, InvoiceItemRead
from backend.app.schemas.pagination import PageMetadata
from backend.app.schemas.reference import NamedRef

NUMBER_PATTERN = r"^\d+$"

# Columns a client may write; amount, discount and vat are derived from items.
HEADER_FIELDS = (
    "is_active",
    "date",
    "number",
    "organisation_id",
    "bank_account_id",
    "company_id",
    "agreement_id",
)

# Header columns an update may set back to null.
CLEARABLE_HEADER_FIELDS = ("date", "bank_account_id", "agreement_id")


class InvoiceBase(BaseModel):
    is_active: bool = False
    date: Optional[datetime] = None
    number: Optional[str] = None
    organisation_id: int = Field(gt=0)
    bank_account_id: Optional[int] = Field(default=None, gt=0)
    company_id: int = Field(gt=0)
    agreement_id: Optional[int] = Field(default=None, gt=0)


class InvoiceCreate(InvoiceBase):
    number: Optional[str] = Field(default=None, max_length=NUMBER_MAX_LENGTH, pattern=NUMBER_PATTERN)
    invoice_items: List[InvoiceItemCreate] = Field(default_factory=list)


class InvoiceUpdate(BaseModel):
    is_active: Optional[bool] = None
    date: Optional[datetime] = None
    number: Optional[str] = Field(default=None, max_length=NUMBER_MAX_LENGTH, pattern=NUMBER_PATTERN)
    organisation_id: Optional[int] = Field(default=None, gt=0)
    bank_account_id: Optional[int] = Field(default=None, gt=0)
    company_id: Optional[int] = Field(default=None, gt=0)
    agreement_id: Optional[int] = Field(default=None, gt=0)


class InvoiceFilters(BaseModel):
    organisation_id: Optional[int] = None
    company_id: Optional[int] = None
    agreement_id: Optional[int] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class InvoiceRead(InvoiceBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: Decimal
    discount: Decimal
    vat: Decimal
    user_id: Optional[int] = None
    uuid: str
    destroyed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    organisation: Optional[NamedRef] = None
    bank_account: Optional[NamedRef] = None
    company: Optional[NamedRef] = None
    agreement: Optional[NamedRef] = None


class InvoiceDetail(InvoiceRead):
    invoice_items: List[InvoiceItemRead] = Field(default_factory=list)


class InvoicePage(BaseModel):
    data: List[InvoiceRead]
    meta: PageMetadata
