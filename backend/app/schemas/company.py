"""Company, contact and agreement schemas."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CompanyCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    full_name: Optional[str] = Field(default=None, max_length=250)
    company_type: int = 1


class CompanyUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    full_name: Optional[str] = Field(default=None, max_length=250)
    company_type: Optional[int] = None


class CompanyRead(CompanyCreate):
    id: int
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AgreementCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    company_id: int = Field(gt=0)
    start_at: Optional[date] = None
    end_at: Optional[date] = None


class AgreementUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    company_id: Optional[int] = Field(default=None, gt=0)
    start_at: Optional[date] = None
    end_at: Optional[date] = None


class AgreementRead(AgreementCreate):
    id: int
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ContactCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    start_at: datetime
    role: int = Field(default=1, ge=1)
    title: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[str] = Field(default=None, max_length=255)
    sign: Optional[str] = Field(default=None, max_length=255)


class ContactUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    start_at: Optional[datetime] = None
    role: Optional[int] = Field(default=None, ge=1)
    title: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[str] = Field(default=None, max_length=255)
    sign: Optional[str] = Field(default=None, max_length=255)


class ContactRead(ContactCreate):
    id: int
    company_id: int
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
