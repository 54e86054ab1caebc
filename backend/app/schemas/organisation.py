"""Organisation, bank account and project schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OrganisationCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    full_name: Optional[str] = Field(default=None, max_length=255)
    is_vat_payer: bool = False


class OrganisationUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    full_name: Optional[str] = Field(default=None, max_length=255)
    is_vat_payer: Optional[bool] = None


class OrganisationRead(OrganisationCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BankAccountCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    is_default: bool = False


class BankAccountUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    is_default: Optional[bool] = None


class BankAccountRead(BankAccountCreate):
    id: int
    organisation_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProjectCreate(BaseModel):
    organisation_id: int = Field(gt=0)
    name: str = Field(min_length=1, max_length=255)


class ProjectUpdate(BaseModel):
    organisation_id: Optional[int] = Field(default=None, gt=0)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)


class ProjectRead(ProjectCreate):
    id: int
    uuid: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
