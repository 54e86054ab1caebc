"""Company, contact and agreement routes."""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_reference import (
    agreement_crud,
    company_crud,
    contact_crud,
    ensure_references,
    search_companies,
)
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.company import (
    AgreementCreate,
    AgreementRead,
    AgreementUpdate,
    CompanyCreate,
    CompanyRead,
    CompanyUpdate,
    ContactCreate,
    ContactRead,
    ContactUpdate,
)
from backend.app.schemas.reference import NamedRef

router = APIRouter(prefix="/companies", tags=["companies"], dependencies=[Depends(get_current_user)])
agreements_router = APIRouter(prefix="/agreements", tags=["agreements"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[CompanyRead])
def list_companies(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return company_crud.get_multi(db, skip=skip, limit=limit)


# Declared before /{company_id} so "search" is not parsed as an id.
@router.get("/search", response_model=List[NamedRef])
def search(q: str = Query(min_length=1), limit: int = Query(default=10, ge=1, le=50), db: Session = Depends(get_db)):
    return search_companies(db, q=q, limit=limit)


@router.post("", response_model=CompanyRead, status_code=status.HTTP_201_CREATED)
def create_company(
    company_in: CompanyCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return company_crud.create(db, obj_in=company_in, user_id=current_user.id)


@router.get("/{company_id}", response_model=CompanyRead)
def get_company(company_id: int, db: Session = Depends(get_db)):
    return company_crud.get(db, id=company_id)


@router.patch("/{company_id}", response_model=CompanyRead)
def update_company(company_id: int, company_in: CompanyUpdate, db: Session = Depends(get_db)):
    company = company_crud.get(db, id=company_id)
    return company_crud.update(db, db_obj=company, obj_in=company_in)


@router.delete("/{company_id}")
def delete_company(company_id: int, db: Session = Depends(get_db)):
    company_crud.delete(db, id=company_id)
    return {"message": "company successfully deleted"}


@router.get("/{company_id}/contacts", response_model=List[ContactRead])
def list_contacts(company_id: int, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    company_crud.get(db, id=company_id)
    return contact_crud.get_multi(db, skip=skip, limit=limit, company_id=company_id)


@router.post("/{company_id}/contacts", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
def create_contact(
    company_id: int,
    contact_in: ContactCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    company_crud.get(db, id=company_id)
    return contact_crud.create(db, obj_in=contact_in, company_id=company_id, user_id=current_user.id)


@router.get("/{company_id}/contacts/{contact_id}", response_model=ContactRead)
def get_contact(company_id: int, contact_id: int, db: Session = Depends(get_db)):
    return contact_crud.get(db, id=contact_id, company_id=company_id)


@router.patch("/{company_id}/contacts/{contact_id}", response_model=ContactRead)
def update_contact(company_id: int, contact_id: int, contact_in: ContactUpdate, db: Session = Depends(get_db)):
    contact = contact_crud.get(db, id=contact_id, company_id=company_id)
    return contact_crud.update(db, db_obj=contact, obj_in=contact_in)


@router.delete("/{company_id}/contacts/{contact_id}")
def delete_contact(company_id: int, contact_id: int, db: Session = Depends(get_db)):
    contact_crud.delete(db, id=contact_id, company_id=company_id)
    return {"message": "contact successfully deleted"}


@agreements_router.get("", response_model=List[AgreementRead])
def list_agreements(company_id: int | None = None, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    if company_id is not None:
        return agreement_crud.get_multi(db, skip=skip, limit=limit, company_id=company_id)
    return agreement_crud.get_multi(db, skip=skip, limit=limit)


@agreements_router.post("", response_model=AgreementRead, status_code=status.HTTP_201_CREATED)
def create_agreement(
    agreement_in: AgreementCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    ensure_references(db, agreement_in.model_dump(), {"company_id": company_crud})
    return agreement_crud.create(db, obj_in=agreement_in, user_id=current_user.id)


@agreements_router.get("/{agreement_id}", response_model=AgreementRead)
def get_agreement(agreement_id: int, db: Session = Depends(get_db)):
    return agreement_crud.get(db, id=agreement_id)


@agreements_router.patch("/{agreement_id}", response_model=AgreementRead)
def update_agreement(agreement_id: int, agreement_in: AgreementUpdate, db: Session = Depends(get_db)):
    agreement = agreement_crud.get(db, id=agreement_id)
    ensure_references(db, agreement_in.model_dump(exclude_unset=True), {"company_id": company_crud})
    return agreement_crud.update(db, db_obj=agreement, obj_in=agreement_in)


@agreements_router.delete("/{agreement_id}")
def delete_agreement(agreement_id: int, db: Session = Depends(get_db)):
    agreement_crud.delete(db, id=agreement_id)
    return {"message": "agreement successfully deleted"}
