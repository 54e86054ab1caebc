"""Organisation, bank account and project routes."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_reference import bank_account_crud, ensure_references, organisation_crud, project_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.schemas.organisation import (
    BankAccountCreate,
    BankAccountRead,
    BankAccountUpdate,
    OrganisationCreate,
    OrganisationRead,
    OrganisationUpdate,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
)

router = APIRouter(prefix="/organisations", tags=["organisations"], dependencies=[Depends(get_current_user)])
projects_router = APIRouter(prefix="/projects", tags=["projects"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[OrganisationRead])
def list_organisations(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return organisation_crud.get_multi(db, skip=skip, limit=limit)


@router.post("", response_model=OrganisationRead, status_code=status.HTTP_201_CREATED)
def create_organisation(organisation_in: OrganisationCreate, db: Session = Depends(get_db)):
    return organisation_crud.create(db, obj_in=organisation_in)


@router.get("/{organisation_id}", response_model=OrganisationRead)
def get_organisation(organisation_id: int, db: Session = Depends(get_db)):
    return organisation_crud.get(db, id=organisation_id)


@router.patch("/{organisation_id}", response_model=OrganisationRead)
def update_organisation(organisation_id: int, organisation_in: OrganisationUpdate, db: Session = Depends(get_db)):
    organisation = organisation_crud.get(db, id=organisation_id)
    return organisation_crud.update(db, db_obj=organisation, obj_in=organisation_in)


@router.delete("/{organisation_id}")
def delete_organisation(organisation_id: int, db: Session = Depends(get_db)):
    organisation_crud.delete(db, id=organisation_id)
    return {"message": "organisation successfully deleted"}


@router.get("/{organisation_id}/bank_accounts", response_model=List[BankAccountRead])
def list_bank_accounts(organisation_id: int, db: Session = Depends(get_db)):
    organisation_crud.get(db, id=organisation_id)
    return bank_account_crud.get_multi(db, organisation_id=organisation_id)


@router.post(
    "/{organisation_id}/bank_accounts",
    response_model=BankAccountRead,
    status_code=status.HTTP_201_CREATED,
)
def create_bank_account(organisation_id: int, account_in: BankAccountCreate, db: Session = Depends(get_db)):
    organisation_crud.get(db, id=organisation_id)
    return bank_account_crud.create(db, obj_in=account_in, organisation_id=organisation_id)


@router.get("/{organisation_id}/bank_accounts/{account_id}", response_model=BankAccountRead)
def get_bank_account(organisation_id: int, account_id: int, db: Session = Depends(get_db)):
    return bank_account_crud.get(db, id=account_id, organisation_id=organisation_id)


@router.patch("/{organisation_id}/bank_accounts/{account_id}", response_model=BankAccountRead)
def update_bank_account(
    organisation_id: int,
    account_id: int,
    account_in: BankAccountUpdate,
    db: Session = Depends(get_db),
):
    account = bank_account_crud.get(db, id=account_id, organisation_id=organisation_id)
    return bank_account_crud.update(db, db_obj=account, obj_in=account_in)


@router.delete("/{organisation_id}/bank_accounts/{account_id}")
def delete_bank_account(organisation_id: int, account_id: int, db: Session = Depends(get_db)):
    bank_account_crud.delete(db, id=account_id, organisation_id=organisation_id)
    return {"message": "bank_account successfully deleted"}


@projects_router.get("", response_model=List[ProjectRead])
def list_projects(
    organisation_id: int | None = None, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)
):
    if organisation_id is not None:
        return project_crud.get_multi(db, skip=skip, limit=limit, organisation_id=organisation_id)
    return project_crud.get_multi(db, skip=skip, limit=limit)


@projects_router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(project_in: ProjectCreate, db: Session = Depends(get_db)):
    ensure_references(db, project_in.model_dump(), {"organisation_id": organisation_crud})
    return project_crud.create(db, obj_in=project_in)


@projects_router.get("/{project_id}", response_model=ProjectRead)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return project_crud.get(db, id=project_id)


@projects_router.patch("/{project_id}", response_model=ProjectRead)
def update_project(project_id: int, project_in: ProjectUpdate, db: Session = Depends(get_db)):
    project = project_crud.get(db, id=project_id)
    ensure_references(db, project_in.model_dump(exclude_unset=True), {"organisation_id": organisation_crud})
    return project_crud.update(db, db_obj=project, obj_in=project_in)


@projects_router.delete("/{project_id}")
def delete_project(project_id: int, db: Session = Depends(get_db)):
    project_crud.delete(db, id=project_id)
    return {"message": "project successfully deleted"}
