"""Invoice routes."""

from datetime import datetime

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_invoice import invoice_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.invoice import InvoiceCreate, InvoiceDetail, InvoiceFilters, InvoicePage, InvoiceRead, InvoiceUpdate
from backend.app.schemas.pagination import Pagination
from backend.app.services.invoices import create_invoice_with_items, delete_invoice, update_invoice

router = APIRouter(prefix="/invoices", tags=["invoices"], dependencies=[Depends(get_current_user)])


def invoice_filters(
    organisation_id: int | None = None,
    company_id: int | None = None,
    agreement_id: int | None = None,
    start: datetime | None = None,
    end: datetime | None = None,
) -> InvoiceFilters:
    return InvoiceFilters(
        organisation_id=organisation_id,
        company_id=company_id,
        agreement_id=agreement_id,
        start=start,
        end=end,
    )


def pagination_params(page: int = 1, limit: int = 20, sort: str = "id", direction: str = "asc") -> Pagination:
    return Pagination(page=page, limit=limit, sort=sort, direction=direction.lower())


@router.get("", response_model=InvoicePage)
def list_invoices(
    filters: InvoiceFilters = Depends(invoice_filters),
    pagination: Pagination = Depends(pagination_params),
    db: Session = Depends(get_db),
):
    invoices, meta = invoice_crud.get_multi(db, filters=filters, pagination=pagination)
    return InvoicePage(data=[InvoiceRead.model_validate(invoice) for invoice in invoices], meta=meta)


@router.post("", response_model=InvoiceDetail, status_code=status.HTTP_201_CREATED)
def create_invoice(
    invoice_in: InvoiceCreate,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    invoice = create_invoice_with_items(db, invoice_in, user_id=current_user.id)
    response.headers["Location"] = f"/invoices/{invoice.id}"
    return invoice


@router.get("/{invoice_id}", response_model=InvoiceDetail)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    return invoice_crud.get(db, invoice_id=invoice_id)


@router.patch("/{invoice_id}", response_model=InvoiceRead)
def patch_invoice(invoice_id: int, invoice_in: InvoiceUpdate, db: Session = Depends(get_db)):
    return update_invoice(db, invoice_id, invoice_in)


@router.delete("/{invoice_id}")
def remove_invoice(invoice_id: int, db: Session = Depends(get_db)):
    delete_invoice(db, invoice_id)
    return {"message": "invoice successfully deleted"}
