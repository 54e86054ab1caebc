"""Invoice item routes, nested under their invoice.

Every write goes through ``services.invoice_items`` so the parent invoice's
totals are reconciled in the same transaction.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_invoice import invoice_crud
from backend.app.crud.crud_invoice_item import invoice_item_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.schemas.invoice_item import InvoiceItemCreate, InvoiceItemRead, InvoiceItemUpdate
from backend.app.services.invoice_items import add_invoice_item, change_invoice_item, remove_invoice_item

router = APIRouter(
    prefix="/invoices/{invoice_id}/invoice_items",
    tags=["invoice items"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=List[InvoiceItemRead])
def list_invoice_items(invoice_id: int, db: Session = Depends(get_db)):
    invoice_crud.get(db, invoice_id=invoice_id)
    return invoice_item_crud.get_multi(db, invoice_id=invoice_id)


@router.post("", response_model=InvoiceItemRead, status_code=status.HTTP_201_CREATED)
def create_invoice_item(
    invoice_id: int,
    item_in: InvoiceItemCreate,
    response: Response,
    db: Session = Depends(get_db),
):
    item = add_invoice_item(db, invoice_id, item_in)
    response.headers["Location"] = f"/invoices/{invoice_id}/invoice_items/{item.id}"
    return item


@router.get("/{item_id}", response_model=InvoiceItemRead)
def get_invoice_item(invoice_id: int, item_id: int, db: Session = Depends(get_db)):
    return invoice_item_crud.get(db, invoice_id=invoice_id, item_id=item_id)


@router.patch("/{item_id}", response_model=InvoiceItemRead)
def patch_invoice_item(invoice_id: int, item_id: int, item_in: InvoiceItemUpdate, db: Session = Depends(get_db)):
    return change_invoice_item(db, invoice_id, item_id, item_in)


@router.delete("/{item_id}")
def delete_invoice_item(invoice_id: int, item_id: int, db: Session = Depends(get_db)):
    remove_invoice_item(db, invoice_id, item_id)
    return {"message": "invoice_item successfully deleted"}
