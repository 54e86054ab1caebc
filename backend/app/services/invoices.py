"""Invoice header workflows: create (optionally with items), update, delete."""

import logging

from sqlalchemy.orm import Session

from backend.app.crud.crud_invoice import invoice_crud
from backend.app.crud.crud_invoice_item import invoice_item_crud
from backend.app.crud.crud_reference import (
    agreement_crud,
    bank_account_crud,
    company_crud,
    ensure_references,
    organisation_crud,
)
from backend.app.db.transaction import atomic
from backend.app.models.invoice import Invoice
from backend.app.schemas.invoice import HEADER_FIELDS, InvoiceCreate, InvoiceUpdate
from backend.app.services.invoice_items import ITEM_REFERENCES

logger = logging.getLogger(__name__)

INVOICE_REFERENCES = {
    "organisation_id": organisation_crud,
    "bank_account_id": bank_account_crud,
    "company_id": company_crud,
    "agreement_id": agreement_crud,
}


def create_invoice_with_items(db: Session, obj_in: InvoiceCreate, user_id: int | None = None) -> Invoice:
    """Create an invoice and any inline items, reconciling totals before the single commit."""
    ensure_references(db, obj_in.model_dump(include=set(HEADER_FIELDS)), INVOICE_REFERENCES)
    for index, item_in in enumerate(obj_in.invoice_items):
        ensure_references(db, item_in.model_dump(), ITEM_REFERENCES, prefix=f"invoice_items.{index}.")

    with atomic(db):
        invoice = invoice_crud.create(db, obj_in=obj_in, user_id=user_id)
        for item_in in obj_in.invoice_items:
            invoice_item_crud.create(db, invoice_id=invoice.id, obj_in=item_in)
        invoice_crud.recompute_totals(db, invoice_id=invoice.id)

    logger.info(
        "invoice created: id=%s organisation_id=%s number=%s items=%s",
        invoice.id,
        invoice.organisation_id,
        invoice.number,
        len(obj_in.invoice_items),
    )
    db.refresh(invoice)
    return invoice


def update_invoice(db: Session, invoice_id: int, obj_in: InvoiceUpdate) -> Invoice:
    invoice = invoice_crud.get(db, invoice_id=invoice_id)
    ensure_references(db, obj_in.model_dump(exclude_unset=True), INVOICE_REFERENCES)
    with atomic(db):
        invoice = invoice_crud.update(db, db_obj=invoice, obj_in=obj_in)
    db.refresh(invoice)
    return invoice


def delete_invoice(db: Session, invoice_id: int) -> None:
    with atomic(db):
        invoice_crud.delete(db, invoice_id=invoice_id)
    logger.info("invoice deleted: id=%s", invoice_id)
