"""Item writes paired with totals reconciliation.

These are the only supported ways to change an invoice's items: each one
performs the store write and the recompute in a single transaction, so a
caller either sees both or neither.
"""

import logging

from sqlalchemy.orm import Session

from backend.app.crud.crud_invoice import invoice_crud
from backend.app.crud.crud_invoice_item import invoice_item_crud
from backend.app.crud.crud_reference import ensure_references, product_crud, unit_crud, vat_rate_crud
from backend.app.db.transaction import atomic
from backend.app.models.invoice_item import InvoiceItem
from backend.app.schemas.invoice_item import InvoiceItemCreate, InvoiceItemUpdate

logger = logging.getLogger(__name__)

ITEM_REFERENCES = {
    "product_id": product_crud,
    "unit_id": unit_crud,
    "vat_rate_id": vat_rate_crud,
}


def add_invoice_item(db: Session, invoice_id: int, obj_in: InvoiceItemCreate) -> InvoiceItem:
    invoice_crud.get(db, invoice_id=invoice_id)
    ensure_references(db, obj_in.model_dump(), ITEM_REFERENCES)
    with atomic(db):
        item = invoice_item_crud.create(db, invoice_id=invoice_id, obj_in=obj_in)
        invoice_crud.recompute_totals(db, invoice_id=invoice_id)
    logger.info("invoice item added: invoice_id=%s item_id=%s", invoice_id, item.id)
    db.refresh(item)
    return item


def change_invoice_item(db: Session, invoice_id: int, item_id: int, obj_in: InvoiceItemUpdate) -> InvoiceItem:
    invoice_crud.get(db, invoice_id=invoice_id)
    item = invoice_item_crud.get(db, invoice_id=invoice_id, item_id=item_id)
    ensure_references(db, obj_in.model_dump(exclude_unset=True), ITEM_REFERENCES)
    with atomic(db):
        item = invoice_item_crud.update(db, db_obj=item, obj_in=obj_in)
        invoice_crud.recompute_totals(db, invoice_id=invoice_id)
    logger.info("invoice item changed: invoice_id=%s item_id=%s", invoice_id, item_id)
    db.refresh(item)
    return item


def remove_invoice_item(db: Session, invoice_id: int, item_id: int) -> None:
    invoice_crud.get(db, invoice_id=invoice_id)
    # Scope the item to its invoice before deleting by primary key.
    invoice_item_crud.get(db, invoice_id=invoice_id, item_id=item_id)
    with atomic(db):
        invoice_item_crud.delete(db, item_id=item_id)
        invoice_crud.recompute_totals(db, invoice_id=invoice_id)
    logger.info("invoice item removed: invoice_id=%s item_id=%s", invoice_id, item_id)
