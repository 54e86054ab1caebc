"""Invoice item store. Flush-only, see ``crud_invoice``."""

from typing import List

from sqlalchemy.orm import Session, joinedload

from backend.app.core.errors import RecordNotFound
from backend.app.core.time import utc_now
from backend.app.models.invoice_item import InvoiceItem
from backend.app.schemas.invoice_item import CLEARABLE_ITEM_FIELDS, InvoiceItemCreate, InvoiceItemUpdate


def _with_projections(query):
    return query.options(
        joinedload(InvoiceItem.product),
        joinedload(InvoiceItem.unit),
        joinedload(InvoiceItem.vat_rate),
    )


class CRUDInvoiceItem:
    def get_multi(self, db: Session, *, invoice_id: int) -> List[InvoiceItem]:
        if invoice_id < 1:
            raise RecordNotFound("Invoice")
        return (
            _with_projections(db.query(InvoiceItem))
            .filter(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.position.asc(), InvoiceItem.id.asc())
            .all()
        )

    def get(self, db: Session, *, invoice_id: int, item_id: int) -> InvoiceItem:
        if invoice_id < 1 or item_id < 1:
            raise RecordNotFound("Invoice item")
        item = (
            _with_projections(db.query(InvoiceItem))
            .filter(InvoiceItem.id == item_id, InvoiceItem.invoice_id == invoice_id)
            .first()
        )
        if item is None:
            raise RecordNotFound("Invoice item")
        return item

    def create(self, db: Session, *, invoice_id: int, obj_in: InvoiceItemCreate) -> InvoiceItem:
        if invoice_id < 1:
            raise RecordNotFound("Invoice")
        obj = InvoiceItem(invoice_id=invoice_id, **obj_in.model_dump())
        db.add(obj)
        db.flush()
        db.refresh(obj)
        return obj

    def update(self, db: Session, *, db_obj: InvoiceItem, obj_in: InvoiceItemUpdate) -> InvoiceItem:
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if value is None and field not in CLEARABLE_ITEM_FIELDS:
                continue
            setattr(db_obj, field, value)
        db_obj.updated_at = utc_now()
        db.flush()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, item_id: int) -> None:
        if item_id < 1:
            raise RecordNotFound("Invoice item")
        deleted = db.query(InvoiceItem).filter(InvoiceItem.id == item_id).delete(synchronize_session=False)
        if deleted == 0:
            raise RecordNotFound("Invoice item")


invoice_item_crud = CRUDInvoiceItem()
