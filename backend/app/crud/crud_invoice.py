"""Invoice store.

Methods flush but never commit; the service layer wraps them in a
transaction so that invoice writes and totals reconciliation land together.
"""

from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload

from backend.app.core.errors import RecordNotFound
from backend.app.core.time import utc_now
from backend.app.models.invoice import Invoice
from backend.app.schemas.invoice import (
    CLEARABLE_HEADER_FIELDS,
    HEADER_FIELDS,
    InvoiceCreate,
    InvoiceFilters,
    InvoiceUpdate,
)
from backend.app.schemas.pagination import PageMetadata, Pagination, calculate_metadata
from backend.app.services.invoice_numbering import next_invoice_number
from backend.app.services.invoice_totals import recompute_invoice_totals

SORT_SAFELIST = ("id", "date", "number", "created_at")


def _with_projections(query):
    return query.options(
        joinedload(Invoice.organisation),
        joinedload(Invoice.bank_account),
        joinedload(Invoice.company),
        joinedload(Invoice.agreement),
    )


class CRUDInvoice:
    sort_safelist = SORT_SAFELIST

    def get_multi(
        self, db: Session, *, filters: InvoiceFilters, pagination: Pagination
    ) -> Tuple[List[Invoice], PageMetadata]:
        pagination.check(self.sort_safelist)

        query = db.query(Invoice).filter(Invoice.destroyed_at.is_(None))
        if filters.organisation_id is not None:
            query = query.filter(Invoice.organisation_id == filters.organisation_id)
        if filters.company_id is not None:
            query = query.filter(Invoice.company_id == filters.company_id)
        if filters.agreement_id is not None:
            query = query.filter(Invoice.agreement_id == filters.agreement_id)
        if filters.start is not None and filters.end is not None:
            query = query.filter(Invoice.date.between(filters.start, filters.end))

        total = query.count()
        column = getattr(Invoice, pagination.sort)
        order = column.desc() if pagination.direction == "desc" else column.asc()
        invoices = (
            _with_projections(query)
            .order_by(order, Invoice.id.asc())
            .offset(pagination.offset)
            .limit(pagination.limit)
            .all()
        )
        return invoices, calculate_metadata(total, pagination.page, pagination.limit)

    def get(self, db: Session, *, invoice_id: int) -> Invoice:
        # Soft-deleted invoices stay reachable by id; only listings hide them.
        if invoice_id < 1:
            raise RecordNotFound("Invoice")
        invoice = _with_projections(db.query(Invoice)).filter(Invoice.id == invoice_id).first()
        if invoice is None:
            raise RecordNotFound("Invoice")
        return invoice

    def create(self, db: Session, *, obj_in: InvoiceCreate, user_id: Optional[int] = None) -> Invoice:
        data = obj_in.model_dump(include=set(HEADER_FIELDS))
        if not data.get("number"):
            data["number"] = self.next_number(db, organisation_id=data["organisation_id"])
        obj = Invoice(user_id=user_id, **data)
        db.add(obj)
        db.flush()
        db.refresh(obj)
        return obj

    def update(self, db: Session, *, db_obj: Invoice, obj_in: InvoiceUpdate) -> Invoice:
        update_data = obj_in.model_dump(include=set(HEADER_FIELDS), exclude_unset=True)
        for field, value in update_data.items():
            # An explicit null only clears optional references; required columns keep their value.
            if value is None and field not in CLEARABLE_HEADER_FIELDS:
                continue
            setattr(db_obj, field, value)
        db_obj.updated_at = utc_now()
        db.flush()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, invoice_id: int) -> None:
        if invoice_id < 1:
            raise RecordNotFound("Invoice")
        # Items are removed by the ON DELETE CASCADE on invoice_items.invoice_id.
        deleted = db.query(Invoice).filter(Invoice.id == invoice_id).delete(synchronize_session=False)
        if deleted == 0:
            raise RecordNotFound("Invoice")

    def recompute_totals(self, db: Session, *, invoice_id: int) -> Invoice:
        return recompute_invoice_totals(db, invoice_id)

    def next_number(self, db: Session, *, organisation_id: int) -> str:
        return next_invoice_number(db, organisation_id)


invoice_crud = CRUDInvoice()
