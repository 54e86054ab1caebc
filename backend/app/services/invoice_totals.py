"""Reconcile an invoice's derived totals with its current line items."""

from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.app.core.errors import RecordNotFound
from backend.app.core.time import utc_now
from backend.app.models.invoice import Invoice
from backend.app.models.invoice_item import InvoiceItem

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Quantize a stored or aggregated value to two decimal places."""
    return Decimal(str(value or 0)).quantize(CENT, rounding=ROUND_HALF_UP)


def recompute_invoice_totals(db: Session, invoice_id: int) -> Invoice:
    """Set ``amount`` and ``vat`` on the invoice to the sums over its items.

    The invoice row is locked first so that a concurrent item write on the
    same invoice cannot interleave between the aggregate read and the
    update. ``discount`` is not derived and is left as stored. Flushes but
    does not commit.
    """
    if invoice_id < 1:
        raise RecordNotFound("Invoice")

    invoice = db.query(Invoice).filter(Invoice.id == invoice_id).with_for_update().first()
    if invoice is None:
        raise RecordNotFound("Invoice")

    amount, vat = (
        db.query(
            func.coalesce(func.sum(InvoiceItem.amount), 0),
            func.coalesce(func.sum(InvoiceItem.vat), 0),
        )
        .filter(InvoiceItem.invoice_id == invoice_id)
        .one()
    )
    invoice.amount = to_money(amount)
    invoice.vat = to_money(vat)
    invoice.updated_at = utc_now()
    db.flush()
    return invoice
