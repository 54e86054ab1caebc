"""Organisation-scoped invoice numbering."""

import logging

from sqlalchemy.orm import Session

from backend.app.core.errors import RecordNotFound, StoreError
from backend.app.models.invoice import NUMBER_MAX_LENGTH, Invoice
from backend.app.models.organisation import Organisation

logger = logging.getLogger(__name__)


def next_invoice_number(db: Session, organisation_id: int) -> str:
    """Return the number the organisation's next invoice should carry.

    Looks at the organisation's most recently created invoice, soft-deleted
    ones included so numbers are never handed out twice. "1" when there is
    none. The organisation row is locked for the rest of the transaction,
    which serialises concurrent creates for the same organisation on
    backends that support row locks.
    """
    if organisation_id < 1:
        raise RecordNotFound("Organisation")

    db.query(Organisation.id).filter(Organisation.id == organisation_id).with_for_update().first()

    latest = (
        db.query(Invoice.number)
        .filter(Invoice.organisation_id == organisation_id)
        .order_by(Invoice.created_at.desc(), Invoice.id.desc())
        .first()
    )
    if latest is None:
        return "1"

    try:
        current = int(latest.number)
    except (TypeError, ValueError) as exc:
        logger.error(
            "cannot derive next invoice number: organisation_id=%s last number=%r",
            organisation_id,
            latest.number,
        )
        raise StoreError(f"invoice number {latest.number!r} is not numeric") from exc
    number = str(current + 1)
    if len(number) > NUMBER_MAX_LENGTH:
        logger.error("invoice numbers exhausted: organisation_id=%s last number=%s", organisation_id, current)
        raise StoreError(f"next invoice number {number} exceeds {NUMBER_MAX_LENGTH} digits")
    return number
