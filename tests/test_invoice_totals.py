from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from backend.app.core.errors import RecordNotFound
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.models.company import Company
from backend.app.models.invoice import Invoice
from backend.app.models.invoice_item import InvoiceItem
from backend.app.models.organisation import Organisation
from backend.app.models.product import Product
from backend.app.services.invoice_totals import recompute_invoice_totals, to_money


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_invoice(db, amount=Decimal("0.00"), vat=Decimal("0.00")) -> Invoice:
    organisation = Organisation(name="Acme")
    company = Company(name="Globex")
    db.add_all([organisation, company])
    db.flush()
    invoice = Invoice(organisation_id=organisation.id, company_id=company.id, number="1", amount=amount, vat=vat)
    db.add(invoice)
    db.commit()
    return invoice


def add_item(db, invoice: Invoice, amount: str, vat: str) -> InvoiceItem:
    product = db.query(Product).first()
    if product is None:
        product = Product(name="Widget")
        db.add(product)
        db.flush()
    item = InvoiceItem(invoice_id=invoice.id, product_id=product.id, amount=Decimal(amount), vat=Decimal(vat))
    db.add(item)
    db.commit()
    return item


def test_invoice_without_items_totals_zero(db):
    invoice = make_invoice(db, amount=Decimal("99.00"), vat=Decimal("9.00"))
    recompute_invoice_totals(db, invoice.id)
    db.commit()

    db.refresh(invoice)
    assert invoice.amount == Decimal("0.00")
    assert invoice.vat == Decimal("0.00")


def test_totals_are_sums_of_items(db):
    invoice = make_invoice(db)
    add_item(db, invoice, "0.10", "0.02")
    add_item(db, invoice, "0.20", "0.04")
    add_item(db, invoice, "1999.99", "399.99")

    recompute_invoice_totals(db, invoice.id)
    db.commit()

    db.refresh(invoice)
    assert invoice.amount == Decimal("2000.29")
    assert invoice.vat == Decimal("400.05")


def test_recompute_is_idempotent(db):
    invoice = make_invoice(db)
    add_item(db, invoice, "20.00", "2.00")
    add_item(db, invoice, "5.00", "0.00")

    first = recompute_invoice_totals(db, invoice.id)
    first_totals = (first.amount, first.vat)
    second = recompute_invoice_totals(db, invoice.id)
    assert (second.amount, second.vat) == first_totals == (Decimal("25.00"), Decimal("2.00"))


def test_recompute_ignores_other_invoices_items(db):
    invoice = make_invoice(db)
    other = Invoice(organisation_id=invoice.organisation_id, company_id=invoice.company_id, number="2")
    db.add(other)
    db.commit()
    add_item(db, invoice, "10.00", "1.00")
    add_item(db, other, "500.00", "50.00")

    recompute_invoice_totals(db, invoice.id)
    assert invoice.amount == Decimal("10.00")
    assert invoice.vat == Decimal("1.00")


def test_recompute_leaves_discount_alone(db):
    invoice = make_invoice(db)
    invoice.discount = Decimal("3.50")
    db.commit()
    add_item(db, invoice, "10.00", "1.00")

    recompute_invoice_totals(db, invoice.id)
    assert invoice.discount == Decimal("3.50")


def test_recompute_unknown_invoice_raises_not_found(db):
    with pytest.raises(RecordNotFound):
        recompute_invoice_totals(db, 12345)


@pytest.mark.parametrize("invoice_id", [0, -1])
def test_recompute_rejects_non_positive_id_without_query(invoice_id):
    db = MagicMock()
    with pytest.raises(RecordNotFound):
        recompute_invoice_totals(db, invoice_id)
    db.query.assert_not_called()


def test_to_money_quantizes_float_noise():
    assert to_money(0.1 + 0.2) == Decimal("0.30")
    assert to_money(None) == Decimal("0.00")
