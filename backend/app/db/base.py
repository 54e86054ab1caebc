from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from backend.app.models.user import User  # noqa: F401
from backend.app.models.organisation import Organisation  # noqa: F401
from backend.app.models.bank_account import BankAccount  # noqa: F401
from backend.app.models.company import Company  # noqa: F401
from backend.app.models.contact import Contact  # noqa: F401
from backend.app.models.agreement import Agreement  # noqa: F401
from backend.app.models.project import Project  # noqa: F401
from backend.app.models.unit import Unit  # noqa: F401
from backend.app.models.vat_rate import VatRate  # noqa: F401
from backend.app.models.product import Product  # noqa: F401
from backend.app.models.invoice import Invoice  # noqa: F401
from backend.app.models.invoice_item import InvoiceItem  # noqa: F401
