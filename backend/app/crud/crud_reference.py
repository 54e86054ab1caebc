"""Generic store for the reference entities invoices point at.

Unlike the invoice stores these commit on their own, one row per call.
"""

from typing import Any, Dict, List, Mapping, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.errors import RecordNotFound, ValidationFailed
from backend.app.db.base_class import Base
from backend.app.models.agreement import Agreement
from backend.app.models.bank_account import BankAccount
from backend.app.models.company import Company
from backend.app.models.contact import Contact
from backend.app.models.organisation import Organisation
from backend.app.models.product import Product
from backend.app.models.project import Project
from backend.app.models.unit import Unit
from backend.app.models.vat_rate import VatRate


class CRUDReference:
    def __init__(self, model: Type[Base], label: str):
        self.model = model
        self.label = label

    def get_multi(self, db: Session, *, skip: int = 0, limit: int = 100, **filters: Any) -> List[Base]:
        query = db.query(self.model).filter(self.model.destroyed_at.is_(None))
        if filters:
            query = query.filter_by(**filters)
        return query.order_by(self.model.id.asc()).offset(skip).limit(limit).all()

    def get(self, db: Session, *, id: int, **scope: Any) -> Base:
        """Fetch by id, optionally requiring parent keys such as ``organisation_id`` to match."""
        if id < 1 or any(value < 1 for value in scope.values()):
            raise RecordNotFound(self.label)
        query = db.query(self.model).filter(self.model.id == id)
        if scope:
            query = query.filter_by(**scope)
        obj = query.first()
        if obj is None:
            raise RecordNotFound(self.label)
        return obj

    def exists(self, db: Session, *, id: int) -> bool:
        if id < 1:
            return False
        return db.query(self.model.id).filter(self.model.id == id).first() is not None

    def create(self, db: Session, *, obj_in, **extra: Any) -> Base:
        obj = self.model(**obj_in.model_dump(), **extra)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def update(self, db: Session, *, db_obj: Base, obj_in) -> Base:
        columns = self.model.__table__.columns
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            # Null is applied only where the column allows it.
            if value is None and not columns[field].nullable:
                continue
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, id: int, **scope: Any) -> None:
        obj = self.get(db, id=id, **scope)
        db.delete(obj)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ValidationFailed({"id": f"{self.label.lower()} is still referenced by other records"})


organisation_crud = CRUDReference(Organisation, "Organisation")
bank_account_crud = CRUDReference(BankAccount, "Bank account")
company_crud = CRUDReference(Company, "Company")
contact_crud = CRUDReference(Contact, "Contact")
agreement_crud = CRUDReference(Agreement, "Agreement")
project_crud = CRUDReference(Project, "Project")
unit_crud = CRUDReference(Unit, "Unit")
vat_rate_crud = CRUDReference(VatRate, "VAT rate")
product_crud = CRUDReference(Product, "Product")


def search_companies(db: Session, *, q: str, limit: int = 10) -> List[Company]:
    like = f"%{q}%"
    return (
        db.query(Company)
        .filter(Company.destroyed_at.is_(None))
        .filter((Company.name.ilike(like)) | (Company.full_name.ilike(like)))
        .order_by(Company.name.asc(), Company.id.asc())
        .limit(limit)
        .all()
    )


def ensure_references(
    db: Session,
    values: Mapping[str, Any],
    stores: Mapping[str, CRUDReference],
    prefix: str = "",
) -> None:
    """Raise ``ValidationFailed`` naming every set foreign key that points nowhere."""
    errors: Dict[str, str] = {}
    for field, store in stores.items():
        value = values.get(field)
        if value is None:
            continue
        if not store.exists(db, id=value):
            errors[f"{prefix}{field}"] = f"{store.label.lower()} does not exist"
    if errors:
        raise ValidationFailed(errors)
