import logging
import os

from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.models.unit import Unit
from backend.app.models.user import User
from backend.app.models.vat_rate import VatRate

logger = logging.getLogger(__name__)

DEFAULT_DEV_EMAIL = "owner@test.com"
DEFAULT_DEV_PASSWORD = "Secret123!"


def seed_development_data(db: Session) -> None:
    """
    Create a login and the basic catalog rows for local development.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    created = False
    if not db.query(User).filter(User.email == DEFAULT_DEV_EMAIL).first():
        db.add(User(email=DEFAULT_DEV_EMAIL, hashed_password=get_password_hash(DEFAULT_DEV_PASSWORD)))
        created = True
    if db.query(Unit).count() == 0:
        db.add(Unit(code="pcs", name="Pieces"))
        created = True
    if db.query(VatRate).count() == 0:
        db.add(VatRate(name="Standard", rate=20, is_default=True))
        db.add(VatRate(name="Zero", rate=0))
        created = True

    if created:
        db.commit()
        logger.info("development data seeded")
