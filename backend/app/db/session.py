"""Engine, session factory and the request-scoped session dependency."""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from backend.app.core.settings import get_settings


def _connect_args(database_url: str, timeout_seconds: int) -> dict:
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False, "timeout": timeout_seconds}
    if database_url.startswith("postgresql"):
        return {"options": f"-c statement_timeout={timeout_seconds * 1000}"}
    return {}


settings = get_settings()

engine = create_engine(
    settings.database_url,
    connect_args=_connect_args(settings.database_url, settings.db_timeout_seconds),
    pool_pre_ping=True,
)


if engine.dialect.name == "sqlite":

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # ON DELETE CASCADE from invoices to invoice_items relies on this.
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
