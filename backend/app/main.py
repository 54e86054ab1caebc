# Stockup invoicing back-office: FastAPI application entrypoint.

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api import catalog
from backend.app.api import companies
from backend.app.api import invoice_items
from backend.app.api import invoices
from backend.app.api import login
from backend.app.api import organisations
from backend.app.api import register
from backend.app.core.dev_seed import seed_development_data
from backend.app.core.errors import register_exception_handlers
from backend.app.core.logging_config import configure_logging
from backend.app.core.settings import get_settings
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_development_data(db)
    finally:
        db.close()
    logger.info("%s %s started (%s)", settings.app_name, settings.api_version, settings.environment)
    yield


app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s %s %.1fms", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


register_exception_handlers(app)

app.include_router(register.router)
app.include_router(login.router)
app.include_router(organisations.router)
app.include_router(organisations.projects_router)
app.include_router(companies.router)
app.include_router(companies.agreements_router)
app.include_router(catalog.router)
app.include_router(invoices.router)
app.include_router(invoice_items.router)


@app.get("/")
def read_root():
    return {"app": "Stockup backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}
