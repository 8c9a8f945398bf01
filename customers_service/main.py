"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI

from customers_service.config import get_settings
from customers_service.infrastructure.database import engine, Base
from customers_service.core.logging import configure_logging
from customers_service.core.middleware import setup_middleware
from customers_service.core.exceptions import AppError, global_exception_handler

# Import all models so SQLAlchemy knows about them
from customers_service.domain.models.customer import Customer  # noqa: F401
from customers_service.domain.models.customer_token import CustomerToken  # noqa: F401

# Import routers
from customers_service.interfaces.api.auth import router as auth_router
from customers_service.interfaces.api.customers import router as customers_router
from customers_service.scheduler.jobs import start_scheduler, stop_scheduler

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting customers service", env=settings.ENVIRONMENT)

    # Create DB tables (dev only — use migrations in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    start_scheduler()

    yield

    stop_scheduler()
    logger.info("Customers service stopped")


app = FastAPI(
    title="Customers Service",
    description="Customer records and bearer session tokens",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)

# AppError is handled inside the routing layer; Exception falls through to the server error handler
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Auth routes first so /me is matched before /{id}
app.include_router(auth_router)
app.include_router(customers_router)


@app.get("/")
def root():
    return {
        "name": "Customers Service",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
