"""APScheduler jobs — purge expired customer tokens on an interval."""

import pytz
import structlog
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from customers_service.application.services.session_service import purge_expired_tokens
from customers_service.config import get_settings
from customers_service.core.exceptions import InternalError
from customers_service.infrastructure.database import SessionLocal
from customers_service.infrastructure.repositories.credential_store import SQLAlchemyCredentialStore

settings = get_settings()
logger = structlog.get_logger(__name__)
tz = pytz.timezone(settings.TIMEZONE)

scheduler = AsyncIOScheduler(timezone=tz)


async def purge_expired_tokens_job():
    """Periodic job: delete tokens past their expiry boundary."""
    db = SessionLocal()
    try:
        return purge_expired_tokens(SQLAlchemyCredentialStore(db))
    except InternalError:
        # Already logged by the service; the next run retries
        return 0
    finally:
        db.close()


def start_scheduler():
    """Start the scheduler when token purging is enabled."""
    if not settings.TOKEN_PURGE_ENABLED:
        logger.info("Token purge disabled")
        return

    scheduler.add_job(
        purge_expired_tokens_job,
        trigger=IntervalTrigger(minutes=settings.TOKEN_PURGE_INTERVAL_MINUTES, timezone=tz),
        id="purge_expired_tokens",
        name="Purge expired customer tokens",
        replace_existing=True,
    )
    scheduler.start()
    logger.info("Scheduler started", purge_interval_minutes=settings.TOKEN_PURGE_INTERVAL_MINUTES)


def stop_scheduler():
    """Stop the scheduler."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
