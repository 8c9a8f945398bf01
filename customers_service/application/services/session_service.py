"""Session service — resolves bearer tokens to customers and purges expired ones."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from customers_service.config import get_settings
from customers_service.core.exceptions import ExpiredTokenError, InternalError, NoSuchUserError
from customers_service.domain.repositories.credential_store import CredentialStore

settings = get_settings()
logger = structlog.get_logger(__name__)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (e.g. from SQLite) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def authenticate_token(store: CredentialStore, token: str, now: Optional[datetime] = None) -> int:
    """Return the customer id owning token.

    Raises NoSuchUserError for an unknown token and ExpiredTokenError once
    now >= expires_at. Never extends the expiry.
    """
    try:
        owner = store.find_token_owner(token)
    except SQLAlchemyError:
        logger.exception("Token lookup failed")
        raise InternalError()

    if owner is None:
        raise NoSuchUserError()

    customer_id, expires_at = owner
    now = as_utc(now or datetime.now(timezone.utc))
    if now >= as_utc(expires_at):
        logger.info("Expired token presented", customer_id=customer_id)
        raise ExpiredTokenError()

    return customer_id


def purge_expired_tokens(
    store: CredentialStore,
    now: Optional[datetime] = None,
    grace: Optional[timedelta] = None,
) -> int:
    """Delete tokens that expired more than grace ago.

    Tokens inside the grace window stay in the store and keep answering
    ExpiredTokenError rather than NoSuchUserError.
    """
    if grace is None:
        grace = timedelta(minutes=settings.TOKEN_PURGE_GRACE_MINUTES)
    cutoff = as_utc(now or datetime.now(timezone.utc)) - grace
    try:
        removed = store.purge_expired_tokens(cutoff)
    except SQLAlchemyError:
        logger.exception("Expired token purge failed")
        raise InternalError()

    logger.info("Expired tokens purged", removed=removed, cutoff=cutoff.isoformat())
    return removed
