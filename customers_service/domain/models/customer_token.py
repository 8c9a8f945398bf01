"""Customer session token — maps to the 'customers_tokens' table."""

from datetime import datetime, timedelta, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from customers_service.config import get_settings
from customers_service.infrastructure.database import Base

settings = get_settings()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def default_expiry(context) -> datetime:
    """Expiry boundary assigned by the store: issued_at + TOKEN_TTL_MINUTES."""
    issued_at = context.get_current_parameters().get("issued_at") or utcnow()
    return issued_at + timedelta(minutes=settings.TOKEN_TTL_MINUTES)


class CustomerToken(Base):
    __tablename__ = "customers_tokens"

    token = Column(String(512), primary_key=True)
    customer_id = Column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    issued_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    expires_at = Column(DateTime(timezone=True), nullable=False, default=default_expiry, index=True)

    def __repr__(self):
        # Token values are bearer secrets; keep them out of reprs and logs
        return f"<CustomerToken customer={self.customer_id} expires={self.expires_at}>"
