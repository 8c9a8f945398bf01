"""
Credential Store Interface.
Point lookups and inserts backing password login and session tokens.
Implementations raise sqlalchemy.exc.SQLAlchemyError on backend failure.
"""

from datetime import datetime
from typing import Optional, Protocol, Tuple

from customers_service.domain.models.customer_token import CustomerToken


class CredentialStore(Protocol):
    """Interface for credential and token persistence."""

    def find_customer_credential(self, phone: str) -> Optional[Tuple[int, str]]:
        """Return (customer_id, password_hash) for the phone, or None."""
        ...

    def insert_token(self, token: str, customer_id: int) -> CustomerToken:
        """Persist a token; the store assigns issued_at and expires_at."""
        ...

    def find_token_owner(self, token: str) -> Optional[Tuple[int, datetime]]:
        """Return (customer_id, expires_at) for an exact token match, or None."""
        ...

    def purge_expired_tokens(self, cutoff: datetime) -> int:
        """Delete tokens with expires_at <= cutoff and return how many were removed."""
        ...
