"""
SQLAlchemy Implementation of the Credential Store.
"""

from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from customers_service.domain.models.customer import Customer
from customers_service.domain.models.customer_token import CustomerToken
from customers_service.domain.repositories.credential_store import CredentialStore


class SQLAlchemyCredentialStore(CredentialStore):
    """Credential store over the customers and customers_tokens tables."""

    def __init__(self, db: Session):
        self.db = db

    def find_customer_credential(self, phone: str) -> Optional[Tuple[int, str]]:
        row = self.db.execute(
            select(Customer.id, Customer.password_hash).where(Customer.phone == phone)
        ).first()
        return (row.id, row.password_hash) if row else None

    def insert_token(self, token: str, customer_id: int) -> CustomerToken:
        db_obj = CustomerToken(token=token, customer_id=customer_id)
        try:
            self.db.add(db_obj)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return db_obj

    def find_token_owner(self, token: str) -> Optional[Tuple[int, datetime]]:
        row = self.db.execute(
            select(CustomerToken.customer_id, CustomerToken.expires_at).where(CustomerToken.token == token)
        ).first()
        return (row.customer_id, row.expires_at) if row else None

    def purge_expired_tokens(self, cutoff: datetime) -> int:
        try:
            result = self.db.execute(
                delete(CustomerToken)
                .where(CustomerToken.expires_at <= cutoff)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return result.rowcount
