"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from customers_service.domain.models.customer import Customer
from customers_service.domain.repositories.credential_store import CredentialStore
from customers_service.domain.repositories.customer_repository import CustomerRepository
from customers_service.infrastructure.database import get_db
from customers_service.infrastructure.repositories.credential_store import SQLAlchemyCredentialStore
from customers_service.infrastructure.repositories.customer_repository import SQLAlchemyCustomerRepository


def get_customer_repository(db: Session = Depends(get_db)) -> CustomerRepository:
    """Get customer repository instance."""
    return SQLAlchemyCustomerRepository(db, Customer)


def get_credential_store(db: Session = Depends(get_db)) -> CredentialStore:
    """Get credential store instance."""
    return SQLAlchemyCredentialStore(db)
