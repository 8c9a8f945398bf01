"""
SQLAlchemy Implementation of Customer Repository.
"""

from typing import List, Optional

from sqlalchemy import select

from customers_service.domain.models.customer import Customer
from customers_service.domain.repositories.customer_repository import CustomerRepository
from customers_service.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyCustomerRepository(SQLAlchemyRepository[Customer], CustomerRepository):
    """Customer repository implementation using SQLAlchemy."""

    def list_active(self) -> List[Customer]:
        query = select(Customer).where(Customer.active.is_(True)).order_by(Customer.id)
        return list(self.db.scalars(query))

    def set_active(self, id: int, active: bool) -> Optional[Customer]:
        customer = self.get_by_id(id)
        if customer is None:
            return None
        return self.update(customer, {"active": active})
