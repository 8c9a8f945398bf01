"""
Customer Repository Interface.
Defines specific data access operations for Customers.
"""

from typing import List, Optional

from customers_service.domain.repositories.base import BaseRepository
from customers_service.domain.models.customer import Customer


class CustomerRepository(BaseRepository[Customer]):
    """Interface for Customer-specific operations."""

    def list_active(self) -> List[Customer]:
        """Get customers whose active flag is set."""
        ...

    def set_active(self, id: int, active: bool) -> Optional[Customer]:
        """Set the active flag; None when the customer does not exist."""
        ...
