"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, List, Optional, Any, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def list(self) -> List[T]:
        """List all entities."""
        ...

    def create(self, obj_in: Any) -> T:
        """Create a new entity."""
        ...

    def update(self, db_obj: T, obj_in: Any) -> T:
        """Update an existing entity."""
        ...

    def delete(self, id: int) -> Optional[T]:
        """Delete an entity by ID, returning the removed row."""
        ...
