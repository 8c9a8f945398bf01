"""
SQLAlchemy implementation of the Base Repository.
"""

from contextlib import contextmanager
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from customers_service.domain.repositories.base import BaseRepository
from customers_service.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


def _as_dict(obj_in: Any) -> dict:
    if hasattr(obj_in, "model_dump"):
        return obj_in.model_dump(exclude_unset=True)
    return dict(obj_in)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @contextmanager
    def _write(self):
        """Commit on success; roll back and re-raise on backend failure."""
        try:
            yield
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def list(self) -> List[ModelType]:
        return list(self.db.scalars(select(self.model).order_by(self.model.id)))

    def create(self, obj_in: Any) -> ModelType:
        db_obj = self.model(**_as_dict(obj_in))
        with self._write():
            self.db.add(db_obj)
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, obj_in: Any) -> ModelType:
        update_data = _as_dict(obj_in)
        with self._write():
            for field, value in update_data.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)
            self.db.add(db_obj)
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, id: int) -> Optional[ModelType]:
        obj = self.db.get(self.model, id)
        if obj is None:
            return None
        with self._write():
            self.db.delete(obj)
        return obj
