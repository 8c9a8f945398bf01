"""Pydantic schemas for Customer domain."""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional


class CustomerBase(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    phone: str = Field(min_length=1, max_length=20)


class CustomerCreate(CustomerBase):
    # passlib caps secrets at 4096 chars and bcrypt refuses NUL bytes
    password: str = Field(min_length=1, max_length=4096)

    @field_validator("password")
    @classmethod
    def password_has_no_nul(cls, value: str) -> str:
        if "\x00" in value:
            raise ValueError("password must not contain NUL characters")
        return value


class CustomerSave(CustomerCreate):
    """Upsert payload: no id inserts, an id updates that row."""
    id: Optional[int] = None


class CustomerRead(CustomerBase):
    id: int
    active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CustomerActiveUpdate(BaseModel):
    active: bool
