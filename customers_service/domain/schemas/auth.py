"""Pydantic schemas for customer token issuance."""

from pydantic import BaseModel


class TokenRequest(BaseModel):
    phone: str
    password: str


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
