"""Password service — bcrypt hashing and verification."""

from passlib.context import CryptContext

from customers_service.config import get_settings

settings = get_settings()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """True iff plain_password matches the salted hash.

    An empty, malformed or unrecognised hash counts as a mismatch so callers
    see one failure mode.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False
