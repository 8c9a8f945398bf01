"""Token service — issues opaque bearer tokens for customers."""

import secrets
from typing import Callable

import structlog
from sqlalchemy.exc import SQLAlchemyError

from customers_service.application.services.password_service import verify_password
from customers_service.core.exceptions import InternalError, InvalidPasswordError, NoSuchUserError
from customers_service.domain.repositories.credential_store import CredentialStore

logger = structlog.get_logger(__name__)

TOKEN_BYTES = 256

RandomSource = Callable[[int], bytes]


def generate_token(random_source: RandomSource = secrets.token_bytes) -> str:
    """Return TOKEN_BYTES of secure randomness as lowercase hex.

    A source that fails or returns a different number of bytes than asked for
    raises InternalError; a short read never becomes a weaker token.
    """
    try:
        buffer = random_source(TOKEN_BYTES)
    except Exception:
        logger.exception("Random source failed")
        raise InternalError()

    if not isinstance(buffer, (bytes, bytearray)) or len(buffer) != TOKEN_BYTES:
        logger.error(
            "Random source returned unusable data",
            requested=TOKEN_BYTES,
            received_type=type(buffer).__name__,
        )
        raise InternalError()

    return bytes(buffer).hex()


def issue_token(
    store: CredentialStore,
    phone: str,
    password: str,
    random_source: RandomSource = secrets.token_bytes,
) -> str:
    """Check phone/password and persist a fresh session token for the customer."""
    try:
        credential = store.find_customer_credential(phone)
    except SQLAlchemyError:
        logger.exception("Credential lookup failed")
        raise InternalError()

    if credential is None:
        logger.info("Token refused", reason="no_such_user")
        raise NoSuchUserError()

    customer_id, password_hash = credential
    if not verify_password(password, password_hash):
        logger.info("Token refused", reason="invalid_password", customer_id=customer_id)
        raise InvalidPasswordError()

    token = generate_token(random_source)

    try:
        store.insert_token(token, customer_id)
    except SQLAlchemyError:
        logger.exception("Token insert failed", customer_id=customer_id)
        raise InternalError()

    logger.info("Token issued", customer_id=customer_id)
    return token
