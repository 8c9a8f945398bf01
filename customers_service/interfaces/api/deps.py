"""FastAPI dependency — bearer session auth."""

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from customers_service.application.services.session_service import authenticate_token
from customers_service.core.exceptions import NoSuchUserError
from customers_service.domain.repositories.credential_store import CredentialStore
from customers_service.interfaces.deps import get_credential_store

security = HTTPBearer(auto_error=False)


def get_current_customer_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    store: CredentialStore = Depends(get_credential_store),
) -> int:
    """Resolve the bearer token to the id of the customer that owns it."""
    if credentials is None:
        raise NoSuchUserError()
    return authenticate_token(store, credentials.credentials)
