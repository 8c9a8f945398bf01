"""Customer auth API routes — token, register, me."""

from fastapi import APIRouter, Depends, status

from customers_service.application.services.customer_service import get_customer, save_customer
from customers_service.application.services.token_service import issue_token
from customers_service.domain.repositories.credential_store import CredentialStore
from customers_service.domain.repositories.customer_repository import CustomerRepository
from customers_service.domain.schemas.auth import TokenRequest, TokenResponse
from customers_service.domain.schemas.customer import CustomerCreate, CustomerRead, CustomerSave
from customers_service.interfaces.api.deps import get_current_customer_id
from customers_service.interfaces.deps import get_credential_store, get_customer_repository

router = APIRouter(prefix="/api/customers", tags=["Customer Auth"])


@router.post("/token", response_model=TokenResponse)
def create_token(body: TokenRequest, store: CredentialStore = Depends(get_credential_store)):
    token = issue_token(store, body.phone, body.password)
    return TokenResponse(token=token)


@router.post("/register", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
def register(body: CustomerCreate, repo: CustomerRepository = Depends(get_customer_repository)):
    customer = save_customer(repo, CustomerSave(**body.model_dump()))
    return CustomerRead.model_validate(customer)


@router.get("/me", response_model=CustomerRead)
def get_me(
    customer_id: int = Depends(get_current_customer_id),
    repo: CustomerRepository = Depends(get_customer_repository),
):
    return CustomerRead.model_validate(get_customer(repo, customer_id))
