"""Customer API routes — list, fetch, upsert, activate and delete customers."""

from typing import List

from fastapi import APIRouter, Depends

from customers_service.interfaces.api.deps import get_current_customer_id
from customers_service.interfaces.deps import get_customer_repository
from customers_service.domain.repositories.customer_repository import CustomerRepository
from customers_service.domain.schemas.customer import CustomerActiveUpdate, CustomerRead, CustomerSave
from customers_service.application.services.customer_service import (
    change_active,
    delete_customer,
    get_customer,
    list_active_customers,
    list_customers,
    save_customer,
)

router = APIRouter(
    prefix="/api/customers",
    tags=["Customers"],
    dependencies=[Depends(get_current_customer_id)],
)


@router.get("", response_model=List[CustomerRead])
def all_customers(repo: CustomerRepository = Depends(get_customer_repository)):
    """List every customer."""
    return [CustomerRead.model_validate(c) for c in list_customers(repo)]


@router.get("/active", response_model=List[CustomerRead])
def active_customers(repo: CustomerRepository = Depends(get_customer_repository)):
    """List customers with the active flag set."""
    return [CustomerRead.model_validate(c) for c in list_active_customers(repo)]


@router.get("/{id}", response_model=CustomerRead)
def customer_by_id(id: int, repo: CustomerRepository = Depends(get_customer_repository)):
    return CustomerRead.model_validate(get_customer(repo, id))


@router.post("", response_model=CustomerRead)
def upsert_customer(body: CustomerSave, repo: CustomerRepository = Depends(get_customer_repository)):
    """Create the customer when no id is given, otherwise update it."""
    return CustomerRead.model_validate(save_customer(repo, body))


@router.put("/{id}/active", response_model=CustomerRead)
def set_customer_active(
    id: int,
    body: CustomerActiveUpdate,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    return CustomerRead.model_validate(change_active(repo, id, body.active))


@router.delete("/{id}", response_model=CustomerRead)
def remove_customer(id: int, repo: CustomerRepository = Depends(get_customer_repository)):
    return CustomerRead.model_validate(delete_customer(repo, id))
