"""Customer service — business logic for customer records."""

from typing import List

import structlog
from sqlalchemy.exc import SQLAlchemyError

from customers_service.application.services.password_service import hash_password
from customers_service.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    InternalError,
)
from customers_service.domain.models.customer import Customer
from customers_service.domain.repositories.customer_repository import CustomerRepository
from customers_service.domain.schemas.customer import CustomerSave

logger = structlog.get_logger(__name__)


def _not_found(id: int) -> EntityNotFoundException:
    return EntityNotFoundException("Customer not found", details={"id": id})


def list_customers(repo: CustomerRepository) -> List[Customer]:
    try:
        return repo.list()
    except SQLAlchemyError:
        logger.exception("Customer listing failed")
        raise InternalError()


def list_active_customers(repo: CustomerRepository) -> List[Customer]:
    try:
        return repo.list_active()
    except SQLAlchemyError:
        logger.exception("Active customer listing failed")
        raise InternalError()


def get_customer(repo: CustomerRepository, id: int) -> Customer:
    try:
        customer = repo.get_by_id(id)
    except SQLAlchemyError:
        logger.exception("Customer lookup failed", customer_id=id)
        raise InternalError()
    if customer is None:
        raise _not_found(id)
    return customer


def change_active(repo: CustomerRepository, id: int, active: bool) -> Customer:
    try:
        customer = repo.set_active(id, active)
    except SQLAlchemyError:
        logger.exception("Customer activation change failed", customer_id=id)
        raise InternalError()
    if customer is None:
        raise _not_found(id)
    logger.info("Customer active flag changed", customer_id=id, active=active)
    return customer


def delete_customer(repo: CustomerRepository, id: int) -> Customer:
    """Delete a customer; its session tokens go with it (ON DELETE CASCADE)."""
    try:
        customer = repo.delete(id)
    except SQLAlchemyError:
        logger.exception("Customer delete failed", customer_id=id)
        raise InternalError()
    if customer is None:
        raise _not_found(id)
    logger.info("Customer deleted", customer_id=id)
    return customer


def save_customer(repo: CustomerRepository, data: CustomerSave) -> Customer:
    """Insert when data.id is unset, otherwise update that customer.

    The password is hashed here; the store only ever sees password_hash.
    """
    try:
        password_hash = hash_password(data.password)
    except ValueError:
        # passlib rejects NUL bytes and oversize secrets; never log the value
        logger.warning("Password rejected by hasher", customer_id=data.id)
        raise BusinessRuleViolationException("Password is not acceptable")

    values = {
        "name": data.name,
        "phone": data.phone,
        "password_hash": password_hash,
    }
    try:
        if data.id is None:
            customer = repo.create(values)
            logger.info("Customer created", customer_id=customer.id)
            return customer

        existing = repo.get_by_id(data.id)
        if existing is None:
            raise _not_found(data.id)
        customer = repo.update(existing, values)
        logger.info("Customer updated", customer_id=customer.id)
        return customer
    except SQLAlchemyError:
        logger.exception("Customer save failed", customer_id=data.id)
        raise InternalError()
