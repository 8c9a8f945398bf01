"""
Pytest fixtures for customers service tests
"""

import os

# Settings are read at import time; point them at an in-memory database first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["TOKEN_PURGE_ENABLED"] = "false"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from customers_service.application.services.customer_service import save_customer
from customers_service.domain.models.customer import Customer
from customers_service.domain.schemas.customer import CustomerSave
from customers_service.infrastructure.database import Base, SessionLocal, engine, get_db
from customers_service.infrastructure.repositories.credential_store import SQLAlchemyCredentialStore
from customers_service.infrastructure.repositories.customer_repository import SQLAlchemyCustomerRepository
from customers_service.main import app


@pytest.fixture
def db():
    """Fresh schema and session per test"""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def store(db):
    return SQLAlchemyCredentialStore(db)


@pytest.fixture
def customer_repo(db):
    return SQLAlchemyCustomerRepository(db, Customer)


@pytest.fixture
def customer(customer_repo):
    """Customer with phone 5551234 and password 'secret'"""
    return save_customer(customer_repo, CustomerSave(name="Alice", phone="5551234", password="secret"))


@pytest.fixture
def client(db):
    """Test client sharing the test session"""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client, customer):
    response = client.post("/api/customers/token", json={"phone": "5551234", "password": "secret"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
