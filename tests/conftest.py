# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["MIN_SHIFT_HOURS"] = "4"
os.environ["TIMEZONE"] = "UTC"

from shiftdesk.database import get_db
from shiftdesk.main import app
from shiftdesk.models import Employee, User, UserRole
from shiftdesk.models.base import Base
from shiftdesk.security import get_password_hash

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_factory(db_session):
    """Factory for extra sessions on the test database (e.g. per thread)."""
    return TestingSessionLocal


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def employee(db_session) -> Employee:
    """Create a test employee."""
    employee = Employee(name="Alice Smith", employee_code="EMP001", department="Ops")
    db_session.add(employee)
    db_session.commit()
    db_session.refresh(employee)
    return employee


@pytest.fixture
def other_employee(db_session) -> Employee:
    """Create a second test employee."""
    employee = Employee(name="Bob Jones", employee_code="EMP002", department="Sales")
    db_session.add(employee)
    db_session.commit()
    db_session.refresh(employee)
    return employee


@pytest.fixture
def admin_user(db_session) -> User:
    """Create an admin test user."""
    user = User(
        email="admin@example.com",
        hashed_password=get_password_hash("adminpassword123"),
        role=UserRole.ADMIN,
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def employee_user(db_session, employee) -> User:
    """Create a regular user linked to the test employee."""
    user = User(
        email="alice@example.com",
        hashed_password=get_password_hash("alicepassword123"),
        role=UserRole.USER,
        employee_id=employee.id,
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_client(client, admin_user):
    """Create an authenticated admin test client."""
    response = client.post(
        "/api/v1/auth/admin/login",
        json={"identifier": "admin@example.com", "password": "adminpassword123"},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def employee_client(client, employee_user):
    """Create an authenticated employee test client."""
    response = client.post(
        "/api/v1/auth/login",
        json={"identifier": "emp001", "password": "alicepassword123"},
    )
    assert response.status_code == 200
    return client
