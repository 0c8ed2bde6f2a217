import sys
import os

# Add the current directory to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# bcrypt minimum cost keeps the suite fast; must be set before app imports
os.environ.setdefault("BCRYPT_SALT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_JSON", "false")

import pytest
from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base_class import Base
# Import all models to ensure their tables are created
from app.models.student import Student


# Create an in-memory SQLite database for testing
@pytest.fixture(scope="session")
def engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="session")
def TestingSessionLocal(engine):
    """Create a session factory for the test database."""
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture(autouse=True)
def _clean_students(engine):
    yield
    with engine.begin() as conn:
        conn.execute(delete(Student.__table__))


# Override the database dependency to use our test database
@pytest.fixture
def override_get_db(TestingSessionLocal):
    """Override the database dependency to use our test database."""
    def _override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()
    return _override_get_db


@pytest.fixture
def db_session(TestingSessionLocal):
    """Create a database session for each test."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(override_get_db):
    """Create a test client for API tests."""
    from fastapi.testclient import TestClient
    from app.main import app
    from app.db import get_db

    # Override the database dependency
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    # Clear overrides after test
    app.dependency_overrides.clear()


@pytest.fixture
def student_payload():
    """A payload that satisfies every field rule (camelCase, as sent over HTTP)."""
    return {
        "id": "2030010001",
        "password": "s3cret-pass",
        "name": {"firstName": "Rahim", "middleName": "Uddin", "lastName": "Khan"},
        "gender": "male",
        "dateOfBirth": "2004-03-12",
        "email": "rahim.khan@example.com",
        "contactNo": "01700000001",
        "emergencyContactNo": "01700000002",
        "bloodGroup": "O+",
        "presentAddress": "12 Lake Road, Dhaka",
        "permanentAddress": "4 River Street, Sylhet",
        "guardian": {
            "fatherName": "Karim Khan",
            "fatherOccupation": "Engineer",
            "fatherContactNo": "01700000003",
            "motherName": "Salma Begum",
            "motherOccupation": "Teacher",
            "motherContactNo": "01700000004",
        },
        "localGuardian": {
            "name": "Jamal Hossain",
            "occupation": "Merchant",
            "contactNo": "01700000005",
            "address": "7 Market Lane, Dhaka",
        },
        "profileImg": "https://example.com/rahim.png",
    }
