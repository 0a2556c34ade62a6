import os

# Keep the app's module-level engine off the filesystem during tests.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.crud.customer_crud import CustomerRepository
from app.db.models import Base
from app.db.session import get_db
from app.main import app
from app.schemas.customer_schemas import CustomerRequest
from app.services.customer_service import CustomerService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def repository(db):
    return CustomerRepository(db)


@pytest.fixture
def service(repository):
    return CustomerService(repository)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_request(name="Alice", age=30, mobile="111", email="a@x.com", address="Addr1") -> CustomerRequest:
    return CustomerRequest(
        customer_name=name,
        customer_age=age,
        customer_mobile_number=mobile,
        customer_email_address=email,
        customer_address=address,
    )


@pytest.fixture
def request_factory():
    return make_request
