# app/api/v1/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from app.crud.customer_crud import CustomerRepository
from app.db.session import get_db
from app.services.customer_service import CustomerService


def get_customer_repository(db: Session = Depends(get_db)) -> CustomerRepository:
    """Record store bound to the request's session."""
    return CustomerRepository(db)


def get_customer_service(
        repository: CustomerRepository = Depends(get_customer_repository)
) -> CustomerService:
    return CustomerService(repository)
