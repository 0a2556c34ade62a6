# app/api/v1/routers/customers.py
from fastapi import APIRouter, Depends, HTTPException, status, Query

from app.api.v1.dependencies import get_customer_service
from app.core.config import get_settings
from app.crud.exceptions import InvalidPageRequest, UnknownSortProperty
from app.schemas.customer_schemas import CustomerRequest
from app.schemas.response_schemas import APIResponse
from app.services.customer_service import CustomerService
from app.utils.decorators import log_request

router = APIRouter()


@router.post("/create", response_model=APIResponse)
@log_request
def create_customer(
        payload: CustomerRequest,
        service: CustomerService = Depends(get_customer_service)
):
    """Store a new customer."""
    return service.create_customer(payload)


@router.get("/list", response_model=APIResponse)
@log_request
def get_all_customers(service: CustomerService = Depends(get_customer_service)):
    """List every customer."""
    return service.get_all_customers()


@router.get("/get/{customer_id}", response_model=APIResponse)
@log_request
def get_customer(
        customer_id: int,
        service: CustomerService = Depends(get_customer_service)
):
    """Get a single customer by id. An unknown id comes back with the not-found code."""
    return service.get_by_customer_id(customer_id)


@router.delete("/delete/{customer_id}", response_model=APIResponse)
@log_request
def delete_customer(
        customer_id: int,
        service: CustomerService = Depends(get_customer_service)
):
    """Delete a customer."""
    return service.delete_by_customer_id(customer_id)


@router.put("/update/{customer_id}", response_model=APIResponse)
@log_request
def update_customer(
        customer_id: int,
        payload: CustomerRequest,
        service: CustomerService = Depends(get_customer_service)
):
    """Overwrite all of a customer's details."""
    return service.update_customer_details(customer_id, payload)


@router.get("/page", response_model=APIResponse)
@log_request
def get_customers_page(
        page_no: int = Query(0, alias="pageNo", description="Zero-based page number"),
        page_size: int | None = Query(None, alias="pageSize", description="Customers per page"),
        sort_by: str | None = Query(None, alias="sortBy", description="Property to sort ascending by"),
        service: CustomerService = Depends(get_customer_service)
):
    """
    Fetch one page of customers, optionally sorted.
    Bad page parameters or an unknown sort property are rejected with a 400;
    any other failure is left to surface as a server error.
    """
    if page_size is None:
        page_size = get_settings().DEFAULT_PAGE_SIZE
    try:
        if sort_by:
            return service.get_customers_using_paging_and_sorting(page_no, page_size, sort_by)
        return service.get_customers_using_pagination(page_no, page_size)
    except (InvalidPageRequest, UnknownSortProperty) as e:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(e))


@router.get("/sort", response_model=APIResponse)
@log_request
def get_customers_sorted(
        sort_by: str = Query(..., alias="sortBy", description="Property to sort ascending by"),
        service: CustomerService = Depends(get_customer_service)
):
    """Fetch every customer sorted ascending by one property."""
    try:
        return service.get_customers_using_sorting(sort_by)
    except (InvalidPageRequest, UnknownSortProperty) as e:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(e))
