# app/services/customer_service.py
from app.core.constants import (
    CUSTOMER_NOT_EXISTS,
    CUSTOMER_NOT_EXISTS_CODE,
    SUCCESS_CODE,
    SUCCESSFULLY_DELETED,
    SUCCESSFULLY_RETRIEVED,
    SUCCESSFULLY_STORED,
    SUCCESSFULLY_UPDATED,
)
from app.core.logging import get_logger
from app.crud.customer_crud import CustomerRepository
from app.db.models import Customer
from app.schemas.customer_schemas import CustomerRequest
from app.schemas.response_schemas import APIResponse
from app.services.customer_mapper import model_to_response, request_to_model

logger = get_logger(__name__)


def _not_exists() -> APIResponse:
    return APIResponse(
        error_code=CUSTOMER_NOT_EXISTS_CODE,
        error_message=CUSTOMER_NOT_EXISTS,
        data=[]
    )


def _listing(customers: list[Customer]) -> APIResponse:
    # Listing operations report with the "updated" message text; clients
    # match on it, so it stays.
    return APIResponse(
        error_code=SUCCESS_CODE,
        error_message=SUCCESSFULLY_UPDATED,
        data=[model_to_response(customer) for customer in customers]
    )


class CustomerService:
    """
    Business logic between the customer routes and the record store.

    Every operation returns an APIResponse. A missing customer is reported
    through the envelope's code, never raised. Errors from the store (bad
    sort key, bad page request, database failures) propagate unchanged.
    """

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    def create_customer(self, request: CustomerRequest) -> APIResponse:
        """Stores a new customer and returns it with its generated id."""
        customer = self.repository.save(request_to_model(request))
        logger.info(f"Created customer {customer.customer_id}")
        return APIResponse(
            error_code=SUCCESS_CODE,
            error_message=SUCCESSFULLY_STORED,
            data=model_to_response(customer)
        )

    def get_all_customers(self) -> APIResponse:
        customers = self.repository.find_all()
        return APIResponse(
            error_code=SUCCESS_CODE,
            error_message=SUCCESSFULLY_RETRIEVED,
            data=[model_to_response(customer) for customer in customers]
        )

    def get_by_customer_id(self, customer_id: int) -> APIResponse:
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            logger.info(f"Customer {customer_id} not found")
            return _not_exists()

        return APIResponse(
            error_code=SUCCESS_CODE,
            error_message=SUCCESSFULLY_RETRIEVED,
            data=model_to_response(customer)
        )

    def delete_by_customer_id(self, customer_id: int) -> APIResponse:
        if self.repository.find_by_id(customer_id) is None:
            logger.info(f"Customer {customer_id} not found, nothing to delete")
            return _not_exists()

        self.repository.delete_by_id(customer_id)
        logger.info(f"Deleted customer {customer_id}")
        return APIResponse(
            error_code=SUCCESS_CODE,
            error_message=SUCCESSFULLY_DELETED,
            data=[]
        )

    def update_customer_details(self, customer_id: int, request: CustomerRequest) -> APIResponse:
        """
        Overwrites all five mutable fields of an existing customer.

        There is no partial update: fields the caller left out arrive as
        blank/zero and are written as such. An unknown id creates nothing.
        """
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            logger.info(f"Customer {customer_id} not found, nothing to update")
            return _not_exists()

        customer.customer_name = request.customer_name
        customer.customer_age = request.customer_age
        customer.customer_mobile_number = request.customer_mobile_number
        customer.customer_email_address = request.customer_email_address
        customer.customer_address = request.customer_address
        customer = self.repository.save(customer)

        logger.info(f"Updated customer {customer_id}")
        return APIResponse(
            error_code=SUCCESS_CODE,
            error_message=SUCCESSFULLY_UPDATED,
            data=model_to_response(customer)
        )

    def get_customers_using_pagination(self, page_no: int, page_size: int) -> APIResponse:
        """Returns page page_no (zero-based); a page past the end is empty."""
        return _listing(self.repository.find_all_paged(page_no, page_size))

    def get_customers_using_paging_and_sorting(self, page_no: int, page_size: int, sort_by: str) -> APIResponse:
        return _listing(self.repository.find_all_paged_sorted(page_no, page_size, sort_by))

    def get_customers_using_sorting(self, sort_by: str) -> APIResponse:
        return _listing(self.repository.find_all_sorted(sort_by))
