# app/services/customer_mapper.py
from app.db.models import Customer
from app.schemas.customer_schemas import CustomerRequest, CustomerResponse


def request_to_model(request: CustomerRequest) -> Customer:
    """Builds an unsaved customer record from a request; the id is left unset."""
    return Customer(
        customer_name=request.customer_name,
        customer_age=request.customer_age,
        customer_mobile_number=request.customer_mobile_number,
        customer_email_address=request.customer_email_address,
        customer_address=request.customer_address,
    )


def model_to_response(customer: Customer) -> CustomerResponse:
    return CustomerResponse(
        customer_id=customer.customer_id,
        customer_name=customer.customer_name,
        customer_age=customer.customer_age,
        customer_mobile_number=customer.customer_mobile_number,
        customer_email_address=customer.customer_email_address,
        customer_address=customer.customer_address,
    )
