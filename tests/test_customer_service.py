import pytest

from app.core.constants import (
    CUSTOMER_NOT_EXISTS,
    CUSTOMER_NOT_EXISTS_CODE,
    SUCCESS_CODE,
    SUCCESSFULLY_DELETED,
    SUCCESSFULLY_RETRIEVED,
    SUCCESSFULLY_STORED,
    SUCCESSFULLY_UPDATED,
)
from app.crud.exceptions import UnknownSortProperty
from app.db.models import Customer
from app.schemas.customer_schemas import CustomerRequest


FIELDS = (
    "customer_name",
    "customer_age",
    "customer_mobile_number",
    "customer_email_address",
    "customer_address",
)


def _create_many(service, request_factory, count):
    return [
        service.create_customer(request_factory(name=f"Customer {i:02d}", age=20 + i)).data
        for i in range(count)
    ]


def test_create_returns_generated_id_and_input_fields(service, request_factory):
    response = service.create_customer(request_factory())

    assert response.error_code == SUCCESS_CODE
    assert response.error_message == SUCCESSFULLY_STORED
    assert response.data.customer_id is not None
    assert response.data.customer_name == "Alice"
    assert response.data.customer_age == 30
    assert response.data.customer_mobile_number == "111"
    assert response.data.customer_email_address == "a@x.com"
    assert response.data.customer_address == "Addr1"


def test_create_then_get_round_trips(service, request_factory):
    request = request_factory(name="Bob", age=45, mobile="222", email="b@x.com", address="Addr2")
    created = service.create_customer(request).data

    response = service.get_by_customer_id(created.customer_id)

    assert response.error_code == SUCCESS_CODE
    assert response.error_message == SUCCESSFULLY_RETRIEVED
    assert response.data == created
    for field in FIELDS:
        assert getattr(response.data, field) == getattr(request, field)


def test_get_missing_id_on_empty_store(service):
    response = service.get_by_customer_id(999)

    assert response.error_code == CUSTOMER_NOT_EXISTS_CODE
    assert response.error_message == CUSTOMER_NOT_EXISTS
    assert response.data == []


def test_get_all_customers(service, request_factory):
    created = _create_many(service, request_factory, 3)

    response = service.get_all_customers()

    assert response.error_code == SUCCESS_CODE
    assert response.error_message == SUCCESSFULLY_RETRIEVED
    assert response.data == created


def test_get_all_customers_empty(service):
    assert service.get_all_customers().data == []


def test_delete_then_get_reports_not_found(service, request_factory):
    created = service.create_customer(request_factory()).data

    deleted = service.delete_by_customer_id(created.customer_id)
    fetched = service.get_by_customer_id(created.customer_id)

    assert deleted.error_code == SUCCESS_CODE
    assert deleted.error_message == SUCCESSFULLY_DELETED
    assert deleted.data == []
    assert fetched.error_code == CUSTOMER_NOT_EXISTS_CODE
    assert fetched.data == []


def test_delete_missing_id(service):
    response = service.delete_by_customer_id(42)

    assert response.error_code == CUSTOMER_NOT_EXISTS_CODE
    assert response.error_message == CUSTOMER_NOT_EXISTS
    assert response.data == []


def test_update_missing_id_creates_nothing(service, request_factory):
    response = service.update_customer_details(5, request_factory())

    assert response.error_code == CUSTOMER_NOT_EXISTS_CODE
    assert response.data == []
    assert service.get_all_customers().data == []


def test_update_overwrites_every_field(service, request_factory):
    created = service.create_customer(request_factory()).data
    request = request_factory(name="Alicia", age=31, mobile="999", email="alicia@x.com", address="Addr9")

    response = service.update_customer_details(created.customer_id, request)

    assert response.error_code == SUCCESS_CODE
    assert response.error_message == SUCCESSFULLY_UPDATED
    assert response.data.customer_id == created.customer_id
    for field in FIELDS:
        assert getattr(response.data, field) == getattr(request, field)
    assert service.get_by_customer_id(created.customer_id).data == response.data


def test_update_does_not_merge_missing_fields(service, request_factory):
    created = service.create_customer(request_factory()).data

    response = service.update_customer_details(created.customer_id, CustomerRequest(customer_name="Zed"))

    assert response.data.customer_name == "Zed"
    assert response.data.customer_age == 0
    assert response.data.customer_mobile_number == ""
    assert response.data.customer_email_address == ""
    assert response.data.customer_address == ""


def test_pagination_first_page_is_full(service, request_factory):
    _create_many(service, request_factory, 7)

    response = service.get_customers_using_pagination(0, 5)

    assert response.error_code == SUCCESS_CODE
    assert response.error_message == SUCCESSFULLY_UPDATED
    assert len(response.data) == 5


def test_pagination_last_partial_page(service, request_factory):
    created = _create_many(service, request_factory, 7)

    response = service.get_customers_using_pagination(1, 5)

    assert response.data == created[5:]


def test_pagination_past_last_page_is_empty(service, request_factory):
    _create_many(service, request_factory, 3)

    response = service.get_customers_using_pagination(4, 5)

    assert response.error_code == SUCCESS_CODE
    assert response.data == []


def test_paging_and_sorting(service, request_factory):
    for name in ("Mallory", "Alice", "Trent", "Bob", "Eve"):
        service.create_customer(request_factory(name=name))

    response = service.get_customers_using_paging_and_sorting(0, 3, "customerName")

    assert response.error_message == SUCCESSFULLY_UPDATED
    assert [c.customer_name for c in response.data] == ["Alice", "Bob", "Eve"]


def test_sorting_by_name_is_non_decreasing(service, request_factory):
    for name in ("Mallory", "Alice", "Trent", "Bob", "Alice"):
        service.create_customer(request_factory(name=name))

    response = service.get_customers_using_sorting("customerName")

    names = [c.customer_name for c in response.data]
    assert response.error_code == SUCCESS_CODE
    assert response.error_message == SUCCESSFULLY_UPDATED
    assert names == sorted(names)
    assert len(names) == 5


def test_sorting_by_age(service, request_factory):
    for age in (50, 18, 33):
        service.create_customer(request_factory(age=age))

    response = service.get_customers_using_sorting("customerAge")

    assert [c.customer_age for c in response.data] == [18, 33, 50]


def test_unknown_sort_key_propagates(service, request_factory):
    service.create_customer(request_factory())

    with pytest.raises(UnknownSortProperty):
        service.get_customers_using_sorting("shoeSize")


def test_listing_record_saved_with_only_a_name(service, repository):
    repository.save(Customer(customer_name="Legacy"))

    response = service.get_all_customers()

    assert response.error_code == SUCCESS_CODE
    legacy, = response.data
    assert legacy.customer_name == "Legacy"
    assert legacy.customer_age == 0
    assert legacy.customer_mobile_number == ""
    assert legacy.customer_email_address == ""
    assert legacy.customer_address == ""
    assert service.get_customers_using_sorting("customerAge").data == [legacy]
