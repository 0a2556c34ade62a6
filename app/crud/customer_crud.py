# app/crud/customer_crud.py
from pydantic.alias_generators import to_camel
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from app.crud.exceptions import InvalidPageRequest, UnknownSortProperty
from app.db.models import Customer


def _sortable_columns() -> dict:
    """
    Maps every name a caller may sort by to its column.
    Both the attribute name (customer_name) and its wire name (customerName)
    are accepted.
    """
    columns = {}
    for attr in inspect(Customer).column_attrs:
        column = getattr(Customer, attr.key)
        columns[attr.key] = column
        columns[to_camel(attr.key)] = column
    return columns


SORTABLE_COLUMNS = _sortable_columns()


def _check_page(page_number: int, page_size: int) -> None:
    if page_number < 0 or page_size < 1:
        raise InvalidPageRequest(page_number, page_size)


class CustomerRepository:
    """
    Record store for customers, bound to one session.

    Writes are flushed, not committed; the request's session dependency owns
    the transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def save(self, customer: Customer) -> Customer:
        """Inserts a new customer or persists changes to a loaded one."""
        self.db.add(customer)
        self.db.flush()
        return customer

    def find_by_id(self, customer_id: int) -> Customer | None:
        return self.db.get(Customer, customer_id)

    def find_all(self) -> list[Customer]:
        return self.db.query(Customer).order_by(Customer.customer_id).all()

    def delete_by_id(self, customer_id: int) -> None:
        """Deletes the customer if present; a missing id is a no-op."""
        db_customer = self.find_by_id(customer_id)
        if db_customer is not None:
            self.db.delete(db_customer)
            self.db.flush()

    def find_all_paged(self, page_number: int, page_size: int) -> list[Customer]:
        """
        Fetches one zero-indexed page. A page past the end comes back empty.
        """
        _check_page(page_number, page_size)
        return (
            self.db.query(Customer)
            .order_by(Customer.customer_id)
            .offset(page_number * page_size)
            .limit(page_size)
            .all()
        )

    def find_all_paged_sorted(self, page_number: int, page_size: int, sort_key: str) -> list[Customer]:
        """Fetches one zero-indexed page, ascending by sort_key."""
        _check_page(page_number, page_size)
        column = self._sort_column(sort_key)
        return (
            self.db.query(Customer)
            .order_by(column.asc(), Customer.customer_id)
            .offset(page_number * page_size)
            .limit(page_size)
            .all()
        )

    def find_all_sorted(self, sort_key: str) -> list[Customer]:
        column = self._sort_column(sort_key)
        return self.db.query(Customer).order_by(column.asc(), Customer.customer_id).all()

    @staticmethod
    def _sort_column(sort_key: str):
        try:
            return SORTABLE_COLUMNS[sort_key]
        except KeyError:
            raise UnknownSortProperty(sort_key) from None
