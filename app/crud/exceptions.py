"""
Errors raised by the record store.

Both subclass ValueError so the API layer can turn them into a 400 the same
way it handles other bad input coming back from the CRUD layer.
"""


class InvalidPageRequest(ValueError):
    """Page number is negative or page size is not positive."""

    def __init__(self, page_number: int, page_size: int):
        self.page_number = page_number
        self.page_size = page_size
        if page_number < 0:
            message = f"Page index must not be less than zero, got {page_number}."
        else:
            message = f"Page size must not be less than one, got {page_size}."
        super().__init__(message)


class UnknownSortProperty(ValueError):
    """The sort key does not name a property of the customer record."""

    def __init__(self, sort_key: str):
        self.sort_key = sort_key
        super().__init__(f"No property '{sort_key}' found for type 'Customer'.")
