# app/core/constants.py
# Result codes and messages carried in the APIResponse envelope.
# These are semantic codes, not HTTP statuses.

SUCCESS_CODE = "0000"
CUSTOMER_NOT_EXISTS_CODE = "1001"

SUCCESSFULLY_STORED = "Customer details stored successfully"
SUCCESSFULLY_RETRIEVED = "Customer details retrieved successfully"
SUCCESSFULLY_UPDATED = "Customer details updated successfully"
SUCCESSFULLY_DELETED = "Customer details deleted successfully"
CUSTOMER_NOT_EXISTS = "Customer does not exist"
