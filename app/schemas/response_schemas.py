from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import List

from app.schemas.customer_schemas import CustomerResponse

class APIResponse(BaseModel):
    """
    Envelope returned by every customer operation.

    error_code is a semantic result code (see app.core.constants), not an
    HTTP status. data holds one customer, a list of customers, or an empty list.
    """
    error_code: str = Field(..., description="Semantic result code.")
    error_message: str = Field(..., description="Human-readable result message.")
    data: CustomerResponse | List[CustomerResponse] = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
