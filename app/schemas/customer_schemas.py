from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

class CustomerBase(BaseModel):
    customer_name: str = Field("", description="The customer's full name.")
    customer_age: int = Field(0, description="The customer's age in years.")
    customer_mobile_number: str = Field("", description="The customer's mobile number.")
    customer_email_address: str = Field("", description="The customer's email address.")
    customer_address: str = Field("", description="The customer's postal address.")

    class Config:
        # Accept and emit camelCase on the wire (customerName), snake_case in code.
        alias_generator = to_camel
        populate_by_name = True

# Properties to receive on create and update. Missing fields fall back to
# blank/zero, and an update writes them as such.
class CustomerRequest(CustomerBase):
    pass

# Properties to return to the client
class CustomerResponse(CustomerBase):
    customer_id: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
