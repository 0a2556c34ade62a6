# app/db/models.py

from sqlalchemy import (
    Column,
    String,
    Integer,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Customer(Base):
    __tablename__ = "customers"

    customer_id = Column(Integer, primary_key=True, autoincrement=True)
    customer_name = Column(String, nullable=False, default="")
    customer_age = Column(Integer, nullable=False, default=0)
    customer_mobile_number = Column(String, nullable=False, default="")
    customer_email_address = Column(String, nullable=False, default="")
    customer_address = Column(String, nullable=False, default="")

    def __repr__(self):
        return f"<Customer id={self.customer_id} name={self.customer_name!r}>"
