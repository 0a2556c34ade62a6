# seed_customers.py
from app.crud.customer_crud import CustomerRepository
from app.db.session import SessionLocal, init_db
from app.schemas.customer_schemas import CustomerRequest
from app.services.customer_service import CustomerService

# --- CONFIGURE THE SAMPLE CUSTOMERS ---
SAMPLE_CUSTOMERS = [
    {"customerName": "Alice", "customerAge": 30, "customerMobileNumber": "111",
     "customerEmailAddress": "a@x.com", "customerAddress": "Addr1"},
    {"customerName": "Bob", "customerAge": 42, "customerMobileNumber": "222",
     "customerEmailAddress": "b@x.com", "customerAddress": "Addr2"},
    {"customerName": "Carol", "customerAge": 25, "customerMobileNumber": "333",
     "customerEmailAddress": "c@x.com", "customerAddress": "Addr3"},
]


def seed_customers():
    """
    Creates the tables if needed and inserts the sample customers
    into the database configured by DATABASE_URL.
    """
    init_db()
    db = SessionLocal()
    try:
        service = CustomerService(CustomerRepository(db))
        for payload in SAMPLE_CUSTOMERS:
            response = service.create_customer(CustomerRequest(**payload))
            print(f"✅ Stored customer {response.data.customer_id}: {response.data.customer_name}")
        db.commit()
    except Exception as e:
        db.rollback()
        print(f"❌ An error occurred: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_customers()
