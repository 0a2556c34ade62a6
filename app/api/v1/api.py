from fastapi import APIRouter
from app.api.v1.routers import health, customers

# This is the main router for the v1 API
api_router = APIRouter()

api_router.include_router(health.router, tags=["Health"])

# All routes from customers.py will be prefixed with '/customers'
# and tagged as 'Customers' in the OpenAPI docs
api_router.include_router(customers.router, prefix="/customers", tags=["Customers"])
