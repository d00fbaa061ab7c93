"""Customer-related FastAPI routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from Database.db import FrontDeskDB
from Database.deps import get_db
from Database.line_format import PersistenceError

from .models import CustomerFields, CustomerListResponse, CustomerResponse, MessageResponse
from .utils import _not_found, _storage_failure

logger = logging.getLogger(__name__)

CUSTOMER = "customer"

# mount api router
# handlers call the stores directly on the event loop (no run_in_threadpool)
# so only one request at a time touches the in-memory state and its files
customer_router = APIRouter()

@customer_router.get("/health", response_model=MessageResponse)
async def health_check() -> MessageResponse:
    """Quick liveness probe for the customer service."""

    return MessageResponse(status=status.HTTP_200_OK, message="Customer service is healthy")

@customer_router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_customer(fields: CustomerFields, db: FrontDeskDB = Depends(get_db)) -> CustomerResponse:
    """
    Register a new customer.

    Args:
        fields: Name, contact and optional email.
        db: Front desk storage injected via dependency.

    Returns:
        CustomerResponse wrapping the created customer.
    """

    try:
        customer = db.customers.add(fields.name, fields.contact, fields.email or "")
    except PersistenceError as exc:
        raise _storage_failure(exc, logger, "create customer") from exc

    if customer is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Customer name and contact are required and fields must be single-line.",
        )

    return CustomerResponse(status=status.HTTP_201_CREATED, customer=customer)

@customer_router.get("", response_model=CustomerListResponse)
async def list_customers(db: FrontDeskDB = Depends(get_db)) -> CustomerListResponse:
    """List every customer in insertion order."""

    return CustomerListResponse(status=status.HTTP_200_OK, customers=db.customers.list())

@customer_router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: int, db: FrontDeskDB = Depends(get_db)) -> CustomerResponse:

    customer = db.customers.get_by_id(customer_id)
    if customer is None:
        _not_found(customer_id, logger, CUSTOMER)

    return CustomerResponse(status=status.HTTP_200_OK, customer=customer)

@customer_router.delete("/{customer_id}", response_model=MessageResponse)
async def delete_customer(customer_id: int, db: FrontDeskDB = Depends(get_db)) -> MessageResponse:
    """
    Delete a customer by identifier.

    Rooms still pointing at the customer keep their booking and bill as "Unknown".
    """

    try:
        deleted = db.customers.delete(customer_id)
    except PersistenceError as exc:
        raise _storage_failure(exc, logger, "delete customer") from exc

    if not deleted:
        _not_found(customer_id, logger, CUSTOMER)

    return MessageResponse(status=status.HTTP_200_OK, message=f"Customer {customer_id} deleted")
