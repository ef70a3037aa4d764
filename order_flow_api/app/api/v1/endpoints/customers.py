"""
Customer endpoints for API v1.

CRUD over customers.  Validation and uniqueness rules live in
``CustomerService``; its exceptions are translated to HTTP status codes
by the handler registered in ``main.create_app``.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.orm import Session

from order_flow_api.app.core.db import get_db
from order_flow_api.app.schemas.common import MAX_INT, MessageResponse
from order_flow_api.app.schemas.customer import CustomerCreate, CustomerRead
from order_flow_api.app.services.customer_service import CustomerService

router = APIRouter()


@router.get("", response_model=List[CustomerRead])
async def list_customers(db: Session = Depends(get_db)) -> List[CustomerRead]:
    """Return every customer.  No paging."""
    customers = await CustomerService.list_customers(db)
    return [CustomerRead.model_validate(c) for c in customers]


@router.get("/{customer_id}", response_model=CustomerRead)
async def get_customer(
    customer_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
) -> CustomerRead:
    """Retrieve a single customer by ID.  Returns 404 if it does not exist."""
    customer = await CustomerService.get_customer(db, customer_id)
    return CustomerRead.model_validate(customer)


@router.post("", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_in: CustomerCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> CustomerRead:
    """Create a customer.

    Answers 400 when the name or email is missing or the email is
    malformed, and 409 when the email is already taken.  The
    ``Location`` header points at the new customer.
    """
    customer = await CustomerService.create_customer(db, customer_in)
    response.headers["Location"] = str(request.url_for("get_customer", customer_id=customer.id))
    return CustomerRead.model_validate(customer)


@router.patch("/{customer_id}", response_model=MessageResponse)
async def update_customer(
    customer_in: CustomerCreate,
    customer_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Replace a customer's name and email."""
    message = await CustomerService.update_customer(db, customer_id, customer_in)
    return MessageResponse(message=message)


@router.delete("/{customer_id}", response_model=MessageResponse)
async def delete_customer(
    customer_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Delete a customer.  Customers with orders cannot be deleted (400)."""
    message = await CustomerService.delete_customer(db, customer_id)
    return MessageResponse(message=message)
