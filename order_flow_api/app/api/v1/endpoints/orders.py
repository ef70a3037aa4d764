"""
Order endpoints for API v1.

Paginated listing, CRUD, and lookups of a customer's orders by customer
id or by exact customer name.  Every order returned carries its customer
and items.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from sqlalchemy.orm import Session

from order_flow_api.app.core.db import get_db
from order_flow_api.app.schemas.common import MAX_INT, MessageResponse
from order_flow_api.app.schemas.order import OrderInput, OrderRead
from order_flow_api.app.services.order_service import OrderService

router = APIRouter()


@router.get("", response_model=List[OrderRead])
async def list_orders(
    page_index: Optional[int] = Query(None, alias="pageIndex", le=MAX_INT),
    page_size: Optional[int] = Query(None, alias="pageSize", le=MAX_INT),
    db: Session = Depends(get_db),
) -> List[OrderRead]:
    """Return a page of orders sorted by order date, newest first.

    - **pageIndex**: 1-based page number, default 1.
    - **pageSize**: orders per page, default 10.

    Either value at zero or below answers 400; above ``MAX_INT``, 422.
    """
    orders = await OrderService.list_orders(db, page_index=page_index, page_size=page_size)
    return [OrderRead.model_validate(o) for o in orders]


@router.get("/customer/id/{customer_id}", response_model=List[OrderRead])
async def list_orders_by_customer_id(
    customer_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
) -> List[OrderRead]:
    """Return all orders of a customer.  404 when there are none."""
    orders = await OrderService.list_orders_by_customer_id(db, customer_id)
    return [OrderRead.model_validate(o) for o in orders]


@router.get("/customer/name/{customer_name}", response_model=List[OrderRead])
async def list_orders_by_customer_name(customer_name: str, db: Session = Depends(get_db)) -> List[OrderRead]:
    """Return all orders of the customer with exactly this name."""
    orders = await OrderService.list_orders_by_customer_name(db, customer_name)
    return [OrderRead.model_validate(o) for o in orders]


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(
    order_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
) -> OrderRead:
    order = await OrderService.get_order(db, order_id)
    return OrderRead.model_validate(order)


@router.post("", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_in: OrderInput,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> OrderRead:
    """Create an order for an existing customer.

    Answers 400 for a missing order information, an invalid customer id
    or a missing or unnamed item, and 404 when the customer does not
    exist.
    """
    order = await OrderService.create_order(db, order_in)
    response.headers["Location"] = str(request.url_for("get_order", order_id=order.id))
    return OrderRead.model_validate(order)


@router.patch("/{order_id}", response_model=MessageResponse)
async def update_order(
    order_in: OrderInput,
    order_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Replace an order's information, customer and items."""
    message = await OrderService.update_order(db, order_id, order_in)
    return MessageResponse(message=message)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: int = Path(..., le=MAX_INT),
    db: Session = Depends(get_db),
) -> None:
    await OrderService.delete_order(db, order_id)
    return None
