"""
Business logic for orders.

``OrderService`` validates order payloads, resolves the referenced
customer and keeps ``order_date`` current on every write.  Items
supplied with an order are stored as new rows and linked through the
``order_items`` table; replacing them on update leaves the old rows
in place.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from order_flow_api.app.core.config import settings
from order_flow_api.app.core.exceptions import NotFoundError, ValidationError
from order_flow_api.app.models import Customer, Item, Order
from order_flow_api.app.repositories import CustomerRepository, OrderRepository
from order_flow_api.app.schemas.order import OrderInput


logger = logging.getLogger(__name__)

NO_ORDERS_FOR_CUSTOMER = "No orders found for the specified customer."


class OrderService:
    """Service class for managing orders."""

    @classmethod
    async def list_orders(
        cls,
        db: Session,
        page_index: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> List[Order]:
        """Return one page of orders, newest first.

        Omitted parameters default to the first page of
        ``settings.default_page_size`` orders.  A supplied value of zero
        or less is rejected.
        """
        if (page_index is not None and page_index <= 0) or (
            page_size is not None and page_size <= 0
        ):
            raise ValidationError("Invalid page index or page size.")
        page_index = page_index or 1
        page_size = page_size or settings.default_page_size
        skip = (page_index - 1) * page_size
        return OrderRepository(db).list_page(skip=skip, take=page_size)

    @classmethod
    async def get_order(cls, db: Session, order_id: int) -> Order:
        order = OrderRepository(db).get_by_id(order_id)
        if order is None:
            raise NotFoundError("Order not found.")
        return order

    @classmethod
    async def list_orders_by_customer_id(cls, db: Session, customer_id: int) -> List[Order]:
        """Return every order of a customer.

        An unknown customer and a customer without orders both raise
        ``NotFoundError`` with the same message.
        """
        orders = OrderRepository(db).list_by_customer_id(customer_id)
        if not orders:
            raise NotFoundError(NO_ORDERS_FOR_CUSTOMER)
        return orders

    @classmethod
    async def list_orders_by_customer_name(cls, db: Session, customer_name: str) -> List[Order]:
        """Return every order of the customer whose name matches exactly."""
        customer = CustomerRepository(db).get_by_name(customer_name)
        if customer is None:
            raise NotFoundError("Customer not found.")
        return await cls.list_orders_by_customer_id(db, customer.id)

    @classmethod
    async def create_order(cls, db: Session, data: OrderInput) -> Order:
        """Validate ``data`` and insert a new order dated now."""
        customer = cls._validate(db, data)
        repo = OrderRepository(db)

        order = Order(
            order_information=data.order_information,
            order_date=datetime.now(),
            customer_id=customer.id,
            customer=customer,
            items=[Item(name=item.name) for item in data.items],
        )
        repo.add(order)
        repo.commit("Failed to create the order.")
        logger.info("Created order %s for customer %s", order.id, customer.id)
        return order

    @classmethod
    async def update_order(cls, db: Session, order_id: int, data: OrderInput) -> str:
        """Overwrite an order's information, customer and items.

        ``order_date`` is reset to the current time.
        """
        repo = OrderRepository(db)
        order = repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError("Order not found.")
        customer = cls._validate(db, data)

        order.order_information = data.order_information
        order.customer_id = customer.id
        order.customer = customer
        order.order_date = datetime.now()
        order.items = [Item(name=item.name) for item in data.items]
        repo.commit("Failed to update the order.")
        logger.info("Updated order %s", order_id)
        return "Order updated successfully!"

    @classmethod
    async def delete_order(cls, db: Session, order_id: int) -> None:
        repo = OrderRepository(db)
        order = repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError("Order not found.")
        repo.delete(order)
        repo.commit("Failed to delete the order.")
        logger.info("Deleted order %s", order_id)

    @staticmethod
    def _validate(db: Session, data: OrderInput) -> Customer:
        """Check an order payload and return the customer it references.

        Field checks run first, in a fixed order, so the first problem
        found is the one reported; the customer lookup runs last.
        """
        if not data.order_information:
            raise ValidationError("Order information is required.")
        if data.customer_id is None or data.customer_id <= 0:
            raise ValidationError("Invalid customer ID.")
        if not data.items:
            raise ValidationError("At least one item is required for the order.")
        for item in data.items:
            if not item.name:
                raise ValidationError("Item name is required.")

        customer = CustomerRepository(db).get_by_id(data.customer_id)
        if customer is None:
            raise NotFoundError("Customer with the provided ID not found.")
        return customer
