"""Order table and its many-to-many link to items."""

from datetime import datetime
from typing import List

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from order_flow_api.app.core.db import Base
from .customer import Customer
from .item import Item


order_items = Table(
    "order_items",
    Base.metadata,
    Column("order_id", ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True),
    Column("item_id", ForeignKey("items.id", ondelete="CASCADE"), primary_key=True),
)


class Order(Base):
    """An order placed by one customer for one or more items.

    The customer relationship is one-directional: customers do not
    know their orders, so deleting a customer that still has orders is
    left to the foreign key to reject.
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_information: Mapped[str] = mapped_column(Text, nullable=False)
    order_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    customer_id: Mapped[int] = mapped_column(ForeignKey("customers.id"), nullable=False, index=True)

    customer: Mapped[Customer] = relationship()
    items: Mapped[List[Item]] = relationship(secondary=order_items, order_by=Item.id)

    def __repr__(self) -> str:
        return f"<Order id={self.id} customer_id={self.customer_id}>"
