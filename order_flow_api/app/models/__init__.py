"""
SQLAlchemy ORM models.

Importing this package registers every table on ``Base.metadata`` so
``init_db`` can create them.
"""

from .customer import Customer
from .item import Item
from .order import Order, order_items

__all__ = ["Customer", "Item", "Order", "order_items"]
