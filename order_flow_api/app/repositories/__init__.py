"""
Data-access layer.

Repositories wrap a request-scoped SQLAlchemy ``Session`` and expose
the queries the services need.  They stage changes on the session;
``commit`` is the only place a transaction is finished.
"""

from .customer_repository import CustomerRepository
from .order_repository import OrderRepository

__all__ = ["CustomerRepository", "OrderRepository"]
