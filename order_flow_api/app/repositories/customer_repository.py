"""Queries over the ``customers`` table."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select

from order_flow_api.app.models import Customer
from .base import SqlRepository


class CustomerRepository(SqlRepository):

    def list_all(self) -> List[Customer]:
        return list(self.db.scalars(select(Customer).order_by(Customer.id)))

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        return self.db.get(Customer, customer_id)

    def get_by_name(self, name: str) -> Optional[Customer]:
        """Return the first customer whose name matches exactly."""
        stmt = select(Customer).where(Customer.name == name).order_by(Customer.id).limit(1)
        return self.db.scalars(stmt).first()

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Whether any customer other than ``exclude_id`` uses ``email``."""
        stmt = select(Customer.id).where(Customer.email == email)
        if exclude_id is not None:
            stmt = stmt.where(Customer.id != exclude_id)
        return self.db.scalars(stmt.limit(1)).first() is not None
