"""Queries over the ``orders`` table.

Every read that returns orders loads the customer and the items in the
same round of queries so callers can serialise them after the fact.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import joinedload, selectinload

from order_flow_api.app.models import Order
from .base import SqlRepository


def _with_relations(stmt):
    return stmt.options(joinedload(Order.customer), selectinload(Order.items))


class OrderRepository(SqlRepository):

    def list_page(self, skip: int, take: int) -> List[Order]:
        """Orders newest first, ``take`` of them after skipping ``skip``.

        Ties on ``order_date`` are broken by id so consecutive pages never
        overlap.
        """
        stmt = (
            select(Order)
            .order_by(Order.order_date.desc(), Order.id.desc())
            .offset(skip)
            .limit(take)
        )
        return list(self.db.scalars(_with_relations(stmt)).unique())

    def get_by_id(self, order_id: int) -> Optional[Order]:
        stmt = _with_relations(select(Order).where(Order.id == order_id))
        return self.db.scalars(stmt).unique().first()

    def list_by_customer_id(self, customer_id: int) -> List[Order]:
        stmt = select(Order).where(Order.customer_id == customer_id).order_by(Order.id)
        return list(self.db.scalars(_with_relations(stmt)).unique())
