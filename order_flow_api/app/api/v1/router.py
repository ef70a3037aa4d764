"""
Top-level router for version 1 of the API.

This router aggregates the domain-specific routers under a unified
prefix.  When new domains are introduced, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import customers, orders

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
