"""
Pydantic schema definitions for API payloads.

Each domain (customers, orders) defines its own Pydantic models for
request and response bodies.  Schemas are separated from the ORM
models to decouple API representation from persistence.
"""
