"""
Pydantic models for customer data.

Required fields are declared optional on the write schema on purpose:
missing or empty values must reach ``CustomerService`` so it can answer
with its own validation messages instead of a generic 422.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CustomerBase(BaseModel):
    name: Optional[str] = Field(None, examples=["John Doe"])
    email: Optional[str] = Field(None, examples=["john@example.com"])


class CustomerCreate(CustomerBase):
    """Schema for creating or updating a customer."""


class CustomerRead(CustomerBase):
    """Schema for reading a customer from the API."""

    id: int
    name: str
    email: str

    model_config = {
        "from_attributes": True,
    }
