"""
Pydantic models for orders and their items.

Order payloads use camelCase keys on the wire (``orderInformation``,
``customerId``, ``orderDate``).  Attributes stay snake_case in Python;
input accepts either spelling and output is written in camelCase.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from .common import MAX_INT
from .customer import CustomerRead


class ItemCreate(BaseModel):
    """An item supplied with an order.  Always stored as a new row."""

    name: Optional[str] = Field(None, examples=["Keyboard"])


class ItemRead(BaseModel):
    id: int
    name: str

    model_config = {
        "from_attributes": True,
    }


class OrderInput(BaseModel):
    """Write-side order shape used for both create and update.

    Server-assigned fields (``id``, ``orderDate``, ``customer``) are not
    accepted.  Field presence is checked by ``OrderService``.
    """

    order_information: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("orderInformation", "order_information"),
        examples=["Deliver after 5pm"],
    )
    customer_id: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("customerId", "customer_id"),
        le=MAX_INT,
        examples=[1],
    )
    items: Optional[List[ItemCreate]] = None


class OrderRead(BaseModel):
    """Schema for reading an order with its customer and items."""

    id: int
    order_information: str = Field(
        ...,
        validation_alias=AliasChoices("order_information", "orderInformation"),
        serialization_alias="orderInformation",
    )
    order_date: datetime = Field(
        ...,
        validation_alias=AliasChoices("order_date", "orderDate"),
        serialization_alias="orderDate",
    )
    customer_id: int = Field(
        ...,
        validation_alias=AliasChoices("customer_id", "customerId"),
        serialization_alias="customerId",
    )
    customer: CustomerRead
    items: List[ItemRead]

    model_config = {
        "from_attributes": True,
    }
