"""Schemas shared by several domains."""

from pydantic import BaseModel, Field


# Largest id or paging value accepted from a request.  Larger integers
# are rejected with 422 before they reach the database driver.
MAX_INT = 2**31 - 1


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by update and delete endpoints."""

    message: str = Field(..., examples=["Customer updated successfully!"])
