"""
Business logic for customers.

``CustomerService`` validates customer payloads (required name and
email, well-formed and unique email) before any write reaches the
database.  Failures are raised as the exceptions defined in
``core.exceptions``; the API layer turns them into HTTP responses.
"""

from __future__ import annotations

import logging
from typing import List

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.orm import Session

from order_flow_api.app.core.exceptions import ConflictError, NotFoundError, ValidationError
from order_flow_api.app.models import Customer
from order_flow_api.app.repositories import CustomerRepository
from order_flow_api.app.schemas.customer import CustomerCreate


logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Customer with the provided email already exists."


class CustomerService:
    """Service class for managing customers."""

    @classmethod
    async def list_customers(cls, db: Session) -> List[Customer]:
        """Return all customers ordered by id."""
        return CustomerRepository(db).list_all()

    @classmethod
    async def get_customer(cls, db: Session, customer_id: int) -> Customer:
        """Return a customer or raise ``NotFoundError``."""
        customer = CustomerRepository(db).get_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer not found.")
        return customer

    @classmethod
    async def create_customer(cls, db: Session, data: CustomerCreate) -> Customer:
        """Validate ``data`` and insert a new customer.

        The id is generated by the database.  An email already in use
        raises ``ConflictError``, whether the pre-check or the unique
        constraint catches it.
        """
        repo = CustomerRepository(db)
        cls._validate(data)
        if repo.email_exists(data.email):
            raise ConflictError(EMAIL_TAKEN)

        customer = Customer(name=data.name, email=data.email)
        repo.add(customer)
        repo.commit("Failed to create the customer.", conflict_message=EMAIL_TAKEN)
        logger.info("Created customer %s", customer.id)
        return customer

    @classmethod
    async def update_customer(cls, db: Session, customer_id: int, data: CustomerCreate) -> str:
        """Replace the name and email of an existing customer.

        The id never changes.  The email may stay the same; it only
        conflicts when another customer already uses it.
        """
        repo = CustomerRepository(db)
        customer = repo.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer not found.")
        cls._validate(data)
        if repo.email_exists(data.email, exclude_id=customer_id):
            raise ConflictError(EMAIL_TAKEN)

        customer.name = data.name
        customer.email = data.email
        repo.commit("Failed to update the customer.", conflict_message=EMAIL_TAKEN)
        logger.info("Updated customer %s", customer_id)
        return "Customer updated successfully!"

    @classmethod
    async def delete_customer(cls, db: Session, customer_id: int) -> str:
        """Delete a customer.

        Customers that still have orders are protected by the orders
        foreign key; the database rejects the delete and the caller gets
        ``PersistenceError``.
        """
        repo = CustomerRepository(db)
        customer = repo.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer not found.")
        repo.delete(customer)
        repo.commit("Failed to delete the customer.")
        logger.info("Deleted customer %s", customer_id)
        return "Customer deleted successfully."

    @staticmethod
    def _validate(data: CustomerCreate) -> None:
        if not data.name:
            raise ValidationError("Name is required for creating a customer.")
        if not data.email:
            raise ValidationError("Email is required for creating a customer.")
        try:
            validate_email(data.email, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValidationError("Invalid email address format.") from exc
