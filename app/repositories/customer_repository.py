"""
Data access layer for customers.
All queries against the customer table live here.
"""
import logging
from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.result import Result
from app.models import Customer

logger = logging.getLogger(__name__)

# Columns kept from the stored row when a customer is overwritten
IMMUTABLE_COLUMNS = {"id", "registered_at"}


class CustomerRepository:
    """Repository for CRUD operations on customers."""

    def __init__(self, db: Session):
        self.db = db

    # ── READ ──────────────────────────────────────────────

    def list(
        self,
        id: Optional[int] = None,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Result[List[Customer]]:
        """
        List customers, optionally filtered.

        Args:
            id: Exact customer id; ignored unless greater than zero.
            name: Substring of the customer name; ignored when blank.
            email: Substring of the email address; ignored when blank.

        Returns:
            Result with the matching customers ordered by id.
        """
        query = self.db.query(Customer)

        if id is not None and id > 0:
            query = query.filter(Customer.id == id)

        if name and name.strip():
            query = query.filter(Customer.name.contains(name, autoescape=True))

        if email and email.strip():
            query = query.filter(Customer.email.contains(email, autoescape=True))

        return Result.ok(query.order_by(Customer.id).all())

    def get_by_id(self, id: int) -> Result[Customer]:
        """Fetch a single customer by primary key."""
        if id <= 0:
            return Result.fail("ID must be greater than zero.")

        customer = self.db.get(Customer, id)
        if customer is None:
            return Result.fail(f"No customer found with ID {id}.")

        return Result.ok(customer)

    # ── CREATE ────────────────────────────────────────────

    def create(self, customer: Optional[Customer]) -> Result[str]:
        """
        Insert a new customer.

        The passed object is refreshed after the commit, so its generated
        id and registration timestamp are available to the caller.
        """
        if customer is None:
            return Result.fail("Customer cannot be null.")

        if not customer.name or not customer.name.strip():
            return Result.fail("Customer name is required.")

        try:
            self.db.add(customer)
            self.db.commit()
            self.db.refresh(customer)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save customer: {e}")
            return Result.fail(f"Error saving customer: {e}")

        logger.info(f"Added customer #{customer.id}")
        return Result.ok("Customer saved successfully.")

    # ── UPDATE ────────────────────────────────────────────

    def update(self, customer: Optional[Customer]) -> Result[str]:
        """
        Overwrite an existing customer with the incoming values.

        Every column except the primary key and the registration timestamp
        is copied from ``customer``, including ones left empty.
        """
        if customer is None:
            return Result.fail("Customer cannot be null.")

        if customer.id is None or customer.id <= 0:
            return Result.fail("Customer ID must be valid.")

        if not customer.name or not customer.name.strip():
            return Result.fail("Customer name is required.")

        existing = self.db.get(Customer, customer.id)
        if existing is None:
            return Result.fail("No customer found with the specified ID.")

        try:
            for column in inspect(Customer).column_attrs:
                if column.key not in IMMUTABLE_COLUMNS:
                    setattr(existing, column.key, getattr(customer, column.key))
            self.db.commit()
            self.db.refresh(existing)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update customer #{customer.id}: {e}")
            return Result.fail(f"Error updating customer: {e}")

        logger.info(f"Updated customer #{customer.id}")
        return Result.ok("Customer updated successfully.")

    # ── DELETE ────────────────────────────────────────────

    def delete(self, id: int) -> Result[str]:
        """Delete a customer, and with it the customer's orders."""
        if id <= 0:
            return Result.fail("ID must be greater than zero.")

        customer = self.db.get(Customer, id)
        if customer is None:
            return Result.fail(f"No customer found with ID {id}.")

        try:
            self.db.delete(customer)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete customer #{id}: {e}")
            return Result.fail(f"Error deleting customer: {e}")

        logger.info(f"Deleted customer #{id}")
        return Result.ok("Customer deleted successfully.")
