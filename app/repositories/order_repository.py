"""
Data access layer for orders and their items.
All queries against the order tables live here.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.core.result import Result
from app.models import Customer, Order, OrderItem

logger = logging.getLogger(__name__)

# Columns kept from the stored row when an order is overwritten
IMMUTABLE_COLUMNS = {"id", "created_at"}


class OrderRepository:
    """Repository for CRUD operations on orders."""

    def __init__(self, db: Session):
        self.db = db

    # ── READ ──────────────────────────────────────────────

    def list(
        self,
        customer_id: Optional[int] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        status: Optional[str] = None,
    ) -> Result[List[Order]]:
        """
        List orders, optionally filtered.

        Args:
            customer_id: Only orders placed by this customer.
            date_from: Delivery date lower bound (inclusive).
            date_to: Delivery date upper bound (inclusive).
            status: Exact status; ignored when blank.

        Returns:
            Result with the matching orders, items loaded, ordered by id.
        """
        query = self.db.query(Order).options(
            selectinload(Order.items),
            selectinload(Order.customer),
        )

        if customer_id is not None:
            query = query.filter(Order.customer_id == customer_id)

        if date_from is not None:
            query = query.filter(Order.delivery_date >= date_from)

        if date_to is not None:
            query = query.filter(Order.delivery_date <= date_to)

        if status and status.strip():
            query = query.filter(Order.status == status)

        return Result.ok(query.order_by(Order.id).all())

    def get_by_id(self, id: int) -> Result[Order]:
        """Fetch a single order with its items."""
        if id <= 0:
            return Result.fail("ID must be greater than zero.")

        order = (
            self.db.query(Order)
            .options(selectinload(Order.items), selectinload(Order.customer))
            .filter(Order.id == id)
            .first()
        )
        if order is None:
            return Result.fail(f"No order found with ID {id}.")

        return Result.ok(order)

    # ── CREATE ────────────────────────────────────────────

    def create(self, order: Optional[Order]) -> Result[str]:
        """
        Insert a new order together with its items.

        The order must hold at least one item and reference an existing
        customer. The passed object is refreshed after the commit.
        """
        if order is None or not order.items:
            return Result.fail("Order must contain at least one item.")

        if not self._customer_exists(order.customer_id):
            return Result.fail(f"No customer found with ID {order.customer_id}.")

        try:
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create order: {e}")
            return Result.fail(f"Error creating order: {e}")

        logger.info(f"Added order #{order.id} for customer {order.customer_id}")
        return Result.ok("Order created successfully.")

    # ── UPDATE ────────────────────────────────────────────

    def update(self, order: Optional[Order]) -> Result[str]:
        """
        Overwrite an existing order with the incoming values.

        Every column except the primary key and the creation timestamp is
        copied from ``order``, and the stored items are replaced by the
        incoming ones.
        """
        if order is None or order.id is None or order.id <= 0:
            return Result.fail("Order is invalid.")

        if not self._customer_exists(order.customer_id):
            return Result.fail(f"No customer found with ID {order.customer_id}.")

        existing = self.db.get(Order, order.id)
        if existing is None:
            return Result.fail(f"No order found with ID {order.id}.")

        try:
            if existing is not order:
                # 新建订单项，避免传入的临时订单经由 backref 级联进会话
                items = [
                    OrderItem(product_name=item.product_name, quantity=item.quantity, unit_price=item.unit_price)
                    for item in order.items
                ]
                for column in inspect(Order).column_attrs:
                    if column.key not in IMMUTABLE_COLUMNS:
                        setattr(existing, column.key, getattr(order, column.key))
                existing.items = items
            self.db.commit()
            self.db.refresh(existing)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update order #{order.id}: {e}")
            return Result.fail(f"Error updating order: {e}")

        logger.info(f"Updated order #{order.id}")
        return Result.ok("Order updated successfully.")

    # ── DELETE ────────────────────────────────────────────

    def delete(self, id: int) -> Result[str]:
        """Delete an order and its items."""
        if id <= 0:
            return Result.fail("ID must be greater than zero.")

        order = self.db.get(Order, id)
        if order is None:
            return Result.fail(f"No order found with ID {id}.")

        try:
            self.db.delete(order)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete order #{id}: {e}")
            return Result.fail(f"Error deleting order: {e}")

        logger.info(f"Deleted order #{id}")
        return Result.ok("Order deleted successfully.")

    # ── HELPERS ───────────────────────────────────────────

    def _customer_exists(self, customer_id: Optional[int]) -> bool:
        if customer_id is None:
            return False
        return self.db.query(Customer.id).filter(Customer.id == customer_id).first() is not None
