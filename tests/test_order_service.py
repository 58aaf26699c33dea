from datetime import datetime, timedelta

import pytest

from app.db.base import get_utc_datetime
from app.models import Customer, Order
from app.services import OrderService


def test_create_order_binds_customer_and_timestamp():
    customer = Customer(id=1, name="Juan", email="juan@test.com")

    order = OrderService.create_order(customer)

    assert order.customer_id == customer.id
    assert order.status == "Pending"
    assert order.items == []
    assert order.created_at <= get_utc_datetime()
    assert get_utc_datetime() - order.created_at < timedelta(seconds=5)


def test_cancel_order_sets_cancelled_status():
    order = Order(id=3, customer_id=1, status="Pending")

    OrderService.cancel_order(order)

    assert order.status == "Cancelled"


def test_cancel_delivered_order_is_rejected():
    order = Order(id=4, customer_id=1, status="Delivered", delivery_date=datetime(2024, 1, 1))

    with pytest.raises(ValueError):
        OrderService.cancel_order(order)

    assert order.status == "Delivered"
