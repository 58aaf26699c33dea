from app.models.customer import Customer
from app.models.order import Order, OrderItem, DEFAULT_ORDER_STATUS

__all__ = ["Customer", "Order", "OrderItem", "DEFAULT_ORDER_STATUS"]
