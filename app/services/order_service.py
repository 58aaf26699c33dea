import logging

from app.db.base import get_utc_datetime
from app.models import Customer, Order, DEFAULT_ORDER_STATUS

logger = logging.getLogger(__name__)

CANCELLED_STATUS = "Cancelled"
DELIVERED_STATUS = "Delivered"


class OrderService:
    """
    订单业务逻辑

    不直接访问数据库，持久化由 OrderRepository 负责
    """

    @staticmethod
    def create_order(customer: Customer) -> Order:
        """为客户创建一个新的（未持久化的）订单，状态为 Pending"""
        return Order(
            customer_id=customer.id,
            created_at=get_utc_datetime(),
            status=DEFAULT_ORDER_STATUS,
            items=[],
        )

    @staticmethod
    def cancel_order(order: Order) -> Order:
        """
        取消订单

        Raises:
            ValueError: 订单已送达时不能取消
        """
        if order.status == DELIVERED_STATUS:
            raise ValueError(f"Order {order.id} has already been delivered and cannot be cancelled.")

        order.status = CANCELLED_STATUS
        logger.info(f"Cancelled order #{order.id}")
        return order


order_service = OrderService()
