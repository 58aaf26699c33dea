from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models import Order, OrderItem, DEFAULT_ORDER_STATUS


class OrderItemCreate(BaseModel):
    """订单项请求模型"""
    product_name: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., gt=0)

    @property
    def subtotal(self) -> float:
        return round(self.quantity * self.unit_price, 2)

    def to_model(self) -> OrderItem:
        return OrderItem(
            product_name=self.product_name,
            quantity=self.quantity,
            unit_price=self.unit_price,
        )


class OrderCreate(BaseModel):
    """
    订单创建请求模型

    用于API接口创建订单的请求数据，订单至少包含一个订单项
    """
    customer_id: int
    delivery_date: Optional[datetime] = None
    status: str = Field(DEFAULT_ORDER_STATUS, min_length=1, max_length=50)
    total_amount: float = Field(..., gt=0)
    notes: Optional[str] = Field(None, max_length=500)
    items: List[OrderItemCreate] = Field(..., min_length=1)

    def to_model(self) -> Order:
        return Order(
            customer_id=self.customer_id,
            delivery_date=self.delivery_date,
            status=self.status,
            total_amount=self.total_amount,
            notes=self.notes,
            items=[item.to_model() for item in self.items],
        )


class OrderUpdate(OrderCreate):
    """
    订单更新请求模型

    整体覆盖订单字段，并以请求中的订单项替换原有订单项
    """
    id: int

    def to_model(self) -> Order:
        order = super().to_model()
        order.id = self.id
        return order
