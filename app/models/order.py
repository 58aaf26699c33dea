from typing import Dict, Any

from sqlalchemy import Column, Integer, VARCHAR, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base, get_utc_datetime

DEFAULT_ORDER_STATUS = "Pending"


class Order(Base):
    """
    订单数据库模型

    一个订单属于一个客户，并包含至少一个订单项
    """
    __tablename__ = "t_order"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("t_customer.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=get_utc_datetime)
    delivery_date = Column(DateTime, nullable=True)
    status = Column(VARCHAR(50), nullable=False, default=DEFAULT_ORDER_STATUS)
    total_amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    notes = Column(VARCHAR(500), nullable=True)

    customer = relationship("Customer", back_populates="orders")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    def to_dict(self) -> Dict[str, Any]:
        """将订单及其订单项转换为字典表示形式"""
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "delivery_date": self.delivery_date.isoformat() if self.delivery_date else None,
            "status": self.status,
            "total_amount": self.total_amount,
            "notes": self.notes,
            "items": [item.to_dict() for item in self.items],
        }


class OrderItem(Base):
    """
    订单项数据库模型

    小计（subtotal）由数量和单价计算得出，不单独存储
    """
    __tablename__ = "t_order_item"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("t_order.id", ondelete="CASCADE"), nullable=False, index=True)
    product_name = Column(VARCHAR(100), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(12, 2, asdecimal=False), nullable=False)

    order = relationship("Order", back_populates="items")

    @property
    def subtotal(self) -> float:
        return round((self.quantity or 0) * (self.unit_price or 0), 2)

    def to_dict(self) -> Dict[str, Any]:
        """将订单项转换为字典表示形式"""
        return {
            "id": self.id,
            "order_id": self.order_id,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "subtotal": self.subtotal,
        }
