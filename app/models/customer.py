from typing import Dict, Any

from sqlalchemy import Column, Integer, VARCHAR, DateTime
from sqlalchemy.orm import relationship

from app.db.base import Base, get_utc_datetime


class Customer(Base):
    """
    客户数据库模型

    存储客户的基本信息：姓名、邮箱以及注册时间
    """
    __tablename__ = "t_customer"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(VARCHAR(100), nullable=False)
    email = Column(VARCHAR(150), nullable=False)
    registered_at = Column(DateTime, nullable=False, default=get_utc_datetime)

    # 删除客户时一并删除其订单
    orders = relationship(
        "Order",
        back_populates="customer",
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> Dict[str, Any]:
        """将客户转换为字典表示形式"""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "registered_at": self.registered_at.isoformat() if self.registered_at else None,
        }
