"""
Data Access Layer

One repository per aggregate. Each wraps a SQLAlchemy session and returns
a Result instead of raising for expected failures.
"""

from app.repositories.customer_repository import CustomerRepository
from app.repositories.order_repository import OrderRepository

__all__ = ["CustomerRepository", "OrderRepository"]
