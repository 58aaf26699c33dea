"""
API Dependencies

Provides dependency injection for repositories and database sessions.
This centralizes repository creation for API endpoints.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.repositories import CustomerRepository, OrderRepository


def get_customer_repository(db: Session = Depends(get_db)) -> CustomerRepository:
    """
    Get Customer Repository instance bound to the request's session

    Returns:
        CustomerRepository: Configured customer repository
    """
    return CustomerRepository(db=db)


def get_order_repository(db: Session = Depends(get_db)) -> OrderRepository:
    """
    Get Order Repository instance bound to the request's session

    Returns:
        OrderRepository: Configured order repository
    """
    return OrderRepository(db=db)
