"""
Services Layer

Business rules that sit above the repositories and do not touch the
database directly.
"""

from app.services.order_service import OrderService

__all__ = ["OrderService"]
