import os

os.environ.setdefault("DATABASE_URI", "sqlite://")
os.environ.setdefault("CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import build_engine
from app.db.init_db import create_tables
from app.db.session import get_db
from app.main import app
from app.models import Customer, Order, OrderItem


@pytest.fixture()
def engine():
    # 所有连接共享同一个内存数据库
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    create_tables(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture()
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_customer(db):
    def _make(name="Juan", email="juan@mail.com"):
        customer = Customer(name=name, email=email)
        db.add(customer)
        db.commit()
        db.refresh(customer)
        return customer
    return _make


@pytest.fixture()
def make_order(db):
    def _make(customer, status="Pending", delivery_date=None, items=None):
        if items is None:
            items = [OrderItem(product_name="Laptop", quantity=2, unit_price=750.50)]
        order = Order(
            customer_id=customer.id,
            status=status,
            delivery_date=delivery_date,
            total_amount=sum(item.subtotal for item in items),
            items=items,
        )
        db.add(order)
        db.commit()
        db.refresh(order)
        return order
    return _make
