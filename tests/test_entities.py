"""
实体校验测试

覆盖客户、订单、订单项的字段约束以及订单项小计的计算
"""
from app.models import OrderItem
from app.schemas.customer import CustomerCreate
from app.schemas.order import OrderCreate, OrderItemCreate
from app.utils.validation import validate_model


def valid_order(**overrides):
    data = {
        "customer_id": 1,
        "total_amount": 1501.00,
        "items": [{"product_name": "Laptop", "quantity": 2, "unit_price": 750.50}],
    }
    data.update(overrides)
    return data


# ── Customer ──────────────────────────────────────────────

def test_customer_valid():
    assert validate_model(CustomerCreate, {"name": "Juan Pérez", "email": "juan.perez@correo.com"}) == []


def test_customer_without_name_is_invalid():
    assert "name" in validate_model(CustomerCreate, {"name": "", "email": "cliente@correo.com"})


def test_customer_without_email_is_invalid():
    assert "email" in validate_model(CustomerCreate, {"name": "Ana García", "email": ""})


def test_customer_with_malformed_email_is_invalid():
    assert "email" in validate_model(CustomerCreate, {"name": "Carlos Ruiz", "email": "correo-sin-arroba"})


def test_customer_name_longer_than_100_is_invalid():
    assert "name" in validate_model(CustomerCreate, {"name": "A" * 101, "email": "cliente@correo.com"})


def test_customer_email_longer_than_150_is_invalid():
    email = "ana@" + "a" * 60 + "." + "b" * 60 + "." + "c" * 30 + ".com"
    assert "email" in validate_model(CustomerCreate, {"name": "Ana", "email": email})


# ── Order ─────────────────────────────────────────────────

def test_order_valid():
    assert validate_model(OrderCreate, valid_order()) == []


def test_order_status_defaults_to_pending():
    assert OrderCreate.model_validate(valid_order()).status == "Pending"


def test_order_without_items_is_invalid():
    assert "items" in validate_model(OrderCreate, valid_order(items=[]))


def test_order_total_must_be_positive():
    assert "total_amount" in validate_model(OrderCreate, valid_order(total_amount=0))


def test_order_status_longer_than_50_is_invalid():
    assert "status" in validate_model(OrderCreate, valid_order(status="X" * 51))


def test_order_notes_longer_than_500_is_invalid():
    assert "notes" in validate_model(OrderCreate, valid_order(notes="n" * 501))


def test_order_without_customer_is_invalid():
    data = valid_order()
    del data["customer_id"]
    assert "customer_id" in validate_model(OrderCreate, data)


def test_order_reports_nested_item_errors():
    errors = validate_model(OrderCreate, valid_order(items=[{"product_name": "Mouse", "quantity": 0, "unit_price": 10}]))
    assert errors == ["items.0.quantity"]


# ── OrderItem ─────────────────────────────────────────────

def test_order_item_valid():
    assert validate_model(OrderItemCreate, {"product_name": "Mouse", "quantity": 1, "unit_price": 25.0}) == []


def test_order_item_quantity_must_be_at_least_one():
    assert "quantity" in validate_model(OrderItemCreate, {"product_name": "Mouse", "quantity": 0, "unit_price": 25.0})


def test_order_item_unit_price_must_be_positive():
    assert "unit_price" in validate_model(OrderItemCreate, {"product_name": "Mouse", "quantity": 1, "unit_price": 0})


def test_order_item_product_name_is_required():
    assert "product_name" in validate_model(OrderItemCreate, {"product_name": "", "quantity": 1, "unit_price": 1})


def test_order_item_subtotal():
    item = OrderItem(product_name="Monitor", quantity=2, unit_price=750.50)
    assert item.subtotal == 1501.00


def test_order_item_subtotal_is_rounded_to_cents():
    item = OrderItem(product_name="Cable", quantity=3, unit_price=0.1)
    assert item.subtotal == 0.3


def test_order_item_schema_subtotal_matches_model():
    schema = OrderItemCreate(product_name="Monitor", quantity=4, unit_price=19.99)
    assert schema.subtotal == schema.to_model().subtotal == 79.96
