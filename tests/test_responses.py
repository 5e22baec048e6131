from decimal import Decimal

import pytest

from dineflow.application.responses import (
    CategoryResponse,
    FinishDeliveringResponse,
    MenuForTransaction,
    MenuResponse,
    NextOrder,
    OrderForTransaction,
    TableResponse,
    TransactionResponse,
    UserRegisterResponse,
    UserResponse,
    to_dict,
)


def test_menu_price_is_rendered_as_plain_decimal_string():
    menu = MenuResponse(
        id="m1",
        name="Burger",
        price=Decimal("25000"),
        category=CategoryResponse(id="c1", name="Food"),
    )
    data = to_dict(menu)
    assert data["price"] == "25000"
    assert data["category"] == {"id": "c1", "name": "Food"}
    assert data["name"] == "Burger"


def test_fractional_price_drops_trailing_zeros():
    transaction = TransactionResponse(total_price=Decimal("12500.50"))
    assert to_dict(transaction)["total_price"] == "12500.5"


def test_nested_orders_and_table_are_encoded():
    transaction = TransactionResponse(
        id="t1",
        queue_code="Q0001",
        orders=[OrderForTransaction(MenuForTransaction("m1", "Fries", "15000"), 1)],
        table=TableResponse(id="tb", table_number="A1"),
        order_status="pending",
    )
    data = to_dict(transaction)
    assert data["orders"] == [
        {"menu": {"id": "m1", "name": "Fries", "price": "15000"}, "quantity": 1}
    ]
    assert data["table"]["table_number"] == "A1"
    assert data["is_delayed"] is False


def test_empty_phone_number_is_omitted():
    user = UserResponse(id="u", email="a@example.com", name="Ann", role="customer")
    data = to_dict(user)
    assert "phone_number" not in data
    assert data["role"] == "customer"


def test_present_phone_number_is_kept():
    user = UserRegisterResponse(
        id="u", email="a@example.com", name="Ann", phone_number="ext-line", role="customer"
    )
    assert to_dict(user)["phone_number"] == "ext-line"


def test_finish_delivering_is_empty_object():
    assert to_dict(FinishDeliveringResponse()) == {}


def test_zero_values_compare_equal():
    assert NextOrder() == NextOrder(queue_code="", orders=[])


def test_to_dict_rejects_non_dataclass():
    with pytest.raises(TypeError):
        to_dict({"queue_code": "Q0001"})