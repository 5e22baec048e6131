import pytest

from dineflow.application.requests import (
    CalculateTotalPriceRequest,
    FinishDeliveringRequest,
    OrderItem,
    PaymentNotification,
    RequestValidationError,
    StartCookingRequest,
    TransactionCreateRequest,
    UpdateMenuAvailabilityRequest,
    UserLoginRequest,
    UserRegisterRequest,
)

PASSWORD = "password"


def test_availability_is_required():
    with pytest.raises(RequestValidationError) as info:
        UpdateMenuAvailabilityRequest(is_available=None)
    assert info.value.field == "is_available"


def test_availability_false_is_accepted():
    assert UpdateMenuAvailabilityRequest(is_available=False).is_available is False


def test_order_item_keeps_zero_quantity_for_pricing():
    item = OrderItem(menu_id="m1", quantity=0)
    assert item.quantity == 0


def test_order_item_requires_menu_id():
    with pytest.raises(RequestValidationError) as info:
        OrderItem(menu_id="", quantity=1)
    assert info.value.rule == "required"


def test_transaction_create_converts_mappings_to_items():
    req = TransactionCreateRequest(table_id="t1", orders=[{"menu_id": "m1", "quantity": 2}])
    assert req.orders == [OrderItem("m1", 2)]


def test_transaction_create_requires_table():
    with pytest.raises(RequestValidationError) as info:
        TransactionCreateRequest(table_id="", orders=[])
    assert info.value.field == "table_id"


def test_calculate_total_price_requires_orders():
    with pytest.raises(RequestValidationError):
        CalculateTotalPriceRequest(orders=None)
    assert CalculateTotalPriceRequest(orders=[]).orders == []


@pytest.mark.parametrize("cls", [StartCookingRequest, FinishDeliveringRequest])
def test_queue_code_requests_require_code(cls):
    with pytest.raises(RequestValidationError):
        cls(queue_code="")
    assert cls(queue_code="Q0001").queue_code == "Q0001"


def test_register_validates_email():
    with pytest.raises(RequestValidationError) as info:
        UserRegisterRequest(email="not-an-email", password=PASSWORD, name="Ann")
    assert info.value.rule == "email"


def test_register_validates_password_length():
    short = "secret"
    with pytest.raises(RequestValidationError) as info:
        UserRegisterRequest(email="ann@example.com", password=short, name="Ann")
    assert info.value.field == "password"


def test_register_validates_name_and_phone():
    with pytest.raises(RequestValidationError) as info:
        UserRegisterRequest(email="ann@example.com", password=PASSWORD, name="A")
    assert info.value.field == "name"
    with pytest.raises(RequestValidationError) as info:
        UserRegisterRequest(email="ann@example.com", password=PASSWORD, name="Ann", phone_number="123")
    assert info.value.field == "phone_number"


def test_register_accepts_valid_data():
    req = UserRegisterRequest(email="ann@example.com", password=PASSWORD, name="Ann")
    assert req.phone_number == ""
    assert "password" not in repr(req)


def test_login_requires_email():
    with pytest.raises(RequestValidationError):
        UserLoginRequest(email="", password=PASSWORD)


def test_payment_notification_from_dict_ignores_unknown_keys():
    note = PaymentNotification.from_dict(
        {"order_id": "abc", "transaction_status": "settlement", "extra": 1}
    )
    assert note.order_id == "abc"
    assert note.transaction_status == "settlement"
    assert note.currency == ""


def test_payment_notification_rejects_non_string():
    with pytest.raises(RequestValidationError) as info:
        PaymentNotification.from_dict({"gross_amount": 100})
    assert info.value.field == "gross_amount"