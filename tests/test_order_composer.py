"""
Order composer tests: draft bookkeeping, totals, validation and the
submit state machine.
"""
from decimal import Decimal
import threading

import pytest

from core.errors import (
    ApiError,
    DuplicateProductError,
    EmptyOrderError,
    IndexOutOfRangeError,
    InvalidQuantityError,
    MissingUserError,
    NoProductSelectedError,
    OrderSubmissionError,
    SubmissionInProgressError,
    UnknownProductError,
)
from core.order_composer import ComposerState, OrderComposer, parse_quantity
from models.order import PersistedOrder
from models.product import Product
from models.user import User


def product(pid, price, status="active", name=None):
    return Product(id=pid, name=name or pid.upper(), price=Decimal(str(price)), status=status)


CATALOG = [
    product("p1", "10.00"),
    product("p2", "2.50"),
    product("p3", "7.25"),
    product("off", "99.00", status="inactive"),
]
USERS = [User(id="u1", name="Ana", email="ana@example.com")]


class FakeGateway:
    def __init__(self, fail_with=None):
        self.fail_with = fail_with
        self.payloads = []

    def __call__(self, payload):
        self.payloads.append(payload)
        if self.fail_with is not None:
            raise self.fail_with
        return PersistedOrder(id="o1", user=None, total_amount=Decimal("30.00"))


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def composer(gateway):
    return OrderComposer(CATALOG, USERS, gateway)


def test_new_composer_is_empty(composer):
    assert composer.state == ComposerState.EMPTY
    assert composer.items == []
    assert composer.compute_total() == 0


def test_inactive_products_are_not_offered(composer):
    assert [p.id for p in composer.products] == ["p1", "p2", "p3"]
    with pytest.raises(UnknownProductError):
        composer.add_line_item("off")


def test_total_is_sum_of_quantity_times_price(composer):
    composer.add_line_item("p1")
    composer.add_line_item("p2")
    composer.add_line_item("p3")
    composer.update_line_item(1, "quantity", 4)
    composer.update_line_item(2, "quantity", 2)

    assert composer.compute_total() == Decimal("10.00") + Decimal("2.50") * 4 + Decimal("7.25") * 2
    assert composer.line_total(1) == Decimal("10.00")


def test_added_item_starts_with_quantity_one(composer):
    item = composer.add_line_item("p2")
    assert item.quantity == 1
    assert composer.state == ComposerState.EDITING


def test_duplicate_product_is_rejected_and_draft_unchanged(composer):
    composer.add_line_item("p1")
    before = list(composer.items)

    with pytest.raises(DuplicateProductError):
        composer.add_line_item("p1")

    assert composer.items == before


@pytest.mark.parametrize("empty", ["", None])
def test_add_without_product_fails(composer, empty):
    with pytest.raises(NoProductSelectedError):
        composer.add_line_item(empty)
    assert len(composer.items) == 0


def test_available_products_excludes_items_in_draft(composer):
    composer.add_line_item("p1")
    assert [p.id for p in composer.available_products()] == ["p2", "p3"]


@pytest.mark.parametrize("bad", [0, -2, "abc", "", 1.5, None, True])
def test_invalid_quantity_is_rejected(composer, bad):
    composer.add_line_item("p1")
    with pytest.raises(InvalidQuantityError):
        composer.update_line_item(0, "quantity", bad)
    assert composer.items[0].quantity == 1


def test_numeric_string_quantity_is_accepted(composer):
    composer.add_line_item("p1")
    composer.update_line_item(0, "quantity", " 5 ")
    assert composer.items[0].quantity == 5
    assert parse_quantity("12") == 12


def test_update_product_keeps_quantity(composer):
    composer.add_line_item("p1")
    composer.update_line_item(0, "quantity", 3)
    composer.update_line_item(0, "product_id", "p2")

    assert composer.items[0].product_id == "p2"
    assert composer.items[0].quantity == 3


def test_update_product_to_same_product_is_allowed(composer):
    composer.add_line_item("p1")
    composer.update_line_item(0, "product_id", "p1")
    assert composer.items[0].product_id == "p1"


def test_update_product_to_one_already_in_draft_fails(composer):
    composer.add_line_item("p1")
    composer.add_line_item("p2")
    with pytest.raises(DuplicateProductError):
        composer.update_line_item(1, "product_id", "p1")
    assert composer.items[1].product_id == "p2"


def test_update_unknown_field_fails(composer):
    composer.add_line_item("p1")
    with pytest.raises(ValueError):
        composer.update_line_item(0, "price", 3)


@pytest.mark.parametrize("index", [-1, 1, 5, "0"])
def test_bad_index_is_out_of_range(composer, index):
    composer.add_line_item("p1")
    with pytest.raises(IndexOutOfRangeError):
        composer.remove_line_item(index)
    with pytest.raises(IndexOutOfRangeError):
        composer.update_line_item(index, "quantity", 2)
    assert len(composer.items) == 1


def test_removed_item_no_longer_counts(composer):
    composer.add_line_item("p1")
    composer.add_line_item("p2")
    composer.remove_line_item(0)

    assert [i.product_id for i in composer.items] == ["p2"]
    assert composer.compute_total() == Decimal("2.50")

    composer.remove_line_item(0)
    assert composer.compute_total() == 0
    assert composer.state == ComposerState.EMPTY


def test_item_missing_from_new_catalog_counts_as_zero(composer):
    composer.add_line_item("p1")
    composer.add_line_item("p2")

    composer.replace_catalog([product("p2", "3.00")])

    assert len(composer.items) == 2
    assert composer.compute_total() == Decimal("3.00")
    assert composer.line_total(0) == 0


def test_total_uses_current_catalog_price(composer):
    composer.add_line_item("p1")
    composer.update_line_item(0, "quantity", 2)
    composer.replace_catalog([product("p1", "12.00")])
    assert composer.compute_total() == Decimal("24.00")


def test_validate_requires_user_then_items(composer):
    with pytest.raises(MissingUserError):
        composer.validate()
    composer.select_user("u1")
    with pytest.raises(EmptyOrderError):
        composer.validate()
    composer.add_line_item("p1")
    composer.validate()


def test_submit_without_user_makes_no_call(composer, gateway):
    composer.add_line_item("p1")
    with pytest.raises(MissingUserError):
        composer.submit()
    assert gateway.payloads == []
    assert composer.state == ComposerState.EDITING


def test_submit_without_items_makes_no_call(composer, gateway):
    composer.select_user("u1")
    with pytest.raises(EmptyOrderError):
        composer.submit()
    assert gateway.payloads == []


def test_full_order_scenario(composer, gateway):
    composer.select_user("u1")
    composer.add_line_item("p1")
    composer.update_line_item(0, "quantity", 3)
    assert composer.compute_total() == Decimal("30.00")

    order = composer.submit()

    assert gateway.payloads == [{"userId": "u1", "items": [{"productId": "p1", "quantity": 3}]}]
    assert order.id == "o1"
    assert composer.items == []
    assert composer.user_id == ""
    assert composer.compute_total() == 0
    assert composer.state == ComposerState.EMPTY


def test_failed_submit_keeps_draft_and_can_be_retried(composer, gateway):
    composer.select_user("u1")
    composer.add_line_item("p1")
    composer.add_line_item("p3")
    gateway.fail_with = ApiError("Product out of range", 400)

    with pytest.raises(OrderSubmissionError) as exc:
        composer.submit()

    assert exc.value.message == "Product out of range"
    assert composer.state == ComposerState.EDITING
    assert composer.last_error == "Product out of range"
    assert composer.user_id == "u1"
    assert [i.product_id for i in composer.items] == ["p1", "p3"]

    gateway.fail_with = None
    composer.submit()

    assert len(gateway.payloads) == 2
    assert composer.state == ComposerState.EMPTY
    assert composer.last_error is None


def test_gateway_error_without_message_uses_generic_text(composer, gateway):
    composer.select_user("u1")
    composer.add_line_item("p1")
    gateway.fail_with = ApiError("", 500)

    with pytest.raises(OrderSubmissionError) as exc:
        composer.submit()
    assert exc.value.message == "Failed to create order"


def test_unexpected_gateway_failure_returns_to_editing(composer, gateway):
    composer.select_user("u1")
    composer.add_line_item("p1")
    gateway.fail_with = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        composer.submit()
    assert composer.state == ComposerState.EDITING
    assert len(composer.items) == 1


def test_second_submit_while_in_flight_is_rejected():
    started = threading.Event()
    release = threading.Event()
    calls = []

    def slow_gateway(payload):
        calls.append(payload)
        started.set()
        release.wait(timeout=5)
        return PersistedOrder(id="o1", user=None)

    composer = OrderComposer(CATALOG, USERS, slow_gateway)
    composer.select_user("u1")
    composer.add_line_item("p1")

    worker = threading.Thread(target=composer.submit)
    worker.start()
    assert started.wait(timeout=5)

    try:
        assert composer.state == ComposerState.SUBMITTING
        with pytest.raises(SubmissionInProgressError):
            composer.submit()
        with pytest.raises(SubmissionInProgressError):
            composer.add_line_item("p2")
    finally:
        release.set()
        worker.join(timeout=5)

    assert len(calls) == 1
    assert composer.state == ComposerState.EMPTY


def test_cancel_discards_draft(composer):
    composer.select_user("u1")
    composer.add_line_item("p1")
    composer.cancel()
    assert composer.state == ComposerState.EMPTY
    assert composer.items == []
    assert composer.user_id == ""


def test_successful_mutation_clears_last_error(composer, gateway):
    composer.select_user("u1")
    composer.add_line_item("p1")
    gateway.fail_with = ApiError("nope", 500)
    with pytest.raises(OrderSubmissionError):
        composer.submit()

    composer.update_line_item(0, "quantity", 2)
    assert composer.last_error is None
    assert composer.state == ComposerState.EDITING


def test_user_lookup(composer):
    assert composer.user("u1").name == "Ana"
    assert composer.user("missing") is None


def test_replacing_catalog_clears_last_error(composer, gateway):
    composer.select_user("u1")
    composer.add_line_item("p1")
    gateway.fail_with = ApiError("Price changed", 409)
    with pytest.raises(OrderSubmissionError):
        composer.submit()

    composer.replace_catalog([product("p1", "11.00")])

    assert composer.last_error is None
    assert composer.state == ComposerState.EDITING
