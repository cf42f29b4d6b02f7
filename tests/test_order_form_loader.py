import httpx
import pytest

from core.errors import FetchError
from core.order_form_loader import load_order_form

USERS = [{"_id": "u1", "name": "Ana", "email": "ana@example.com"}]
PRODUCTS = [
    {"_id": "p1", "name": "Ramen", "price": 9.5, "status": "active"},
    {"_id": "p2", "name": "Soda", "price": 2, "status": "inactive"},
]


def test_loads_users_and_active_products(make_api):
    api, recorder = make_api({
        ("GET", "/api/users"): lambda r: httpx.Response(200, json=USERS),
        ("GET", "/api/products"): lambda r: httpx.Response(200, json=PRODUCTS),
    })

    users, products = load_order_form(api)

    assert [u.id for u in users] == ["u1"]
    assert [p.id for p in products] == ["p1"]
    assert sorted(r.url.path for r in recorder.requests) == ["/api/products", "/api/users"]


def test_one_failure_fails_the_whole_load(make_api):
    api, _ = make_api({
        ("GET", "/api/users"): lambda r: httpx.Response(200, json=USERS),
        ("GET", "/api/products"): lambda r: httpx.Response(500, json={"message": "catalog offline"}),
    })

    with pytest.raises(FetchError) as exc:
        load_order_form(api)
    assert "products: catalog offline" in exc.value.message
    assert "users" not in exc.value.message


def test_both_failures_are_reported_together(make_api):
    api, _ = make_api({})

    with pytest.raises(FetchError) as exc:
        load_order_form(api)
    assert "users:" in exc.value.message
    assert "products:" in exc.value.message


def test_malformed_product_row_fails_the_load(make_api):
    api, _ = make_api({
        ("GET", "/api/users"): lambda r: httpx.Response(200, json=USERS),
        ("GET", "/api/products"): lambda r: httpx.Response(200, json=[{"_id": "p1", "price": "abc"}]),
    })

    with pytest.raises(FetchError) as exc:
        load_order_form(api)
    assert "products: Unexpected response from /products" in exc.value.message
