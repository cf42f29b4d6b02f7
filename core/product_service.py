from decimal import Decimal

from core.api_client import ApiClient, fetch_all
from core.errors import ApiError
from models.product import Product, STATUSES

def get_all_products(api: ApiClient):
    """All products, active and inactive (raises FetchError)"""
    return fetch_all(api, "/products", Product.from_dict)

def get_active_products(api: ApiClient):
    """Only products that can be put in an order"""
    return [p for p in get_all_products(api) if p.is_active]

def _product_payload(name: str, category_id: str, price: Decimal, status: str) -> dict:
    if status not in STATUSES:
        raise ValueError(f"Unknown product status: {status}")
    return {"name": name, "categoryId": category_id, "price": float(price), "status": status}

def create_product(api: ApiClient, name: str, category_id: str, price: Decimal, status: str = "active"):
    """Returns (product or None, message)"""
    try:
        data = api.post("/products", json=_product_payload(name, category_id, price, status))
        return Product.from_dict(data or {}), "Product created successfully"
    except ApiError as e:
        return None, e.message or "Failed to save product"

def update_product(api: ApiClient, product_id: str, name: str, category_id: str, price: Decimal, status: str):
    """Returns (success: bool, message: str)"""
    try:
        api.put(f"/products/{product_id}", json=_product_payload(name, category_id, price, status))
        return True, "Product updated successfully"
    except ApiError as e:
        return False, e.message or "Failed to save product"

def delete_product(api: ApiClient, product_id: str):
    """Returns (success: bool, message: str)"""
    try:
        api.delete(f"/products/{product_id}")
        return True, "Product deleted successfully"
    except ApiError as e:
        return False, e.message or "Failed to delete product"
