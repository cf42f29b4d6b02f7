from concurrent.futures import ThreadPoolExecutor

from core.api_client import ApiClient
from core.errors import ApiError, FetchError
from core.product_service import get_active_products
from core.user_service import get_all_users

def load_order_form(api: ApiClient):
    """
    Fetch the directory and the catalog for the order form.

    Both requests run at the same time and both must succeed: any failure
    is reported as one FetchError and nothing partial is returned.
    Returns (users, active_products).
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        users_future = pool.submit(get_all_users, api)
        products_future = pool.submit(get_active_products, api)

        failures = []
        results = {}
        for name, future in (("users", users_future), ("products", products_future)):
            try:
                results[name] = future.result()
            except ApiError as e:
                failures.append(f"{name}: {e.message}")

    if failures:
        print("Order form load failed:", "; ".join(failures))
        raise FetchError("Failed to load data (" + "; ".join(failures) + ")")

    return results["users"], results["products"]
