from core.api_client import ApiClient
from models.order import PersistedOrder

def create_order(api: ApiClient, payload: dict) -> PersistedOrder:
    """
    Send a composed order to POST /orders.

    `payload` is {"userId": ..., "items": [{"productId": ..., "quantity": ...}]}.
    Raises ApiError on any failure; the caller keeps the draft for a retry.
    Once the server has accepted the order, an unreadable body still counts
    as success so the draft is not submitted twice.
    """
    data = api.post("/orders", json=payload)
    if not isinstance(data, dict):
        data = {}
    try:
        return PersistedOrder.from_dict(data)
    except (ValueError, ArithmeticError, TypeError, AttributeError) as e:
        print(f"⚠️ Order created but response could not be read: {e}")
        return PersistedOrder(id=str(data.get("_id", "")), user=None)

def order_gateway(api: ApiClient):
    """Bind create_order to a client, as the callable an OrderComposer submits to."""
    return lambda payload: create_order(api, payload)
