from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from core.references import Reference, parse_reference
from models.product import to_decimal
from models.user import User


@dataclass
class LineItem:
    """One product + quantity pairing in a draft order."""
    product_id: str
    quantity: int = 1

    def to_payload(self) -> dict:
        return {"productId": self.product_id, "quantity": self.quantity}


@dataclass
class OrderLine:
    """A line of a persisted order, priced by the server."""
    product_id: str
    quantity: int
    price: Decimal

    @classmethod
    def from_dict(cls, data: dict) -> "OrderLine":
        product = data.get("productId")
        # the server may populate the product; only its id matters here
        if isinstance(product, dict):
            product = product.get("_id", "")
        return cls(
            product_id=str(product or ""),
            quantity=int(data.get("quantity", 0)),
            price=to_decimal(data.get("price")),
        )


@dataclass
class PersistedOrder:
    id: str
    user: Optional[Reference]
    items: List[OrderLine] = field(default_factory=list)
    total_amount: Decimal = Decimal("0")
    order_date: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PersistedOrder":
        return cls(
            id=str(data.get("_id", "")),
            user=parse_reference(data.get("userId"), User.from_dict),
            items=[OrderLine.from_dict(item) for item in data.get("items", [])],
            total_amount=to_decimal(data.get("totalAmount")),
            order_date=parse_timestamp(data.get("orderDate")),
        )


def parse_timestamp(value) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None
