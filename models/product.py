from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from core.references import Reference, parse_reference, reference_id
from models.category import Category

ACTIVE = "active"
INACTIVE = "inactive"
STATUSES = [ACTIVE, INACTIVE]


def to_decimal(value) -> Decimal:
    """Convert a wire number to Decimal without float artifacts."""
    if value is None or value == "":
        return Decimal("0")
    return Decimal(str(value))


@dataclass
class Product:
    id: str
    name: str
    price: Decimal
    status: str = ACTIVE
    category: Optional[Reference] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        return cls(
            id=str(data.get("_id", "")),
            name=data.get("name", ""),
            price=to_decimal(data.get("price")),
            status=data.get("status", ACTIVE),
            category=parse_reference(data.get("categoryId"), Category.from_dict),
        )

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE

    @property
    def category_id(self) -> str:
        return reference_id(self.category)

    def to_payload(self) -> dict:
        return {
            "name": self.name,
            "categoryId": self.category_id,
            "price": float(self.price),
            "status": self.status,
        }
