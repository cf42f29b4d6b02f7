from dataclasses import dataclass
from decimal import Decimal

from models.product import to_decimal


@dataclass
class DashboardStats:
    total_users: int = 0
    total_products: int = 0
    total_orders: int = 0
    total_revenue: Decimal = Decimal("0")

    @classmethod
    def from_dict(cls, data: dict) -> "DashboardStats":
        # missing or null counters display as zero
        return cls(
            total_users=int(data.get("totalUsers") or 0),
            total_products=int(data.get("totalProducts") or 0),
            total_orders=int(data.get("totalOrders") or 0),
            total_revenue=to_decimal(data.get("totalRevenue") or 0),
        )
