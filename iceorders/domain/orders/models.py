from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from iceorders.api.utils import isoformat_z


class OrderStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    DELIVERED = "delivered"

    @property
    def rank(self) -> int:
        return _STATUS_ORDER.index(self)


_STATUS_ORDER = [OrderStatus.PENDING, OrderStatus.COMPLETED, OrderStatus.DELIVERED]

MIXED_STATUS = "mixed"


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """Lifecycle only moves forward; re-applying the current status is a no-op."""
    return target.rank >= current.rank


@dataclass(frozen=True)
class ParsedOrder:
    quantity: int
    product: str
    customer: str
    original_text: str


@dataclass(frozen=True)
class Order:
    id: str
    product: str
    quantity: int
    customer: str
    created_at: datetime
    status: OrderStatus = OrderStatus.PENDING
    original_text: str | None = None


@dataclass
class AggregatedBundle:
    customer: str
    normalized_name: str
    created_at: datetime
    latest_activity: datetime
    status: str
    items: dict[str, int] = field(default_factory=dict)
    order_ids: list[str] = field(default_factory=list)

    @property
    def total_quantity(self) -> int:
        return sum(self.items.values())

    def to_dict(self) -> dict:
        return {
            "customer": self.customer,
            "normalized_name": self.normalized_name,
            "items": dict(self.items),
            "order_ids": list(self.order_ids),
            "total_quantity": self.total_quantity,
            "created_at": isoformat_z(self.created_at),
            "latest_activity": isoformat_z(self.latest_activity),
            "status": self.status,
        }
