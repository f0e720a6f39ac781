from iceorders.domain.orders.aggregation import aggregate_orders_by_customer, delivery_bundles, production_totals
from iceorders.domain.orders.models import (
    MIXED_STATUS,
    AggregatedBundle,
    Order,
    OrderStatus,
    ParsedOrder,
    can_transition,
)
from iceorders.domain.orders.parser import parse_order_text
from iceorders.domain.orders.similarity import levenshtein_distance, names_similar

__all__ = [
    "MIXED_STATUS",
    "AggregatedBundle",
    "Order",
    "OrderStatus",
    "ParsedOrder",
    "aggregate_orders_by_customer",
    "can_transition",
    "delivery_bundles",
    "levenshtein_distance",
    "names_similar",
    "parse_order_text",
    "production_totals",
]
