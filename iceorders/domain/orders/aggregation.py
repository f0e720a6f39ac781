"""Group persisted orders into per-customer bundles.

Customer names come from speech transcription, so the same person may
appear as "João", "Joao" or "Joaõ". Orders are folded newest-first into
the first bundle whose label is within the edit-distance threshold; the
label of a bundle is whatever name opened it and is never replaced.
"""

from __future__ import annotations

from typing import Iterable

from iceorders.domain.orders.models import MIXED_STATUS, AggregatedBundle, Order, OrderStatus
from iceorders.domain.orders.similarity import names_similar, normalize_name

DEFAULT_THRESHOLD = 2
DEFAULT_MIN_LENGTH = 4


def _status_value(status: OrderStatus | str) -> str:
    return status.value if isinstance(status, OrderStatus) else str(status)


def _new_bundle(order: Order) -> AggregatedBundle:
    return AggregatedBundle(
        customer=order.customer,
        normalized_name=normalize_name(order.customer),
        created_at=order.created_at,
        latest_activity=order.created_at,
        status=_status_value(order.status),
        items={order.product: order.quantity},
        order_ids=[order.id],
    )


def _merge(bundle: AggregatedBundle, order: Order) -> None:
    bundle.items[order.product] = bundle.items.get(order.product, 0) + order.quantity
    bundle.order_ids.append(order.id)
    if order.created_at > bundle.latest_activity:
        bundle.latest_activity = order.created_at
    if order.created_at < bundle.created_at:
        bundle.created_at = order.created_at
    if bundle.status != _status_value(order.status):
        bundle.status = MIXED_STATUS


def aggregate_orders_by_customer(
    orders: Iterable[Order],
    *,
    threshold: int = DEFAULT_THRESHOLD,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> list[AggregatedBundle]:
    bundles: list[AggregatedBundle] = []

    for order in sorted(orders, key=lambda o: o.created_at, reverse=True):
        bundle = next(
            (b for b in bundles if names_similar(b.customer, order.customer, threshold, min_length)),
            None,
        )
        if bundle is None:
            bundles.append(_new_bundle(order))
        else:
            _merge(bundle, order)

    return sorted(bundles, key=lambda b: b.latest_activity, reverse=True)


def delivery_bundles(
    orders: Iterable[Order],
    *,
    threshold: int = DEFAULT_THRESHOLD,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> list[AggregatedBundle]:
    """Bundles of orders that are produced and waiting to be delivered."""
    ready = [order for order in orders if _status_value(order.status) == OrderStatus.COMPLETED.value]
    return aggregate_orders_by_customer(ready, threshold=threshold, min_length=min_length)


def production_totals(orders: Iterable[Order]) -> dict[str, int]:
    """Quantity to produce per product, in order of first appearance."""
    totals: dict[str, int] = {}
    for order in orders:
        totals[order.product] = totals.get(order.product, 0) + order.quantity
    return totals
