from __future__ import annotations

from datetime import timedelta

import pytest

from iceorders.domain.orders import OrderStatus, parse_order_text
from iceorders.persistence.store import OrderStore, OrderTransitionError


def _add(store: OrderStore, text: str, at):
    return store.add_order(parse_order_text(text), created_at=at)


def test_add_order_starts_pending(session, base_time):
    order = _add(OrderStore(session), "2 sacos de gelo para Maria", base_time)

    assert order.id
    assert order.status == OrderStatus.PENDING
    assert order.quantity == 2
    assert order.customer == "Maria"
    assert order.created_at == base_time
    assert order.original_text is None


def test_recent_orders_newest_first(session, base_time):
    store = OrderStore(session)
    first = _add(store, "gelo para ana", base_time)
    second = _add(store, "esfera para carlos", base_time + timedelta(minutes=1))
    third = _add(store, "cubo para beatriz", base_time + timedelta(minutes=2))

    assert [o.id for o in store.recent_orders()] == [third.id, second.id, first.id]
    assert [o.id for o in store.recent_orders(limit=2)] == [third.id, second.id]


def test_transition_moves_orders_forward(session, base_time):
    store = OrderStore(session)
    a = _add(store, "gelo para ana", base_time)
    b = _add(store, "gelo para ana", base_time + timedelta(minutes=1))

    completed = store.transition([a.id, b.id], OrderStatus.COMPLETED)
    assert {o.status for o in completed} == {OrderStatus.COMPLETED}

    delivered = store.transition([a.id], OrderStatus.DELIVERED)
    assert delivered[0].status == OrderStatus.DELIVERED
    assert [o.status for o in store.get_orders([a.id, b.id])] == [OrderStatus.DELIVERED, OrderStatus.COMPLETED]


def test_transition_rejects_backwards_move(session, base_time):
    store = OrderStore(session)
    order = _add(store, "gelo para ana", base_time)
    store.transition([order.id], OrderStatus.DELIVERED)

    with pytest.raises(OrderTransitionError):
        store.transition([order.id], OrderStatus.PENDING)


def test_transition_rejects_unknown_ids(session, base_time):
    store = OrderStore(session)
    order = _add(store, "gelo para ana", base_time)

    with pytest.raises(OrderTransitionError, match="missing-id"):
        store.transition([order.id, "missing-id"], OrderStatus.COMPLETED)
    assert store.get_orders([order.id])[0].status == OrderStatus.PENDING


def test_changes_since_returns_only_newer_orders(session, base_time):
    store = OrderStore(session)
    _add(store, "gelo para ana", base_time)
    newer = _add(store, "gelo para carlos", base_time + timedelta(minutes=5))

    assert [o.id for o in store.changes_since(base_time)] == [newer.id]
