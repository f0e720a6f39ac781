from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from iceorders.api.schemas import OrderTextRequest, TransitionRequest, order_to_dict, parsed_to_dict
from iceorders.core.config import get_settings
from iceorders.domain.orders import (
    OrderStatus,
    aggregate_orders_by_customer,
    delivery_bundles,
    parse_order_text,
    production_totals,
)
from iceorders.persistence.pg import get_session
from iceorders.persistence.store import OrderStore

router = APIRouter(tags=["orders"])


def _matching_kwargs() -> dict:
    settings = get_settings()
    return {
        "threshold": settings.similarity_threshold,
        "min_length": settings.similarity_min_length,
    }


@router.post("/orders/parse")
def parse_order(request: OrderTextRequest):
    return {"parsed": parsed_to_dict(parse_order_text(request.text))}


@router.post("/orders", status_code=201)
def create_order(request: OrderTextRequest, session: Session = Depends(get_session)):
    parsed = parse_order_text(request.text)
    if parsed is None:
        raise HTTPException(status_code=400, detail="order text is empty")
    order = OrderStore(session).add_order(parsed)
    return {"order": order_to_dict(order), "parsed": parsed_to_dict(parsed)}


@router.get("/orders")
def list_orders(
    limit: int | None = Query(default=None, ge=1, le=1000),
    session: Session = Depends(get_session),
):
    orders = OrderStore(session).recent_orders(limit or get_settings().recent_orders_limit)
    return {"count": len(orders), "orders": [order_to_dict(o) for o in orders]}


@router.get("/orders/bundles")
def list_bundles(
    status: OrderStatus | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1, le=1000),
    session: Session = Depends(get_session),
):
    orders = OrderStore(session).recent_orders(limit or get_settings().recent_orders_limit)
    if status is not None:
        orders = [o for o in orders if o.status == status]
    bundles = aggregate_orders_by_customer(orders, **_matching_kwargs())
    return {"count": len(bundles), "bundles": [b.to_dict() for b in bundles]}


@router.get("/orders/deliveries")
def list_deliveries(
    limit: int | None = Query(default=None, ge=1, le=1000),
    session: Session = Depends(get_session),
):
    orders = OrderStore(session).recent_orders(limit or get_settings().recent_orders_limit)
    bundles = delivery_bundles(orders, **_matching_kwargs())
    return {"count": len(bundles), "bundles": [b.to_dict() for b in bundles]}


@router.post("/orders/transition")
def transition_orders(request: TransitionRequest, session: Session = Depends(get_session)):
    orders = OrderStore(session).transition(request.order_ids, request.status)
    return {"count": len(orders), "orders": [order_to_dict(o) for o in orders]}


@router.get("/orders/totals")
def get_production_totals(
    status: OrderStatus | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1, le=1000),
    session: Session = Depends(get_session),
):
    orders = OrderStore(session).recent_orders(limit or get_settings().recent_orders_limit)
    if status is not None:
        orders = [o for o in orders if o.status == status]
    return {"order_count": len(orders), "totals": production_totals(orders)}
