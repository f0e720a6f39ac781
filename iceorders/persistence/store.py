from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from iceorders.api.utils import as_utc, now_utc
from iceorders.domain.orders.models import Order, OrderStatus, ParsedOrder, can_transition
from iceorders.persistence.models import OrderModel

logger = logging.getLogger(__name__)


class OrderTransitionError(ValueError):
    pass


def to_domain(row: OrderModel) -> Order:
    return Order(
        id=row.id,
        product=row.product,
        quantity=row.quantity,
        customer=row.customer,
        created_at=as_utc(row.created_at),
        status=OrderStatus(row.status),
    )


class OrderStore:
    def __init__(self, session: Session):
        self.session = session

    def add_order(self, parsed: ParsedOrder, created_at: datetime | None = None) -> Order:
        # original_text is informational only and is not stored.
        row = OrderModel(
            product=parsed.product,
            quantity=parsed.quantity,
            customer=parsed.customer,
            status=OrderStatus.PENDING.value,
            created_at=as_utc(created_at or now_utc()),
        )
        self.session.add(row)
        self.session.flush()
        logger.info(
            "order stored: id=%s customer=%s product=%s quantity=%s",
            row.id,
            row.customer,
            row.product,
            row.quantity,
        )
        return to_domain(row)

    def recent_orders(self, limit: int = 50) -> list[Order]:
        stmt = select(OrderModel).order_by(desc(OrderModel.created_at)).limit(limit)
        return [to_domain(row) for row in self.session.scalars(stmt).all()]

    def get_orders(self, order_ids: Iterable[str]) -> list[Order]:
        ids = list(dict.fromkeys(order_ids))
        if not ids:
            return []
        rows = {row.id: row for row in self.session.scalars(select(OrderModel).where(OrderModel.id.in_(ids))).all()}
        return [to_domain(rows[order_id]) for order_id in ids if order_id in rows]

    def changes_since(self, cursor: datetime, limit: int = 500) -> list[Order]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.created_at > as_utc(cursor))
            .order_by(OrderModel.created_at.asc())
            .limit(limit)
        )
        return [to_domain(row) for row in self.session.scalars(stmt).all()]

    def transition(self, order_ids: Iterable[str], status: OrderStatus) -> list[Order]:
        ids = list(dict.fromkeys(order_ids))
        if not ids:
            raise OrderTransitionError("no order ids given")

        rows = {row.id: row for row in self.session.scalars(select(OrderModel).where(OrderModel.id.in_(ids))).all()}
        missing = [order_id for order_id in ids if order_id not in rows]
        if missing:
            raise OrderTransitionError(f"unknown order ids: {', '.join(missing)}")

        for order_id in ids:
            current = OrderStatus(rows[order_id].status)
            if not can_transition(current, status):
                raise OrderTransitionError(
                    f"order {order_id} cannot move from {current.value} to {status.value}"
                )

        for order_id in ids:
            rows[order_id].status = status.value
        self.session.flush()
        logger.info("orders moved to %s: %s", status.value, ", ".join(ids))
        return [to_domain(rows[order_id]) for order_id in ids]
