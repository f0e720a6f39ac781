from __future__ import annotations

from pydantic import BaseModel, Field

from iceorders.api.utils import isoformat_z
from iceorders.domain.orders.models import Order, OrderStatus, ParsedOrder


class OrderTextRequest(BaseModel):
    text: str = Field(default="", description="transcribed utterance, pt-BR")


class TransitionRequest(BaseModel):
    order_ids: list[str] = Field(min_length=1)
    status: OrderStatus


def parsed_to_dict(parsed: ParsedOrder | None) -> dict | None:
    if parsed is None:
        return None
    return {
        "quantity": parsed.quantity,
        "product": parsed.product,
        "customer": parsed.customer,
        "original_text": parsed.original_text,
    }


def order_to_dict(order: Order) -> dict:
    return {
        "id": order.id,
        "product": order.product,
        "quantity": order.quantity,
        "customer": order.customer,
        "status": order.status.value,
        "created_at": isoformat_z(order.created_at),
    }
