from __future__ import annotations

import argparse
import json

from iceorders.api.schemas import order_to_dict, parsed_to_dict
from iceorders.core.config import get_settings
from iceorders.core.logging import configure_logging
from iceorders.domain.orders import OrderStatus, aggregate_orders_by_customer, parse_order_text, production_totals
from iceorders.persistence.pg import init_db, session_scope
from iceorders.persistence.store import OrderStore, OrderTransitionError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ice Orders CLI")
    parser.add_argument("--log-level", default=None)
    top = parser.add_subparsers(dest="command", required=True)

    parse = top.add_parser("parse", help="Parse a transcribed order without storing it")
    parse.add_argument("text")

    add = top.add_parser("add", help="Parse and store an order")
    add.add_argument("text")

    bundles = top.add_parser("bundles", help="Group recent orders by customer")
    bundles.add_argument("--status", choices=[s.value for s in OrderStatus], default=None)
    bundles.add_argument("--limit", type=int, default=None)

    totals = top.add_parser("totals", help="Sum recent order quantities per product")
    totals.add_argument("--status", choices=[s.value for s in OrderStatus], default=None)
    totals.add_argument("--limit", type=int, default=None)

    move = top.add_parser("transition", help="Move orders to a new status")
    move.add_argument("status", choices=[s.value for s in OrderStatus])
    move.add_argument("order_ids", nargs="+")

    return parser


def _print(payload) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _run_parse(args: argparse.Namespace) -> int:
    _print({"parsed": parsed_to_dict(parse_order_text(args.text))})
    return 0


def _run_add(args: argparse.Namespace) -> int:
    parsed = parse_order_text(args.text)
    if parsed is None:
        _print({"error": "order text is empty"})
        return 1
    init_db()
    with session_scope() as session:
        order = OrderStore(session).add_order(parsed)
    _print({"order": order_to_dict(order)})
    return 0


def _run_bundles(args: argparse.Namespace) -> int:
    settings = get_settings()
    init_db()
    with session_scope() as session:
        orders = OrderStore(session).recent_orders(args.limit or settings.recent_orders_limit)
    if args.status:
        orders = [o for o in orders if o.status.value == args.status]
    bundles = aggregate_orders_by_customer(
        orders,
        threshold=settings.similarity_threshold,
        min_length=settings.similarity_min_length,
    )
    _print({"count": len(bundles), "bundles": [b.to_dict() for b in bundles]})
    return 0


def _run_totals(args: argparse.Namespace) -> int:
    init_db()
    with session_scope() as session:
        orders = OrderStore(session).recent_orders(args.limit or get_settings().recent_orders_limit)
    if args.status:
        orders = [o for o in orders if o.status.value == args.status]
    _print({"order_count": len(orders), "totals": production_totals(orders)})
    return 0


def _run_transition(args: argparse.Namespace) -> int:
    init_db()
    try:
        with session_scope() as session:
            orders = OrderStore(session).transition(args.order_ids, OrderStatus(args.status))
    except OrderTransitionError as exc:
        _print({"error": str(exc)})
        return 1
    _print({"count": len(orders), "orders": [order_to_dict(o) for o in orders]})
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "parse":
        return _run_parse(args)
    if args.command == "add":
        return _run_add(args)
    if args.command == "bundles":
        return _run_bundles(args)
    if args.command == "totals":
        return _run_totals(args)
    if args.command == "transition":
        return _run_transition(args)

    parser.error("unsupported command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
