"""Heuristic parser for transcribed pt-BR order commands.

``parse_order_text("dois sacos de gelo para João")`` yields quantity 2,
product ``Gelo (Saco)`` and customer ``João``. Parsing never fails: every
field that cannot be recognised falls back to a fixed default.
"""

from __future__ import annotations

import logging
import re

from iceorders.domain.orders.models import ParsedOrder
from iceorders.domain.orders.vocabulary import (
    BAGGED_ICE,
    COUNTER_CUSTOMER,
    FILLER_WORDS,
    GENERIC_TRIGGERS,
    NUMBER_WORD_VALUES,
    NUMBER_WORDS,
    SPECIFIC_PRODUCTS,
    UNKNOWN_PRODUCT,
)

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"\d+")
_NUMBER_WORD_PATTERNS = tuple(
    (re.compile(rf"\b{re.escape(word)}\b"), value) for word, value in NUMBER_WORDS
)


def extract_quantity(lowered: str) -> int:
    match = _DIGITS.search(lowered)
    if match:
        # "0 sacos" still means one order line
        return max(int(match.group(0)), 1)
    for pattern, value in _NUMBER_WORD_PATTERNS:
        if pattern.search(lowered):
            return value
    return 1


def extract_product(lowered: str) -> str:
    for keyword, canonical in SPECIFIC_PRODUCTS:
        if keyword in lowered:
            return canonical
    if any(trigger in lowered for trigger in GENERIC_TRIGGERS):
        return BAGGED_ICE
    return UNKNOWN_PRODUCT


# Token predicates used to strip everything that is not part of the customer name.


def has_digit(token: str) -> bool:
    return _DIGITS.search(token) is not None


def mentions_specific_product(token: str) -> bool:
    # Over-eager on purpose: any token containing a keyword is dropped,
    # which can eat a name fragment such as "cubozinho".
    return any(keyword in token for keyword, _ in SPECIFIC_PRODUCTS)


def mentions_generic_trigger(token: str) -> bool:
    return any(trigger in token for trigger in GENERIC_TRIGGERS)


def is_number_word(token: str) -> bool:
    return token in NUMBER_WORD_VALUES


def is_filler_word(token: str) -> bool:
    return token in FILLER_WORDS


TOKEN_FILTERS = (
    has_digit,
    mentions_specific_product,
    mentions_generic_trigger,
    is_number_word,
    is_filler_word,
)


def _title(token: str) -> str:
    return token[:1].upper() + token[1:]


def extract_customer(lowered: str) -> str:
    kept = [token for token in lowered.split() if not any(rule(token) for rule in TOKEN_FILTERS)]
    if not kept:
        return COUNTER_CUSTOMER
    return " ".join(_title(token) for token in kept)


def parse_order_text(text: str | None) -> ParsedOrder | None:
    if not text or not text.strip():
        return None

    lowered = text.lower()
    parsed = ParsedOrder(
        quantity=extract_quantity(lowered),
        product=extract_product(lowered),
        customer=extract_customer(lowered),
        original_text=text,
    )
    logger.debug(
        "parsed order: quantity=%s product=%s customer=%s text=%r",
        parsed.quantity,
        parsed.product,
        parsed.customer,
        text,
    )
    return parsed
