"""Fixed pt-BR vocabularies used by the order parser.

Tables that are scanned first-match-wins are tuples of pairs so the
declaration order is the matching order.
"""

from __future__ import annotations

UNKNOWN_PRODUCT = "Desconhecido"
COUNTER_CUSTOMER = "Balcão"
BAGGED_ICE = "Gelo (Saco)"

SPECIFIC_PRODUCTS: tuple[tuple[str, str], ...] = (
    ("negroni", "Gelo Negroni"),
    ("negronis", "Gelo Negroni"),
    ("whisky", "Gelo Whisky"),
    ("esfera", "Esfera"),
    ("esferas", "Esfera"),
    ("cubo", "Gelo (Cubo)"),
    ("cubos", "Gelo (Cubo)"),
)

GENERIC_TRIGGERS: tuple[str, ...] = ("gelo", "saco", "sacos", "pacote", "pacotes")

FILLER_WORDS: frozenset[str] = frozenset(
    {
        "para",
        "o",
        "a",
        "do",
        "da",
        "de",
        "entregar",
        "manda",
        "mandar",
        "cliente",
        "separar",
        "por",
        "favor",
    }
)

NUMBER_WORDS: tuple[tuple[str, int], ...] = (
    ("um", 1),
    ("uma", 1),
    ("dois", 2),
    ("duas", 2),
    ("tres", 3),
    ("três", 3),
    ("quatro", 4),
    ("cinco", 5),
    ("seis", 6),
    ("sete", 7),
    ("oito", 8),
    ("nove", 9),
    ("dez", 10),
    ("onze", 11),
    ("doze", 12),
    ("treze", 13),
    ("quatorze", 14),
    ("quinze", 15),
    ("dezesseis", 16),
    ("dezessete", 17),
    ("dezoito", 18),
    ("dezenove", 19),
    ("vinte", 20),
    ("trinta", 30),
    ("quarenta", 40),
    ("cinquenta", 50),
    ("sessenta", 60),
)

NUMBER_WORD_VALUES: dict[str, int] = dict(NUMBER_WORDS)

CANONICAL_PRODUCTS: tuple[str, ...] = tuple(dict.fromkeys(name for _, name in SPECIFIC_PRODUCTS)) + (BAGGED_ICE,)
