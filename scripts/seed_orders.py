#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json

import requests

SAMPLE_UTTERANCES = [
    "dois sacos de gelo para João",
    "uma esfera para o Joao",
    "3 negroni para Maria",
    "cinco pacotes para Mariah",
    "gelo whisky para Ana",
    "10 cubos por favor",
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the order service with sample utterances")
    parser.add_argument("--base-url", default="http://localhost:8000")
    args = parser.parse_args()

    created = []
    for text in SAMPLE_UTTERANCES:
        resp = requests.post(f"{args.base_url}/orders", json={"text": text}, timeout=30)
        resp.raise_for_status()
        created.append(resp.json()["order"])

    bundles = requests.get(f"{args.base_url}/orders/bundles", timeout=30)
    bundles.raise_for_status()
    print(json.dumps({"created": created, "bundles": bundles.json()}, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
