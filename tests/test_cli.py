from __future__ import annotations

import json

from iceorders.cli import main


def test_cli_parse_prints_fields(capsys):
    assert main(["parse", "2 sacos de gelo para Maria"]) == 0
    out = json.loads(capsys.readouterr().out)

    assert out["parsed"]["quantity"] == 2
    assert out["parsed"]["customer"] == "Maria"


def test_cli_add_and_bundles(capsys):
    assert main(["add", "dois sacos para João"]) == 0
    assert main(["add", "tres sacos para Joao"]) == 0
    capsys.readouterr()

    assert main(["bundles"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["count"] == 1
    assert out["bundles"][0]["items"] == {"Gelo (Saco)": 5}


def test_cli_transition_unknown_id_fails(capsys):
    assert main(["transition", "completed", "missing"]) == 1
    assert "missing" in json.loads(capsys.readouterr().out)["error"]


def test_cli_totals(capsys):
    assert main(["add", "2 sacos para ana"]) == 0
    assert main(["add", "cinco cubos para ana"]) == 0
    capsys.readouterr()

    assert main(["totals"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["totals"] == {"Gelo (Cubo)": 5, "Gelo (Saco)": 2}


def test_cli_bundles_use_configured_min_length(capsys, override_settings):
    override_settings(ICE_SIMILARITY_MIN_LENGTH="3")
    assert main(["add", "gelo para ana"]) == 0
    assert main(["add", "gelo para ama"]) == 0
    capsys.readouterr()

    assert main(["bundles"]) == 0
    assert json.loads(capsys.readouterr().out)["count"] == 1
