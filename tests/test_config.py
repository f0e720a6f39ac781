from __future__ import annotations

import pytest

from iceorders.core.config import Settings


def test_dev_settings_defaults():
    settings = Settings(env="dev")

    assert settings.similarity_threshold == 2
    assert settings.similarity_min_length == 4
    assert settings.silence_seconds == 2.0


def test_invalid_matching_settings_rejected_outside_dev():
    with pytest.raises(ValueError, match="ICE_SIMILARITY_THRESHOLD"):
        Settings(env="prod", similarity_threshold=-1)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ICE_SIMILARITY_THRESHOLD", "3")

    assert Settings().similarity_threshold == 3
