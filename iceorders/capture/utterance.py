"""Utterance boundary detection for streaming transcripts.

Speech recognisers emit growing partial transcripts. An utterance is
considered complete once no new text has arrived for ``silence_seconds``.
Time is always passed in by the caller, so no background timer exists.
"""

from __future__ import annotations

import logging
from datetime import datetime

from iceorders.core.config import get_settings

logger = logging.getLogger(__name__)


class UtteranceSegmenter:
    def __init__(self, silence_seconds: float = 2.0):
        if silence_seconds <= 0:
            raise ValueError("silence_seconds must be positive")
        self.silence_seconds = silence_seconds
        self._transcript = ""
        self._last_update: datetime | None = None

    @classmethod
    def from_settings(cls) -> UtteranceSegmenter:
        return cls(silence_seconds=get_settings().silence_seconds)

    @property
    def pending(self) -> str:
        return self._transcript

    def feed(self, transcript: str, at: datetime) -> None:
        text = (transcript or "").strip()
        if not text:
            return
        self._transcript = text
        self._last_update = at

    def poll(self, now: datetime) -> str | None:
        if self._last_update is None:
            return None
        if (now - self._last_update).total_seconds() < self.silence_seconds:
            return None
        return self.flush()

    def flush(self) -> str | None:
        text = self._transcript or None
        self._transcript = ""
        self._last_update = None
        if text:
            logger.debug("utterance complete: %r", text)
        return text
