"""
Voice layer – spoken hold number in, spoken position out.

Audio capture and synthesis live outside this package. A recogniser hands
over a transcript, the assistant turns it into a hold id, runs the lookup
and passes the announcement text to a SpeechService. The assistant never
waits on the speech service; it only asks it to stop whatever it is still
saying before starting the next announcement.
"""
from __future__ import annotations
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .models.position import LookupResult
import config


_FILLER_WORDS = re.compile(r"^(?:HOLD|NUMBER|NO)\b\s*")
_SEPARATORS   = re.compile(r"[\s\-.#]+")
_HOLD_ID      = re.compile(r"^[A-Z]?\d+[A-Z]?$")


def normalize_spoken_id(transcript: str) -> Optional[str]:
    """
    Hold id from a recogniser transcript, or None if it does not look like one.

    "hold 1350" → "1350", "d 12 b" → "D12B", "D-12" → "D12"
    """
    text = transcript.strip().upper()
    while True:
        stripped = _FILLER_WORDS.sub("", text)
        if stripped == text:
            break
        text = stripped
    text = _SEPARATORS.sub("", text)
    return text if _HOLD_ID.match(text) else None


def compose_announcement(result: LookupResult, fields: Sequence[str] = config.VOICE_FIELDS) -> str:
    """Sentence read back to the climber, fields in the configured order."""
    if not result.found:
        return f"Hold {result.hold_id or result.query} not found"

    pos = result.position
    spoken = {
        "panel":  f"{pos.panel} panel",
        "row":    pos.row_text,
        "column": pos.column_text,
        "grid":   f"{pos.grid_name} grid",
        "angle":  f"angle {result.record.angle}" if result.record.angle else "",
    }
    unknown = [f for f in fields if f not in spoken]
    if unknown:
        raise ValueError(f"Unknown voice fields: {unknown}")

    parts = [f"Hold {result.hold_id}"] + [spoken[f] for f in fields if spoken[f]]
    return ". ".join(parts)


class SpeechService(ABC):
    """Text-to-speech backend. speak() must not block until playback ends."""

    @abstractmethod
    def speak(self, text: str) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...


class ConsoleSpeaker(SpeechService):
    """Prints announcements instead of playing them."""

    def __init__(self):
        self.spoken: List[str] = []

    def speak(self, text: str) -> None:
        self.spoken.append(text)
        print(f"[Voice] {text}")

    def stop(self) -> None:
        pass


class VoiceAssistant:
    """Connects a recogniser transcript to a lookup and a spoken answer."""

    def __init__(self, locator, speaker: SpeechService,
                 fields: Sequence[str] = config.VOICE_FIELDS):
        self.locator = locator
        self.speaker = speaker
        self.fields  = list(fields)

    def handle_transcript(self, transcript: str) -> Optional[LookupResult]:
        """Look up a spoken hold and announce it. Returns None if nothing usable was heard."""
        hold_id = normalize_spoken_id(transcript)
        if hold_id is None:
            print(f"[Voice] Ignored transcript: {transcript!r}")
            return None

        result = self.locator.lookup(hold_id)
        self.announce(result)
        return result

    def announce(self, result: LookupResult) -> None:
        """Cut off the previous announcement and read out this result."""
        self.speaker.stop()
        self.speaker.speak(compose_announcement(result, self.fields))
