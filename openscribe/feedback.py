"""Audible cues for recording and transcription state changes."""

from __future__ import annotations

import subprocess
import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

__all__ = [
    "FeedbackUnsupportedError",
    "Feedback",
    "SystemSoundFeedback",
    "NoopFeedback",
    "new_feedback",
    "list_system_sounds",
    "play_sound_by_name",
    "test_all_sounds",
]

_SYSTEM_SOUNDS_DIR = Path("/System/Library/Sounds")

_SYSTEM_SOUNDS = [
    "Basso",  # Deep boom
    "Blow",  # Whoosh
    "Bottle",  # Pop
    "Frog",  # Ribbit
    "Funk",  # Funky beat
    "Glass",  # Pleasant ding (used for complete)
    "Hero",  # Triumphant
    "Morse",  # Beep beep
    "Ping",  # Network ping
    "Pop",  # Short pop (used for stop)
    "Purr",  # Soft purr
    "Sosumi",  # Classic Mac sound
    "Submarine",  # Sonar ping
    "Tink",  # Short ascending beep (used for start)
]


class FeedbackUnsupportedError(Exception):
    """Raised when audio feedback is not available on this platform."""


def _is_macos() -> bool:
    return sys.platform == "darwin"


class _SystemSoundPlayer:
    """Plays named system sounds, restarting a sound that is still playing."""

    def __init__(self) -> None:
        self._playing: dict[str, subprocess.Popen] = {}
        self._lock = threading.Lock()

    def __call__(self, name: str) -> None:
        path = _SYSTEM_SOUNDS_DIR / f"{name}.aiff"
        if not path.is_file():
            return
        with self._lock:
            previous = self._playing.pop(name, None)
            if previous is not None and previous.poll() is None:
                previous.terminate()
            try:
                self._playing[name] = subprocess.Popen(
                    ["afplay", str(path)],
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                )
            except OSError:
                pass


_default_player = _SystemSoundPlayer()


class Feedback(ABC):
    """Plays a sound when recording starts, stops and when transcription completes."""

    START_SOUND = "Tink"
    STOP_SOUND = "Pop"
    COMPLETE_SOUND = "Glass"

    def __init__(self) -> None:
        self.enabled = True
        self.closed = False

    @abstractmethod
    def _play(self, name: str) -> None:
        """Play the named sound."""

    def _emit(self, name: str) -> None:
        if self.enabled and not self.closed:
            self._play(name)

    def play_start_sound(self) -> None:
        self._emit(self.START_SOUND)

    def play_stop_sound(self) -> None:
        self._emit(self.STOP_SOUND)

    def play_complete_sound(self) -> None:
        self._emit(self.COMPLETE_SOUND)

    def close(self) -> None:
        """Release the feedback system; no sound plays after this."""
        self.closed = True

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def __enter__(self) -> "Feedback":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class SystemSoundFeedback(Feedback):
    """Feedback through the macOS system sounds."""

    def __init__(self, player: Optional[Callable[[str], None]] = None) -> None:
        super().__init__()
        self._player = player if player is not None else _default_player

    def _play(self, name: str) -> None:
        self._player(name)


class NoopFeedback(Feedback):
    """Feedback that stays silent, for platforms without system sounds."""

    def _play(self, name: str) -> None:
        pass


def new_feedback() -> Feedback:
    """Return the feedback implementation for this platform."""
    if not _is_macos():
        raise FeedbackUnsupportedError("audio feedback is not supported on this platform")
    return SystemSoundFeedback()


def list_system_sounds() -> list[str]:
    """Names of the system sounds available for feedback; empty where there are none."""
    return list(_SYSTEM_SOUNDS) if _is_macos() else []


def play_sound_by_name(name: str) -> None:
    """Play one system sound by name."""
    if not _is_macos():
        raise FeedbackUnsupportedError("audio feedback is not supported on this platform")
    _default_player(name)


def test_all_sounds() -> None:
    """Play every available system sound in turn, announcing each."""
    for sound in list_system_sounds():
        print(f"Playing sound: {sound}")
        play_sound_by_name(sound)


test_all_sounds.__test__ = False  # type: ignore[attr-defined]