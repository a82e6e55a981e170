"""Recording raw 16-bit PCM audio from a microphone through a capture backend.

A `Recorder` collects the sample bytes that a `CaptureBackend` delivers
between `start()` and `stop()`. The result can be written out with
`openscribe.wav.save_wav`:

    recorder = Recorder("MacBook Pro Microphone", backend)
    recorder.start()
    ...
    data = recorder.stop()
    save_wav("output.wav", data, recorder.sample_rate, recorder.channels)
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional, Protocol, Sequence

from .devices import DeviceInfo

__all__ = ["RecorderError", "CaptureBackend", "Recorder"]

logger = logging.getLogger(__name__)

_SAMPLE_RATE = 16000  # Whisper-compatible sample rate
_CHANNELS = 1  # Mono

_START_FAILURE_HINT = (
    "\n\nPossible causes:\n"
    "  1. The microphone is disconnected or disabled\n"
    "  2. Microphone permissions not granted\n"
    "  3. Another application has exclusive access to the microphone\n\n"
    "Please check System Preferences > Security & Privacy > Privacy > Microphone"
)


class RecorderError(Exception):
    """Raised when recording cannot be started or stopped."""


class CaptureBackend(Protocol):
    """An audio capture system that delivers sample bytes to a callback."""

    def capture_devices(self) -> Sequence[DeviceInfo]:
        """Return the capture devices currently available."""
        ...

    def start(
        self,
        device_name: Optional[str],
        sample_rate: int,
        channels: int,
        on_data: Callable[[bytes], None],
    ) -> None:
        """Begin capturing signed 16-bit samples, passing each chunk to `on_data`.

        `device_name` is None to use the system default device.
        """
        ...

    def stop(self) -> None:
        """Stop capturing and release the device."""
        ...


def _device_not_found_message(name: str, infos: Sequence[DeviceInfo]) -> str:
    lines = [f"microphone not found: {name}", "", "Available microphones:"]
    for position, info in enumerate(infos, start=1):
        marker = " (default)" if info.is_default else ""
        lines.append(f"  {position}. {info.name}{marker}")
    lines += [
        "",
        "You can:",
        "  1. List available microphones:",
        "     $ openscribe config --list-microphones",
        "  2. Set a different microphone:",
        '     $ openscribe config --set-microphone "<name>"',
        "  3. Use the default microphone (leave config empty)",
    ]
    return "\n".join(lines)


class Recorder:
    """Records mono 16 kHz audio from one named microphone, or the default one."""

    def __init__(self, device_name: str, backend: CaptureBackend) -> None:
        self.device_name = device_name
        self._backend = backend
        self._recording = False
        self._buffer = bytearray()
        self._lock = threading.Lock()

    @property
    def sample_rate(self) -> int:
        return _SAMPLE_RATE

    @property
    def channels(self) -> int:
        return _CHANNELS

    @property
    def is_recording(self) -> bool:
        return self._recording

    def _on_data(self, chunk: bytes) -> None:
        with self._lock:
            self._buffer.extend(chunk)

    def start(self) -> None:
        """Begin capturing audio; raises RecorderError if that is not possible."""
        if self._recording:
            raise RecorderError("already recording")

        if self.device_name:
            try:
                infos = list(self._backend.capture_devices())
            except Exception as exc:
                raise RecorderError(f"failed to enumerate devices: {exc}") from exc
            if not any(info.name == self.device_name for info in infos):
                raise RecorderError(_device_not_found_message(self.device_name, infos))

        with self._lock:
            self._buffer = bytearray()

        try:
            self._backend.start(
                self.device_name or None, self.sample_rate, self.channels, self._on_data
            )
        except Exception as exc:
            raise RecorderError(f"failed to start audio recording: {exc}{_START_FAILURE_HINT}") from exc

        self._recording = True

    def stop(self) -> bytes:
        """End the recording and return every byte captured since `start()`."""
        if not self._recording:
            raise RecorderError("not currently recording")

        try:
            self._backend.stop()
        except Exception as exc:  # releasing the device is best effort
            logger.warning("failed to release audio device: %s", exc)
        finally:
            self._recording = False

        with self._lock:
            return bytes(self._buffer)

    def record_duration(self, seconds: float) -> bytes:
        """Record for `seconds` and return the captured audio."""
        self.start()
        time.sleep(seconds)
        return self.stop()