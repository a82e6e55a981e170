from typing import Callable, Optional

import pytest

from openscribe.devices import MockDeviceInfo
from openscribe.recorder import Recorder, RecorderError


class FakeBackend:
    def __init__(self, devices=(), chunks=(), enumerate_error=None, start_error=None):
        self.devices = list(devices)
        self.chunks = list(chunks)
        self.enumerate_error = enumerate_error
        self.start_error = start_error
        self.started_with = []
        self.stop_calls = 0
        self.enumerate_calls = 0
        self.on_data: Optional[Callable[[bytes], None]] = None

    def capture_devices(self):
        self.enumerate_calls += 1
        if self.enumerate_error is not None:
            raise self.enumerate_error
        return self.devices

    def start(self, device_name, sample_rate, channels, on_data):
        if self.start_error is not None:
            raise self.start_error
        self.started_with.append((device_name, sample_rate, channels))
        self.on_data = on_data
        for chunk in self.chunks:
            on_data(chunk)

    def stop(self):
        self.stop_calls += 1


DEVICES = [
    MockDeviceInfo("MacBook Pro Microphone", True),
    MockDeviceInfo("External USB Mic", False),
]


def test_recorder_uses_whisper_format():
    recorder = Recorder("", FakeBackend())
    assert recorder.sample_rate == 16000
    assert recorder.channels == 1
    assert recorder.is_recording is False


def test_start_and_stop_collects_data():
    backend = FakeBackend(devices=DEVICES, chunks=[b"\x01\x02", b"\x03\x04"])
    recorder = Recorder("External USB Mic", backend)
    recorder.start()
    assert recorder.is_recording is True
    backend.on_data(b"\x05\x06")
    data = recorder.stop()
    assert data == b"\x01\x02\x03\x04\x05\x06"
    assert recorder.is_recording is False
    assert backend.stop_calls == 1
    assert backend.started_with == [("External USB Mic", recorder.sample_rate, recorder.channels)]


def test_empty_device_name_uses_default_without_enumerating():
    backend = FakeBackend()
    recorder = Recorder("", backend)
    recorder.start()
    recorder.stop()
    assert backend.enumerate_calls == 0
    assert backend.started_with[0][0] is None


def test_start_twice_raises():
    recorder = Recorder("", FakeBackend())
    recorder.start()
    with pytest.raises(RecorderError, match="already recording"):
        recorder.start()


def test_stop_without_start_raises():
    recorder = Recorder("", FakeBackend())
    with pytest.raises(RecorderError, match="not currently recording"):
        recorder.stop()


def test_unknown_device_lists_available_microphones():
    backend = FakeBackend(devices=DEVICES)
    recorder = Recorder("Bluetooth Headset", backend)
    with pytest.raises(RecorderError) as info:
        recorder.start()
    message = str(info.value)
    assert message.startswith("microphone not found: Bluetooth Headset")
    assert "  1. MacBook Pro Microphone (default)" in message
    assert "  2. External USB Mic\n" in message
    assert recorder.is_recording is False
    assert backend.started_with == []


def test_enumeration_failure_raises():
    backend = FakeBackend(enumerate_error=RuntimeError("boom"))
    recorder = Recorder("External USB Mic", backend)
    with pytest.raises(RecorderError, match="failed to enumerate devices: boom"):
        recorder.start()


def test_backend_start_failure_raises():
    backend = FakeBackend(start_error=OSError("busy"))
    recorder = Recorder("", backend)
    with pytest.raises(RecorderError, match="failed to start audio recording: busy"):
        recorder.start()
    assert recorder.is_recording is False


def test_restart_resets_buffer():
    backend = FakeBackend(chunks=[b"ab"])
    recorder = Recorder("", backend)
    recorder.start()
    first = recorder.stop()
    recorder.start()
    second = recorder.stop()
    assert first == second == b"ab"


def test_record_duration_returns_data():
    backend = FakeBackend(chunks=[b"\x10\x20"])
    recorder = Recorder("", backend)
    assert recorder.record_duration(0) == b"\x10\x20"
    assert recorder.is_recording is False