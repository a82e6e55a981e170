"""Audio input device enumeration and microphone selection."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Sequence

__all__ = [
    "DeviceType",
    "MicrophoneError",
    "Device",
    "DeviceInfo",
    "DeviceEnumerator",
    "MockDeviceInfo",
    "MockDeviceEnumerator",
    "create_mock_enumerator",
    "list_microphones",
    "get_default_microphone",
    "find_microphone_by_name",
    "find_microphone_by_name_or_index",
    "select_microphone",
]

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

_NO_DEVICES_MESSAGE = (
    "no audio input devices found\n\n"
    "Please check that:\n"
    "  1. A microphone is connected to your computer\n"
    "  2. Your microphone is enabled in System Preferences > Sound > Input\n"
    "  3. OpenScribe has microphone permissions in System Preferences > "
    "Security & Privacy > Privacy > Microphone"
)


class DeviceType(enum.IntEnum):
    """Kinds of audio device an enumerator can be asked for."""

    PLAYBACK = 1
    CAPTURE = 2
    DUPLEX = 3
    LOOPBACK = 4


class MicrophoneError(Exception):
    """Raised when no suitable microphone can be found."""


@dataclass(frozen=True)
class Device:
    """An audio input device."""

    id: str
    name: str
    is_default: bool = False
    sample_rate: int = 0
    channels: int = 0


class DeviceInfo(Protocol):
    """What an enumerator reports about one device."""

    @property
    def name(self) -> str: ...

    @property
    def is_default(self) -> bool: ...


class DeviceEnumerator(Protocol):
    """Something that can list the audio devices of a given type."""

    def devices(self, device_type: DeviceType) -> Sequence[DeviceInfo]: ...


@dataclass(frozen=True)
class MockDeviceInfo:
    """A fixed device description, for use without audio hardware."""

    name: str
    is_default: bool = False


@dataclass
class MockDeviceEnumerator:
    """An enumerator whose answer comes from a supplied function."""

    devices_func: Optional[Callable[[DeviceType], Sequence[DeviceInfo]]] = field(default=None)

    def devices(self, device_type: DeviceType) -> Sequence[DeviceInfo]:
        if self.devices_func is None:
            return []
        return self.devices_func(device_type)


def create_mock_enumerator(
    devices: Optional[Sequence[DeviceInfo]], error: Optional[BaseException] = None
) -> MockDeviceEnumerator:
    """Build an enumerator that returns `devices`, or raises `error` if given."""

    def answer(_device_type: DeviceType) -> Sequence[DeviceInfo]:
        if error is not None:
            raise error
        return list(devices or [])

    return MockDeviceEnumerator(devices_func=answer)


def list_microphones(enumerator: DeviceEnumerator) -> list[Device]:
    """Return every capture device the enumerator knows about."""
    try:
        infos = enumerator.devices(DeviceType.CAPTURE)
    except Exception as exc:
        raise MicrophoneError(f"failed to enumerate devices: {exc}") from exc

    if not infos:
        raise MicrophoneError(_NO_DEVICES_MESSAGE)

    return [
        Device(id=str(index), name=info.name, is_default=bool(info.is_default))
        for index, info in enumerate(infos)
    ]


def get_default_microphone(devices: Sequence[Device]) -> Device:
    """Return the default device, or the first one if none is marked default."""
    default = next((device for device in devices if device.is_default), None)
    if default is not None:
        return default
    if devices:
        return devices[0]
    raise MicrophoneError("no default microphone found")


def find_microphone_by_name(devices: Sequence[Device], name: str) -> Device:
    """Return the device whose name matches exactly."""
    for device in devices:
        if device.name == name:
            return device
    raise MicrophoneError(f"microphone not found: {name}")


def find_microphone_by_name_or_index(devices: Sequence[Device], name_or_index: str) -> Device:
    """Find a device by its 1-based position when given a number, else by exact name."""
    if _INTEGER.fullmatch(name_or_index):
        index = int(name_or_index)
        if 1 <= index <= len(devices):
            return devices[index - 1]
        raise MicrophoneError(
            f"microphone index {index} is out of range (valid range: 1-{len(devices)})"
        )
    return find_microphone_by_name(devices, name_or_index)


def _match(devices: Sequence[Device], name: str) -> Optional[Device]:
    wanted = name.casefold()
    return next((device for device in devices if device.name.casefold() == wanted), None)


def select_microphone(
    devices: Sequence[Device],
    preferred_microphones: Sequence[str] = (),
    microphone: str = "",
) -> Device:
    """Pick a microphone: preferences in order, then the single legacy name, then the default."""
    if preferred_microphones:
        logger.info("Trying %d preferred microphones...", len(preferred_microphones))
        for rank, preferred in enumerate(preferred_microphones, start=1):
            logger.info("  Checking preference #%d: %s", rank, preferred)
            device = _match(devices, preferred)
            if device is not None:
                logger.info(
                    "Selected preferred microphone #%d: %s (from preferences)", rank, device.name
                )
                return device
            logger.info("  Preference #%d not available: %s", rank, preferred)
        logger.warning("No preferred microphones available, falling back to default")
        return get_default_microphone(devices)

    if microphone:
        logger.info("Using legacy 'microphone' config field: %s", microphone)
        device = _match(devices, microphone)
        if device is not None:
            logger.info("Selected legacy microphone: %s", device.name)
            return device
        logger.warning("Legacy microphone not found, falling back to default")

    try:
        default = get_default_microphone(devices)
    except MicrophoneError as exc:
        raise MicrophoneError(f"no microphones available: {exc}") from exc
    logger.info("Using default microphone: %s", default.name)
    return default