"""Reading and writing 16-bit PCM WAV files with a canonical 44-byte header."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Union

__all__ = ["WavError", "WavHeader", "save_wav", "load_wav"]

PathType = Union[str, "PathLike[str]"]

_HEADER_FORMAT = "<4sI4s4sIHHIIHH4sI"
_HEADER_SIZE = struct.calcsize(_HEADER_FORMAT)
_BITS_PER_SAMPLE = 16
_PCM_FORMAT = 1


class WavError(Exception):
    """Raised when a WAV file cannot be written, read or understood."""


@dataclass(frozen=True)
class WavHeader:
    """The RIFF/WAVE header that precedes the raw sample data."""

    chunk_id: bytes = b"RIFF"
    chunk_size: int = 36
    format: bytes = b"WAVE"
    subchunk1_id: bytes = b"fmt "
    subchunk1_size: int = 16
    audio_format: int = _PCM_FORMAT
    num_channels: int = 1
    sample_rate: int = 16000
    byte_rate: int = 32000
    block_align: int = 2
    bits_per_sample: int = _BITS_PER_SAMPLE
    subchunk2_id: bytes = b"data"
    subchunk2_size: int = 0

    SIZE = _HEADER_SIZE

    @classmethod
    def for_pcm16(cls, sample_rate: int, channels: int, data_size: int) -> "WavHeader":
        """Build the header for `data_size` bytes of 16-bit PCM audio."""
        return cls(
            chunk_size=36 + data_size,
            num_channels=channels,
            sample_rate=sample_rate,
            byte_rate=sample_rate * channels * _BITS_PER_SAMPLE // 8,
            block_align=channels * _BITS_PER_SAMPLE // 8,
            bits_per_sample=_BITS_PER_SAMPLE,
            subchunk2_size=data_size,
        )

    def pack(self) -> bytes:
        """Serialise the header as little-endian bytes."""
        try:
            return struct.pack(
                _HEADER_FORMAT,
                self.chunk_id,
                self.chunk_size,
                self.format,
                self.subchunk1_id,
                self.subchunk1_size,
                self.audio_format,
                self.num_channels,
                self.sample_rate,
                self.byte_rate,
                self.block_align,
                self.bits_per_sample,
                self.subchunk2_id,
                self.subchunk2_size,
            )
        except struct.error as exc:
            raise WavError(f"failed to write WAV header: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes) -> "WavHeader":
        """Parse a header from the first bytes of a WAV file."""
        if len(data) < _HEADER_SIZE:
            raise WavError("failed to read WAV header: unexpected end of file")
        return cls(*struct.unpack(_HEADER_FORMAT, data[:_HEADER_SIZE]))


def save_wav(filename: PathType, audio_data: bytes, sample_rate: int, channels: int) -> None:
    """Write raw 16-bit PCM samples to `filename` as a WAV file."""
    header = WavHeader.for_pcm16(sample_rate, channels, len(audio_data)).pack()
    try:
        with open(filename, "wb") as file:
            file.write(header)
            file.write(audio_data)
    except OSError as exc:
        raise WavError(f"failed to write WAV file: {exc}") from exc


def load_wav(filename: PathType) -> tuple[bytes, int, int]:
    """Read a WAV file and return its sample data, sample rate and channel count."""
    try:
        with open(filename, "rb") as file:
            header = WavHeader.unpack(file.read(_HEADER_SIZE))
            if header.chunk_id != b"RIFF" or header.format != b"WAVE":
                raise WavError("not a valid WAV file")
            size = header.subchunk2_size
            data = file.read(size)
    except OSError as exc:
        raise WavError(f"failed to open WAV file: {exc}") from exc

    if size > 0 and not data:
        raise WavError("failed to read audio data: unexpected end of file")
    # A short read leaves the remainder of the declared buffer zeroed.
    return data.ljust(size, b"\0"), header.sample_rate, header.num_channels