"""Base64 and 16-bit PCM helpers for voice playback."""

from __future__ import annotations

import base64
import binascii
import sys
from array import array
from dataclasses import dataclass


@dataclass(frozen=True)
class PcmBuffer:
    sample_rate: int
    channels: list[list[float]]

    @property
    def number_of_channels(self) -> int:
        return len(self.channels)

    @property
    def frame_count(self) -> int:
        return len(self.channels[0]) if self.channels else 0

    @property
    def duration(self) -> float:
        return self.frame_count / self.sample_rate


def decode_base64(data: str) -> bytes:
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 audio payload: {exc}") from exc


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode_audio_data(data: bytes, sample_rate: int, num_channels: int) -> PcmBuffer:
    """
    Decode little-endian signed 16-bit interleaved PCM into per-channel floats in [-1, 1).
    """
    if sample_rate <= 0:
        raise ValueError("sample_rate must be positive.")
    if num_channels <= 0:
        raise ValueError("num_channels must be positive.")
    if len(data) % (2 * num_channels) != 0:
        raise ValueError(f"PCM payload of {len(data)} bytes does not hold whole {num_channels}-channel frames.")

    samples = array("h")
    samples.frombytes(data)
    if sys.byteorder == "big":
        samples.byteswap()

    channels = [[sample / 32768.0 for sample in samples[channel::num_channels]] for channel in range(num_channels)]
    return PcmBuffer(sample_rate=sample_rate, channels=channels)
