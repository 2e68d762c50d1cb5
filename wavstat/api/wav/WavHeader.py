"""Parsed WAV header fields."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WavHeader:
    """Fields from the fmt and data sub-chunks of a WAV file."""

    audio_format: int
    channels: int
    sample_rate: int
    bits_per_sample: int
    data_length: int

    @property
    def byte_rate(self) -> float:
        """Bytes of sample data per second of audio."""
        return self.sample_rate * self.channels * (self.bits_per_sample / 8)
