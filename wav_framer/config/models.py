"""Pydantic models for WAV Framer configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wav_framer.config.enums import WriteMode
from wav_framer.constants import (
    PCM_FORMAT_TAG,
    TARGET_BITS_PER_SAMPLE,
    TARGET_CHANNELS,
    TARGET_SAMPLE_RATE,
    TARGET_SAMPLES,
)


class PcmFormat(BaseModel):
    """Linear PCM format written to the output ``fmt `` chunk."""

    model_config = ConfigDict(frozen=True)

    audio_format: int = Field(PCM_FORMAT_TAG, description="WAVE format tag (1 = PCM)")
    channels: int = Field(TARGET_CHANNELS, ge=1)
    sample_rate: int = Field(TARGET_SAMPLE_RATE, ge=1)
    bits_per_sample: int = Field(TARGET_BITS_PER_SAMPLE, ge=8, multiple_of=8)

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8

    @property
    def block_align(self) -> int:
        """Bytes per frame across all channels."""
        return self.channels * self.bytes_per_sample

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.block_align


class ConversionConfig(BaseModel):
    """Options for a single conversion run."""

    model_config = ConfigDict(frozen=True)

    write_mode: WriteMode = WriteMode.ATOMIC
    sync_directory: bool = Field(True, description="fsync the parent directory after an atomic rename")
    target_samples: int = Field(TARGET_SAMPLES, ge=1, description="Number of samples in the output file")

    @field_validator("write_mode", mode="before")
    @classmethod
    def validate_write_mode(cls, value) -> WriteMode:
        if isinstance(value, str) and not isinstance(value, WriteMode):
            try:
                return WriteMode(value.lower())
            except ValueError:
                raise ValueError(f"Invalid write mode: {value}")
        return value
