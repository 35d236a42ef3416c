"""Input format validation for WAV Framer."""

from pathlib import Path

from wav_framer.audio.info import AudioInfo
from wav_framer.config import SampleEncoding
from wav_framer.constants import TARGET_BITS_PER_SAMPLE, TARGET_CHANNELS, TARGET_SAMPLE_RATE
from wav_framer.exceptions import FormatMismatchError


class AudioValidator:
    """Validate a WAV format descriptor against the required input profile.

    The profile is strict: 48 kHz, mono, integer PCM, 24 bits per sample.
    Nothing is coerced; the first mismatching field is reported.
    """

    def __init__(
        self,
        sample_rate: int = TARGET_SAMPLE_RATE,
        channels: int = TARGET_CHANNELS,
        bits_per_sample: int = TARGET_BITS_PER_SAMPLE,
    ) -> None:
        self.sample_rate = sample_rate
        self.channels = channels
        self.bits_per_sample = bits_per_sample

    def validate(self, info: AudioInfo, path: Path | None = None) -> None:
        """Check sample rate, channel count, encoding and bit depth in order.

        Args:
            info: Format descriptor read from the input header
            path: Input path, attached to the error for context

        Raises:
            FormatMismatchError: On the first field that differs from the profile
        """
        if info.samplerate != self.sample_rate:
            raise FormatMismatchError(
                "sample_rate", self.sample_rate, info.samplerate,
                f"Expected {self.sample_rate} Hz, got {info.samplerate} (no resample)",
                path=path,
            )
        if info.channels != self.channels:
            raise FormatMismatchError(
                "channels", self.channels, info.channels,
                f"Expected mono ({self.channels} channel), got {info.channels}",
                path=path,
            )
        if info.encoding is not SampleEncoding.INT:
            actual = info.encoding if info.encoding is not None else info.subtype
            raise FormatMismatchError(
                "encoding", SampleEncoding.INT, actual,
                f"Expected integer PCM, got {actual}",
                path=path,
            )
        if info.bits_per_sample != self.bits_per_sample:
            raise FormatMismatchError(
                "bit_depth", self.bits_per_sample, info.bits_per_sample,
                f"Expected {self.bits_per_sample}-bit PCM, got {info.bits_per_sample}-bit",
                path=path,
            )
