"""Conversion pipeline orchestration for WAV Framer."""

import logging
from pathlib import Path
from typing import NamedTuple

from wav_framer.audio.decoder import WavDecoder
from wav_framer.config import ConversionConfig
from wav_framer.output.factory import get_writer
from wav_framer.output.protocols import FileWriter
from wav_framer.processing.encoder import ClassicWavEncoder
from wav_framer.processing.normalizer import normalize_length

logger = logging.getLogger(__name__)


class ConversionResult(NamedTuple):
    """Summary of a completed conversion."""
    input_path: Path
    output_path: Path
    source_samples: int
    samples: int
    bytes_written: int

    @property
    def trimmed(self) -> int:
        return max(self.source_samples - self.samples, 0)

    @property
    def padded(self) -> int:
        return max(self.samples - self.source_samples, 0)


class FrameConverter:
    """Decode, frame, encode and persist a single WAV file.

    The stages run strictly in sequence and each consumes the previous
    stage's output. Any error propagates to the caller unchanged; the
    destination is only touched by the final write.
    """

    def __init__(
        self,
        config: ConversionConfig | None = None,
        *,
        decoder: WavDecoder | None = None,
        encoder: ClassicWavEncoder | None = None,
        writer: FileWriter | None = None,
    ) -> None:
        """Initialize the converter.

        Args:
            config: Run options; defaults to atomic writes of 1024 samples.
            decoder: Optional decoder for dependency injection.
            encoder: Optional encoder for dependency injection.
            writer: Optional file writer. Built from ``config.write_mode``
                when not provided.
        """
        self.config = config or ConversionConfig()
        self.decoder = decoder or WavDecoder()
        self.encoder = encoder or ClassicWavEncoder()
        self.writer = writer or get_writer(
            self.config.write_mode, sync_directory=self.config.sync_directory
        )

    def convert(self, input_path: Path, output_path: Path) -> ConversionResult:
        """Convert ``input_path`` into a fixed-length WAV at ``output_path``.

        Raises:
            WavReadError: If the input cannot be read
            FormatMismatchError: If the input is not 48 kHz/mono/int/24-bit
            DurableWriteError: If the output cannot be written
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        samples = self.decoder.decode(input_path)
        framed = normalize_length(samples, self.config.target_samples)

        if len(samples) > len(framed):
            logger.info("Trimmed %d trailing samples", len(samples) - len(framed))
        elif len(samples) < len(framed):
            logger.info("Padded %d zero samples", len(framed) - len(samples))

        wav_bytes = self.encoder.encode(framed)
        self.writer.write(output_path, wav_bytes)
        logger.debug("Wrote %d bytes to %s", len(wav_bytes), output_path)

        return ConversionResult(
            input_path=input_path,
            output_path=output_path,
            source_samples=len(samples),
            samples=len(framed),
            bytes_written=len(wav_bytes),
        )
