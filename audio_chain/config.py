"""
Configuration classes for audio_chain components.
"""

from dataclasses import dataclass

from .sample import SampleType, get_sample_type


@dataclass
class StreamConfig:
    """
    Output format used when a source is turned into PCM byte chunks.

    Attributes:
        channels: Number of interleaved output channels.
            Default: 1

        rate: Output sample rate in Hz.
            Default: 16000

        sample_type: Output sample type name.
            Supported values: 'i16', 'u16', 'f32'
            Default: 'i16'

        chunk_size: Number of frames (samples per channel) in each chunk
            yielded by `SourceAudioStream.generator()`.
            Default: 320 (20ms at 16kHz)
    """

    channels: int = 1
    rate: int = 16000
    sample_type: str = "i16"
    chunk_size: int = 320

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        if self.channels <= 0:
            raise ValueError(f"channels must be positive, got {self.channels}")

        if self.rate <= 0:
            raise ValueError(f"rate must be positive, got {self.rate}")

        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

        # Raises ValueError for unknown names
        get_sample_type(self.sample_type)

    def resolved_sample_type(self) -> SampleType:
        return get_sample_type(self.sample_type)
