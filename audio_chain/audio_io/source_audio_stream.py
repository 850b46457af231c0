"""SourceAudioStream: a `Source` consumed as chunks of PCM bytes.

The source is normalized with `UniformSourceIterator` to the format of a
`StreamConfig`, so every chunk has the same channels, rate and sample type
regardless of format changes in the wrapped source.
"""

import itertools
import logging
from typing import Iterator, List, Optional

import numpy as np

from ..config import StreamConfig
from ..sample import Number
from ..source.source import Source
from ..source.uniform import UniformSourceIterator
from .audio_data import AudioData
from .audio_source import AudioSource

logger = logging.getLogger(__name__)


class SourceAudioStream(AudioSource):
    """Yields a source as fixed-size chunks of little-endian PCM bytes.

    Args:
        source: The source to stream. It is owned by the stream afterwards.
        config: Output format. Defaults to `StreamConfig()` (16kHz mono i16).

    Example:
        stream = SourceAudioStream(SineWave(440).take_duration(1.0))
        with stream:
            for chunk in stream.generator():
                sink.play(chunk)
    """

    def __init__(self, source: Source, config: Optional[StreamConfig] = None) -> None:
        self._config = config if config else StreamConfig()
        self._sample_type = self._config.resolved_sample_type()
        self._dtype = self._sample_type.dtype.newbyteorder("<")
        self._source = UniformSourceIterator(
            source,
            self._config.channels,
            self._config.rate,
            self._sample_type,
        )
        self._closed = True

    # AudioSource interface -----------------------------------------------------
    @property
    def channels(self) -> int:
        return self._config.channels

    @property
    def rate(self) -> int:
        return self._config.rate

    @property
    def chunk_size(self) -> int:
        return self._config.chunk_size

    @property
    def sample_format(self) -> np.dtype:
        return self._dtype

    @property
    def sample_size(self) -> int:
        return self._sample_type.sample_size

    def __enter__(self):
        self.resume()

        return self

    def __exit__(self, type, value, traceback):
        self.pause()

    def pause(self) -> None:
        self._closed = True

    def resume(self) -> None:
        self._closed = False

    def _pack(self, samples: List[Number]) -> bytes:
        return np.asarray(samples, dtype=self._dtype).tobytes()

    def _take(self, count: Optional[int]) -> List[Number]:
        return list(itertools.islice(self._source, count))

    def generator(self) -> Iterator[bytes]:
        samples_per_chunk = self.chunk_size * self.channels

        while not self._closed:
            samples = self._take(samples_per_chunk)
            if not samples:
                return

            yield self._pack(samples)

            # A short chunk means the source is exhausted
            if len(samples) < samples_per_chunk:
                return

    def read(self, max_duration: Optional[float] = None) -> AudioData:
        """Collects the source into a single `AudioData`.

        Args:
            max_duration: Maximum number of seconds to read. Required when the
                source has no known total duration.

        Raises:
            ValueError: If `max_duration` is None and the source may be infinite.
        """
        if max_duration is None:
            if self._source.total_duration() is None:
                raise ValueError(
                    "max_duration is required for a source without a known duration"
                )
            count = None
        else:
            count = int(round(max_duration * self.rate)) * self.channels

        samples = self._take(count)
        logger.debug(f"Read {len(samples)} samples")

        return AudioData(
            content=self._pack(samples),
            sample_size=self.sample_size,
            rate=self.rate,
            channels=self.channels,
        )
