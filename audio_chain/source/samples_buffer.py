from typing import Iterable, Optional

from ..sample import I16, Number, SampleType
from .source import Source


class SamplesBuffer(Source):
    """A finite source backed by an in-memory list of interleaved samples.

    Args:
        channels: Number of interleaved channels.
        rate: Sample rate in Hz.
        samples: Interleaved sample values, copied at construction.
        sample_type: Numeric type of the values (default `I16`).

    Example:
        buffer = SamplesBuffer(2, 44100, [0, 0, 1000, -1000])
        louder = buffer.amplify(2.0)
    """

    def __init__(
        self,
        channels: int,
        rate: int,
        samples: Iterable[Number],
        sample_type: SampleType = I16,
    ) -> None:
        self._channels = channels
        self._rate = rate
        self._sample_type = sample_type
        self._samples = list(samples)
        self._position = 0

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def rate(self) -> int:
        return self._rate

    @property
    def sample_type(self) -> SampleType:
        return self._sample_type

    def current_frame_len(self) -> Optional[int]:
        return len(self._samples) - self._position

    def total_duration(self) -> Optional[float]:
        return len(self._samples) / (self._channels * self._rate)

    def __next__(self) -> Number:
        if self._position >= len(self._samples):
            raise StopIteration
        value = self._samples[self._position]
        self._position += 1
        return value
