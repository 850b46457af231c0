from typing import Optional

from ..sample import I16, Number, SampleType
from .source import Source


class Zero(Source):
    """Silence in a fixed format, either infinite or `num_samples` long."""

    def __init__(
        self,
        channels: int,
        rate: int,
        sample_type: SampleType = I16,
        num_samples: Optional[int] = None,
    ) -> None:
        self._channels = channels
        self._rate = rate
        self._sample_type = sample_type
        self._remaining = num_samples

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
        return self._remaining

    def total_duration(self) -> Optional[float]:
        if self._remaining is None:
            return None
        return self._remaining / (self._channels * self._rate)

    def __next__(self) -> Number:
        if self._remaining is not None:
            if self._remaining == 0:
                raise StopIteration
            self._remaining -= 1
        return self._sample_type.zero_value()
