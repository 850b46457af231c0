import math
from typing import Optional

from ..sample import F32, SampleType
from .source import Source


class SineWave(Source):
    """An infinite mono sine wave of `frequency` Hz, as `F32` samples."""

    def __init__(self, frequency: float, rate: int = 48000, amplitude: float = 1.0) -> None:
        self._frequency = frequency
        self._rate = rate
        self._amplitude = amplitude
        self._num_sample = 0

    @property
    def frequency(self) -> float:
        return self._frequency

    @property
    def channels(self) -> int:
        return 1

    @property
    def rate(self) -> int:
        return self._rate

    @property
    def sample_type(self) -> SampleType:
        return F32

    def current_frame_len(self) -> Optional[int]:
        return None

    def total_duration(self) -> Optional[float]:
        return None

    def __next__(self) -> float:
        value = 2.0 * math.pi * self._frequency * self._num_sample / self._rate
        self._num_sample += 1
        return self._amplitude * math.sin(value)
