import logging
from typing import Optional

from ..sample import Number, SampleType
from .source import Source

logger = logging.getLogger(__name__)


class Speed(Source):
    """Reports the inner rate multiplied by `ratio`; the samples are left as they are.

    A consumer playing at the reported rate hears the sound faster (and
    higher pitched) for a ratio above 1, slower for a ratio below 1.
    """

    def __init__(self, source: Source, ratio: float) -> None:
        logger.debug(f"Changing source speed by {ratio}")
        self._input = source
        self._ratio = ratio

    @property
    def ratio(self) -> float:
        return self._ratio

    @property
    def channels(self) -> int:
        return self._input.channels

    @property
    def rate(self) -> int:
        return int(round(self._input.rate * self._ratio))

    @property
    def sample_type(self) -> SampleType:
        return self._input.sample_type

    def current_frame_len(self) -> Optional[int]:
        return self._input.current_frame_len()

    def total_duration(self) -> Optional[float]:
        duration = self._input.total_duration()
        if duration is None:
            return None
        return duration / self._ratio

    def __next__(self) -> Number:
        return next(self._input)
