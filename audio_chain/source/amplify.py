import logging
from typing import Optional

from ..sample import Number, SampleType
from .source import Source

logger = logging.getLogger(__name__)


class Amplify(Source):
    """Multiplies every sample of the inner source by a constant factor."""

    def __init__(self, source: Source, factor: float) -> None:
        logger.debug(f"Amplifying source by {factor}")
        self._input = source
        self._factor = factor

    @property
    def factor(self) -> float:
        return self._factor

    @property
    def channels(self) -> int:
        return self._input.channels

    @property
    def rate(self) -> int:
        return self._input.rate

    @property
    def sample_type(self) -> SampleType:
        return self._input.sample_type

    def current_frame_len(self) -> Optional[int]:
        return self._input.current_frame_len()

    def total_duration(self) -> Optional[float]:
        return self._input.total_duration()

    def __next__(self) -> Number:
        value = next(self._input)
        return self._input.sample_type.amplify(value, self._factor)
