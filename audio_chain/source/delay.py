import logging
from typing import Optional

from ..sample import Number, SampleType
from .source import Source, nanos_to_samples, seconds_to_nanos
from .zero import Zero

logger = logging.getLogger(__name__)


class Delay(Source):
    """Plays `duration` seconds of silence, then the inner source.

    The silence uses the channels and rate of the inner source's first
    frame, read before any of its samples are consumed.
    """

    def __init__(self, source: Source, duration: float) -> None:
        channels = source.channels
        rate = source.rate
        num_samples = nanos_to_samples(seconds_to_nanos(duration), channels, rate)
        logger.debug(
            f"Delaying source by {duration}s ({num_samples} silent samples, "
            f"{channels} channels at {rate}Hz)"
        )

        self._input = source
        self._requested_duration = duration
        self._silence = Zero(channels, rate, source.sample_type, num_samples)

    def _in_silence(self) -> bool:
        return self._silence.current_frame_len() > 0

    @property
    def channels(self) -> int:
        if self._in_silence():
            return self._silence.channels
        return self._input.channels

    @property
    def rate(self) -> int:
        if self._in_silence():
            return self._silence.rate
        return self._input.rate

    @property
    def sample_type(self) -> SampleType:
        return self._input.sample_type

    def current_frame_len(self) -> Optional[int]:
        if self._in_silence():
            return self._silence.current_frame_len()
        return self._input.current_frame_len()

    def total_duration(self) -> Optional[float]:
        duration = self._input.total_duration()
        if duration is None:
            return None
        return duration + self._requested_duration

    def __next__(self) -> Number:
        if self._in_silence():
            return next(self._silence)
        return next(self._input)
