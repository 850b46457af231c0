import logging
from typing import Optional, Tuple

from ..sample import Number, SampleType
from .source import Source

logger = logging.getLogger(__name__)


class FadeIn(Source):
    """Ramps the volume linearly from silence to full over `duration` seconds.

    The first sample is scaled by 0. Elapsed time is accumulated per inner
    format, so the ramp keeps rising across a channels or rate change. Once
    the fade window has elapsed, samples are forwarded untouched.
    """

    def __init__(self, source: Source, duration: float) -> None:
        logger.debug(f"Fading in source over {duration}s")
        self._input = source
        self._duration = duration
        self._format: Optional[Tuple[int, int]] = None
        self._previous_elapsed = 0.0
        self._segment_count = 0
        self._done = duration <= 0

    def _elapsed(self) -> float:
        observed = (self._input.channels, self._input.rate)
        if observed != self._format:
            if self._format is not None:
                channels, rate = self._format
                self._previous_elapsed += self._segment_count / (channels * rate)
            self._format = observed
            self._segment_count = 0

        channels, rate = self._format
        return self._previous_elapsed + self._segment_count / (channels * rate)

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
        if self._done:
            return next(self._input)

        elapsed = self._elapsed()
        if elapsed >= self._duration:
            self._done = True
            return next(self._input)

        factor = elapsed / self._duration
        value = next(self._input)
        self._segment_count += 1
        return self._input.sample_type.amplify(value, factor)
