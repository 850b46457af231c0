import logging
from typing import Optional, Tuple

from ..sample import Number, SampleType
from .source import Source, nanos_to_samples, seconds_to_nanos

logger = logging.getLogger(__name__)


class TakeDuration(Source):
    """Forwards the inner source until `duration` seconds have been produced.

    The time budget is converted to a sample budget with the channels and
    rate of the inner source's current frame. When the inner format changes,
    the time already spent is deducted and the sample budget is recomputed
    for the new format.
    """

    def __init__(self, source: Source, duration: float) -> None:
        logger.debug(f"Taking {duration}s of source")
        self._input = source
        self._requested_duration = duration
        self._remaining_nanos = seconds_to_nanos(duration)
        self._format: Optional[Tuple[int, int]] = None
        self._segment_count = 0
        self._segment_max = 0
        self._finished = False

    def _resync(self) -> None:
        observed = (self._input.channels, self._input.rate)
        if observed == self._format:
            return

        if self._format is not None:
            channels, rate = self._format
            spent = self._segment_count * 1_000_000_000 // (channels * rate)
            self._remaining_nanos = max(0, self._remaining_nanos - spent)
            logger.debug(
                f"Inner format changed from {self._format} to {observed}, "
                f"{self._remaining_nanos}ns left"
            )

        self._format = observed
        self._segment_count = 0
        self._segment_max = nanos_to_samples(self._remaining_nanos, *observed)

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
        if self._finished:
            return 0

        self._resync()
        remaining = self._segment_max - self._segment_count
        inner = self._input.current_frame_len()
        if inner is None:
            return remaining
        return min(inner, remaining)

    def total_duration(self) -> Optional[float]:
        """The lesser of the inner and requested durations; the requested one when the inner is unknown."""
        inner = self._input.total_duration()
        if inner is None:
            return self._requested_duration
        return min(inner, self._requested_duration)

    def __next__(self) -> Number:
        if self._finished:
            raise StopIteration

        self._resync()
        if self._segment_count >= self._segment_max:
            self._finished = True
            raise StopIteration

        try:
            value = next(self._input)
        except StopIteration:
            self._finished = True
            raise

        self._segment_count += 1
        return value
