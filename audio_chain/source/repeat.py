import logging
from typing import List, Optional

from ..sample import Number, SampleType
from .source import Source

logger = logging.getLogger(__name__)


class _Segment:
    """Samples recorded while the inner source kept one channels/rate pair."""

    def __init__(self, channels: int, rate: int) -> None:
        self.channels = channels
        self.rate = rate
        self.samples: List[Number] = []


class Repeat(Source):
    """Replays the inner source forever.

    On first use the inner source is drained into memory, one segment per
    format, and then released. The replay cycles through the segments with
    the channels and rate each one was recorded with.

    The inner source must be finite: memory grows with its length, and an
    unbounded source is buffered until memory runs out.
    """

    def __init__(self, source: Source) -> None:
        logger.debug("Repeating source forever")
        self._input: Optional[Source] = source
        self._sample_type = source.sample_type
        self._initial_format = (source.channels, source.rate)
        self._segments: List[_Segment] = []
        self._segment_index = 0
        self._position = 0

    def _ensure_buffered(self) -> None:
        if self._input is None:
            return

        source = self._input
        current: Optional[_Segment] = None
        while True:
            channels, rate = source.channels, source.rate
            try:
                value = next(source)
            except StopIteration:
                break

            if current is None or (current.channels, current.rate) != (channels, rate):
                current = _Segment(channels, rate)
                self._segments.append(current)
            current.samples.append(value)

        self._input = None
        logger.debug(
            f"Buffered {sum(len(s.samples) for s in self._segments)} samples "
            f"in {len(self._segments)} segment(s)"
        )

    def _current_segment(self) -> Optional[_Segment]:
        self._ensure_buffered()
        if not self._segments:
            return None
        return self._segments[self._segment_index]

    @property
    def channels(self) -> int:
        segment = self._current_segment()
        if segment is None:
            return self._initial_format[0]
        return segment.channels

    @property
    def rate(self) -> int:
        segment = self._current_segment()
        if segment is None:
            return self._initial_format[1]
        return segment.rate

    @property
    def sample_type(self) -> SampleType:
        return self._sample_type

    def current_frame_len(self) -> Optional[int]:
        segment = self._current_segment()
        if segment is None:
            return 0
        return len(segment.samples) - self._position

    def total_duration(self) -> Optional[float]:
        return None

    def __next__(self) -> Number:
        segment = self._current_segment()
        if segment is None:
            raise StopIteration

        value = segment.samples[self._position]
        self._position += 1
        if self._position >= len(segment.samples):
            self._position = 0
            self._segment_index = (self._segment_index + 1) % len(self._segments)
        return value
