"""Normalization of a source to a fixed channel count, rate and sample type.

Each inner frame segment (a run of samples sharing one channels/rate pair) is
converted on its own by a `_SegmentConverter`:

- output frame `j` sits at source position `j * from_rate / to_rate`; the
  two surrounding input frames are linearly interpolated and the last input
  frame is held past the end of the segment. A segment of `n` input frames
  therefore yields exactly `ceil(n * to_rate / from_rate)` output frames.
- output channel `c` reads input channel `c` when it exists, otherwise
  `c % from_channels`: mono is duplicated to every output channel, and
  surplus input channels are dropped.
- values are converted to the target sample type last.
"""

import logging
import math
from typing import List, Optional

from ..sample import Number, SampleType
from .source import Source

logger = logging.getLogger(__name__)


class _SegmentConverter:
    def __init__(
        self,
        source: Source,
        frame_len: Optional[int],
        to_channels: int,
        to_rate: int,
        to_type: SampleType,
    ) -> None:
        self._input = source
        self._from_channels = source.channels
        self._from_type = source.sample_type
        self._to_channels = to_channels
        self._to_type = to_type

        from_rate = source.rate
        divisor = math.gcd(from_rate, to_rate)
        self._from_step = from_rate // divisor
        self._to_step = to_rate // divisor

        self._samples_left = frame_len
        self.consumed = 0

        if frame_len is None:
            self._output_frames: Optional[int] = None
        else:
            input_frames = frame_len // self._from_channels
            self._output_frames = -(-input_frames * self._to_step // self._from_step)

        self._started = False
        self._finished = False
        self._current: Optional[List[Number]] = None
        self._next: Optional[List[Number]] = None
        self._current_index = 0
        self._output_index = 0
        self._pending: List[Number] = []
        self._pending_position = 0
        self._emitted = 0

    @property
    def bounded(self) -> bool:
        return self._output_frames is not None

    def remaining(self) -> Optional[int]:
        if self._output_frames is None:
            return None
        return self._output_frames * self._to_channels - self._emitted

    def _read_sample(self) -> Optional[Number]:
        if self._samples_left is not None:
            if self._samples_left == 0:
                return None
            self._samples_left -= 1
        try:
            value = next(self._input)
        except StopIteration:
            self._samples_left = 0
            return None
        self.consumed += 1
        return value

    def _read_frame(self) -> Optional[List[Number]]:
        frame = []
        for _ in range(self._from_channels):
            value = self._read_sample()
            if value is None:
                if frame:
                    logger.debug(f"Dropping partial frame of {len(frame)} sample(s)")
                return None
            frame.append(value)
        return frame

    def drain(self) -> None:
        """Consumes what is left of a bounded segment so the next one starts aligned."""
        if self._samples_left is None:
            return
        while self._read_sample() is not None:
            pass

    def _finish(self):
        self._finished = True
        self.drain()
        raise StopIteration

    def _compute_output_frame(self) -> List[Number]:
        if self._output_frames is not None and self._output_index >= self._output_frames:
            self._finish()

        if not self._started:
            self._started = True
            self._current = self._read_frame()
            self._next = self._read_frame() if self._current is not None else None

        position = self._output_index * self._from_step
        index = position // self._to_step
        numerator = position % self._to_step

        while self._current is not None and self._current_index < index:
            self._current = self._next
            self._next = self._read_frame() if self._current is not None else None
            self._current_index += 1

        if self._current is None:
            self._finish()

        current = self._current
        following = self._next if self._next is not None else current

        frame = []
        for channel in range(self._to_channels):
            source_channel = channel % self._from_channels
            value = self._from_type.lerp(
                current[source_channel],
                following[source_channel],
                numerator,
                self._to_step,
            )
            frame.append(self._to_type.convert(value, self._from_type))

        self._output_index += 1
        return frame

    def __next__(self) -> Number:
        if self._finished:
            raise StopIteration

        if self._pending_position >= len(self._pending):
            self._pending = self._compute_output_frame()
            self._pending_position = 0

        value = self._pending[self._pending_position]
        self._pending_position += 1
        self._emitted += 1
        return value


class UniformSourceIterator(Source):
    """Presents the inner source with fixed channels, rate and sample type.

    Useful for consumers that cannot follow format changes, such as an
    output buffer or a mixer summing several sources.

    Args:
        source: The source to convert.
        channels: Target channel count.
        rate: Target sample rate in Hz.
        sample_type: Target sample type. Defaults to the inner source's.
    """

    def __init__(
        self,
        source: Source,
        channels: int,
        rate: int,
        sample_type: Optional[SampleType] = None,
    ) -> None:
        logger.debug(
            f"Converting source to {channels} channels at {rate}Hz"
            + (f" ({sample_type.name})" if sample_type is not None else "")
        )
        self._input = source
        self._target_channels = channels
        self._target_rate = rate
        self._target_type = sample_type if sample_type is not None else source.sample_type
        self._total_duration = source.total_duration()
        self._converter: Optional[_SegmentConverter] = None
        self._exhausted = False

    def _bootstrap(self) -> Optional[_SegmentConverter]:
        frame_len = self._input.current_frame_len()
        if frame_len == 0:
            self._exhausted = True
            return None

        logger.debug(
            f"Inner frame: {frame_len} samples, {self._input.channels} channels "
            f"at {self._input.rate}Hz"
        )
        return _SegmentConverter(
            self._input,
            frame_len,
            self._target_channels,
            self._target_rate,
            self._target_type,
        )

    def _active_converter(self) -> Optional[_SegmentConverter]:
        """Returns the converter of the current segment, skipping segments with no output."""
        while not self._exhausted:
            if self._converter is None:
                self._converter = self._bootstrap()
                continue

            remaining = self._converter.remaining()
            if remaining is None or remaining > 0:
                return self._converter

            self._converter.drain()
            if self._converter.consumed == 0:
                self._exhausted = True
            self._converter = None

        return None

    @property
    def channels(self) -> int:
        return self._target_channels

    @property
    def rate(self) -> int:
        return self._target_rate

    @property
    def sample_type(self) -> SampleType:
        return self._target_type

    def current_frame_len(self) -> Optional[int]:
        converter = self._active_converter()
        if converter is None:
            return 0
        return converter.remaining()

    def total_duration(self) -> Optional[float]:
        return self._total_duration

    def __next__(self) -> Number:
        while True:
            converter = self._active_converter()
            if converter is None:
                raise StopIteration

            try:
                return next(converter)
            except StopIteration:
                pass

            self._converter = None
            if not converter.bounded or converter.consumed == 0:
                # An unbounded frame lasts until the inner source ends, and a
                # bounded frame that yielded nothing means the producer lied.
                self._exhausted = True
