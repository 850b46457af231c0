from abc import ABC, abstractmethod
from typing import Optional

from ..sample import Number, SampleType


class Source(ABC):
    """Abstract interface for a lazily evaluated stream of interleaved samples.

    A source is an iterator: each `next()` produces one sample and exhaustion
    is signalled with `StopIteration`, never with an error.

    Implementations must provide:

    - `channels`: number of interleaved channels in the current frame
    - `rate`: samples per second per channel for the current frame
    - `sample_type`: the `SampleType` describing the produced values
    - `current_frame_len()`: samples left before `channels` or `rate` may
      change, or `None` when the current frame is unbounded. Never returns
      0 unless there is no more data.
    - `total_duration()`: total length in seconds, or `None` when it is
      infinite or unknown (callers must not tell the two apart)
    """

    @property
    @abstractmethod
    def channels(self) -> int: ...

    @property
    @abstractmethod
    def rate(self) -> int: ...

    @property
    @abstractmethod
    def sample_type(self) -> SampleType: ...

    @abstractmethod
    def current_frame_len(self) -> Optional[int]: ...

    @abstractmethod
    def total_duration(self) -> Optional[float]: ...

    @abstractmethod
    def __next__(self) -> Number: ...

    def __iter__(self):
        return self

    # Chaining helpers. Each one moves `self` into a new wrapper; the caller
    # must keep pulling from the returned source only.

    def repeat_infinite(self) -> "Source":
        """Repeats this source forever.

        The samples are stored in a buffer, so the memory used is
        proportional to the length of the sound. Only use it on finite
        sources.
        """
        from .repeat import Repeat

        return Repeat(self)

    def take_duration(self, duration: float) -> "Source":
        """Takes `duration` seconds of this source and then stops."""
        from .take_duration import TakeDuration

        return TakeDuration(self, duration)

    def delay(self, duration: float) -> "Source":
        """Delays the sound by `duration` seconds of silence.

        The silence uses the channels and rate of the first frame of the source.
        """
        from .delay import Delay

        return Delay(self, duration)

    def amplify(self, factor: float) -> "Source":
        from .amplify import Amplify

        return Amplify(self, factor)

    def fade_in(self, duration: float) -> "Source":
        from .fade_in import FadeIn

        return FadeIn(self, duration)

    def speed(self, ratio: float) -> "Source":
        """Changes the play speed. Does not touch the samples, only the reported rate."""
        from .speed import Speed

        return Speed(self, ratio)

    def uniform(
        self, channels: int, rate: int, sample_type: Optional[SampleType] = None
    ) -> "Source":
        """Converts this source to a fixed channel count, rate and sample type."""
        from .uniform import UniformSourceIterator

        return UniformSourceIterator(self, channels, rate, sample_type)


def seconds_to_nanos(seconds: float) -> int:
    return int(round(seconds * 1_000_000_000))


def nanos_to_samples(nanos: int, channels: int, rate: int) -> int:
    """Number of whole interleaved samples that fit in `nanos` nanoseconds."""
    return nanos * rate * channels // 1_000_000_000
