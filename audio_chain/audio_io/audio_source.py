from abc import ABC, abstractmethod
from typing import Iterator

import numpy as np


class AudioSource(ABC):
    """Abstract interface for producers of chunked PCM bytes.

    This is the byte-oriented counterpart of `audio_chain.source.Source`,
    for consumers that read fixed-format chunks rather than single samples.

    Implementations must provide:

    - `rate`: sample rate in Hz
    - `chunk_size`: number of frames per chunk yielded
    - `channels`: number of interleaved audio channels
    - `sample_format`: numpy dtype of the packed samples
    - `sample_size`: bytes per sample (e.g., 2 for 16-bit PCM)
    - `resume()`: start or resume streaming
    - `pause()`: stop streaming (generators end at the next chunk)
    - `generator()`: yield PCM byte chunks
    """

    @property
    @abstractmethod
    def channels(self) -> int: ...

    @property
    @abstractmethod
    def rate(self) -> int: ...

    @property
    @abstractmethod
    def chunk_size(self) -> int: ...

    @property
    @abstractmethod
    def sample_format(self) -> np.dtype: ...

    @property
    @abstractmethod
    def sample_size(self) -> int: ...

    @abstractmethod
    def resume(self) -> None: ...

    @abstractmethod
    def pause(self) -> None: ...

    @abstractmethod
    def generator(self) -> Iterator[bytes]: ...
