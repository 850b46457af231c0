"""Numeric model for the values carried in each channel slot of a stream.

A stream yields plain Python numbers; the ``SampleType`` reported by the
stream tells combinators how to interpret, scale and convert them.
"""

import math
from abc import ABC, abstractmethod
from typing import Union

import numpy as np

Number = Union[int, float]


class SampleType(ABC):
    """Abstract interface for a sample numeric type.

    Implementations must provide:

    - `name`: short identifier ("i16", "u16", "f32")
    - `dtype`: numpy dtype used when packing samples to bytes
    - `zero_value()`: the value representing silence
    - `clamp()`: saturate a value into the type's native range
    - `to_f32()` / `from_f32()`: conversion through a normalized float
    """

    name: str = ""

    @property
    @abstractmethod
    def dtype(self) -> np.dtype: ...

    @property
    def sample_size(self) -> int:
        return self.dtype.itemsize

    @property
    @abstractmethod
    def min_value(self) -> Number: ...

    @property
    @abstractmethod
    def max_value(self) -> Number: ...

    @abstractmethod
    def zero_value(self) -> Number: ...

    @abstractmethod
    def to_f32(self, value: Number) -> float: ...

    @abstractmethod
    def from_f32(self, value: float) -> Number: ...

    def clamp(self, value: Number) -> Number:
        if value < self.min_value:
            return self.min_value
        if value > self.max_value:
            return self.max_value
        return value

    def amplify(self, value: Number, factor: float) -> Number:
        """Scale a sample around the zero value, saturating instead of wrapping."""
        zero = self.zero_value()
        return self._round(self.clamp(zero + (value - zero) * factor))

    def lerp(self, first: Number, second: Number, numerator: int, denominator: int) -> Number:
        """Linear interpolation at `numerator / denominator` between two samples."""
        return self._round(first + (second - first) * numerator / denominator)

    def convert(self, value: Number, source_type: "SampleType") -> Number:
        if source_type is self:
            return value
        return self.from_f32(source_type.to_f32(value))

    def to_i16(self, value: Number) -> int:
        return I16.convert(value, self)

    def to_u16(self, value: Number) -> int:
        return U16.convert(value, self)

    def _round(self, value: float) -> Number:
        return int(round(value))

    def __repr__(self):
        return f"SampleType({self.name})"


class I16SampleType(SampleType):
    name = "i16"

    _info = np.iinfo(np.int16)

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(np.int16)

    @property
    def min_value(self) -> int:
        return int(self._info.min)

    @property
    def max_value(self) -> int:
        return int(self._info.max)

    def zero_value(self) -> int:
        return 0

    def to_f32(self, value: Number) -> float:
        if value < 0:
            return value / -float(self.min_value)
        return value / float(self.max_value)

    def from_f32(self, value: float) -> int:
        value = min(max(value, -1.0), 1.0)
        if value < 0:
            return int(round(value * -self.min_value))
        return int(round(value * self.max_value))


class U16SampleType(SampleType):
    """Unsigned 16-bit PCM, zero-centered at 32768."""

    name = "u16"

    _info = np.iinfo(np.uint16)
    _offset = 32768

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(np.uint16)

    @property
    def min_value(self) -> int:
        return int(self._info.min)

    @property
    def max_value(self) -> int:
        return int(self._info.max)

    def zero_value(self) -> int:
        return self._offset

    def to_f32(self, value: Number) -> float:
        return I16.to_f32(value - self._offset)

    def from_f32(self, value: float) -> int:
        return I16.from_f32(value) + self._offset


class F32SampleType(SampleType):
    name = "f32"

    _info = np.finfo(np.float32)

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(np.float32)

    @property
    def min_value(self) -> float:
        return float(self._info.min)

    @property
    def max_value(self) -> float:
        return float(self._info.max)

    def zero_value(self) -> float:
        return 0.0

    def to_f32(self, value: Number) -> float:
        return float(value)

    def from_f32(self, value: float) -> float:
        return float(value)

    def _round(self, value: float) -> float:
        if math.isnan(value):
            return 0.0
        return float(value)


I16 = I16SampleType()
U16 = U16SampleType()
F32 = F32SampleType()

_SAMPLE_TYPES = {sample_type.name: sample_type for sample_type in (I16, U16, F32)}


def get_sample_type(name: Union[str, SampleType]) -> SampleType:
    if isinstance(name, SampleType):
        return name

    try:
        return _SAMPLE_TYPES[name]
    except KeyError:
        raise ValueError(
            f"Unknown sample type '{name}', expected one of {sorted(_SAMPLE_TYPES)}"
        ) from None
