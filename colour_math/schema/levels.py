# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Numeric representations for RGB channel values ("light levels").

A LightLevel describes how one channel is stored outside the fixed-point
core: an n-bit unsigned integer or a float. Each level knows its numpy
dtype, its zero/one/max values and how to convert to and from ``Prop``.

Supported levels:
- U8, U16, U32, U64: unsigned integers; 0 and MAX map to exactly 0 and 1
- F32, F64: floats in [0, 1]; F32 values are rounded to single precision

Channel values are held as plain Python ``int`` / ``float`` so they compare
and hash naturally; numpy is used for dtype metadata and array interop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import DTypeLike

from colour_math.schema.fixed_point import Prop

Channel = Union[int, float]


# =============================================================================
# Level Interface
# =============================================================================


class LightLevel(ABC):
    """A numeric representation for one RGB channel."""

    name: str
    dtype: np.dtype

    @property
    @abstractmethod
    def zero(self) -> Channel:
        """Channel value for 0.0."""

    @property
    @abstractmethod
    def one(self) -> Channel:
        """Channel value for 1.0."""

    @property
    def max_value(self) -> Channel:
        return self.one

    @property
    def half(self) -> Channel:
        return self.from_prop(Prop.HALF)

    @property
    @abstractmethod
    def is_float(self) -> bool: ...

    @abstractmethod
    def validate(self, value: Channel) -> None:
        """Raise TypeError/ValueError unless ``value`` is a channel value."""

    @abstractmethod
    def coerce(self, value: Channel) -> Channel:
        """Clamp a caller-supplied number into this level's range."""

    @abstractmethod
    def to_prop(self, value: Channel) -> Prop: ...

    @abstractmethod
    def from_prop(self, prop: Prop) -> Channel: ...

    def to_float(self, value: Channel) -> float:
        return self.to_prop(value).to_float()

    def from_float(self, value: float) -> Channel:
        return self.from_prop(Prop.from_float(value))


# =============================================================================
# Concrete Levels
# =============================================================================


@dataclass(frozen=True)
class UnsignedLevel(LightLevel):
    """n-bit unsigned integer channels (n = dtype width)."""
    name: str
    dtype: np.dtype

    @property
    def bits(self) -> int:
        return int(np.iinfo(self.dtype).bits)

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return int(np.iinfo(self.dtype).max)

    @property
    def is_float(self) -> bool:
        return False

    def validate(self, value: Channel) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(
                f"{self.name} channel must be an integer, got {type(value).__name__}"
            )
        if not 0 <= int(value) <= self.one:
            raise ValueError(f"{self.name} channel must be 0-{self.one}, got {value}")

    def coerce(self, value: Channel) -> int:
        return min(max(int(value), 0), self.one)

    def to_prop(self, value: Channel) -> Prop:
        self.validate(value)
        return Prop.from_unsigned(int(value), bits=self.bits)

    def from_prop(self, prop: Prop) -> int:
        return prop.to_unsigned(bits=self.bits)


@dataclass(frozen=True)
class FloatLevel(LightLevel):
    """Floating point channels in [0, 1]."""
    name: str
    dtype: np.dtype

    @property
    def zero(self) -> float:
        return 0.0

    @property
    def one(self) -> float:
        return 1.0

    @property
    def is_float(self) -> bool:
        return True

    def _quantize(self, value: float) -> float:
        return float(self.dtype.type(value))

    def validate(self, value: Channel) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
            raise TypeError(
                f"{self.name} channel must be a float, got {type(value).__name__}"
            )
        if not 0.0 <= float(value) <= 1.0:
            raise ValueError(f"{self.name} channel must be 0-1, got {value}")

    def coerce(self, value: Channel) -> float:
        value = float(value)
        if value != value:
            raise ValueError(f"{self.name} channel cannot be NaN")
        return self._quantize(min(max(value, 0.0), 1.0))

    def to_prop(self, value: Channel) -> Prop:
        self.validate(value)
        return Prop.from_float(float(value))

    def from_prop(self, prop: Prop) -> float:
        return self._quantize(prop.to_float())


U8 = UnsignedLevel("u8", np.dtype(np.uint8))
U16 = UnsignedLevel("u16", np.dtype(np.uint16))
U32 = UnsignedLevel("u32", np.dtype(np.uint32))
U64 = UnsignedLevel("u64", np.dtype(np.uint64))
F32 = FloatLevel("f32", np.dtype(np.float32))
F64 = FloatLevel("f64", np.dtype(np.float64))

LEVELS: dict[str, LightLevel] = {
    level.name: level for level in (U8, U16, U32, U64, F32, F64)
}


def level_for(key: Union[str, DTypeLike]) -> LightLevel:
    """
    Look up a level by name ("u8", "f64", ...) or numpy dtype.

    Raises:
        KeyError: No supported level matches
    """
    if isinstance(key, str) and key in LEVELS:
        return LEVELS[key]
    try:
        dtype = np.dtype(key)
    except TypeError as exc:
        raise KeyError(f"No light level for {key!r}") from exc
    for level in LEVELS.values():
        if level.dtype == dtype:
            return level
    raise KeyError(f"No light level for dtype {dtype}")
