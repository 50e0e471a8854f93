# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Fixed-point proportional numbers.

Three encodings share one denominator, ``ONE`` (2**64 - 1):

- Prop: a proportion in [0, 1]
- UFDRNumber: an unsigned sum of proportions (valid sums lie in [0, 3])
- FDRNumber: a signed difference, used for deltas and hue positions

Python integers are unbounded, so every intermediate product is exact and
nothing can wrap. Division scales the numerator first: ``a * ONE // b``.

Conversions:
- Unsigned n-bit integers (n in 8, 16, 32, 64) map exactly, because
  2**64 - 1 is divisible by 2**n - 1. Zero and MAX are fixed points.
- Floats map through the whole/fractional split, so integral values are
  exact and a float -> number -> float round trip differs by no more than
  ``FLOAT_EPSILON`` (relative).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union


# =============================================================================
# Encoding Constants
# =============================================================================

ONE = 2**64 - 1

# Relative error bound for float -> fixed point -> float
FLOAT_EPSILON = 2.0**-52

# One part in 10**12 of the unit range
DEFAULT_TOLERANCE = ONE // 10**12

UNSIGNED_WIDTHS = (8, 16, 32, 64)


# =============================================================================
# Helpers
# =============================================================================


def _check_raw(raw: object, type_name: str) -> None:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"{type_name} raw value must be an int, got {type(raw).__name__}")


def _unsigned_max(bits: int) -> int:
    if bits not in UNSIGNED_WIDTHS:
        raise ValueError(f"Unsigned width must be one of {UNSIGNED_WIDTHS}, got {bits}")
    return (1 << bits) - 1


def _raw_from_float(value: float) -> int:
    """Encode a finite, non-negative float.

    The whole part is scaled by ``ONE`` exactly; only the fraction goes
    through float multiplication (float(ONE) == 2**64).
    """
    whole = int(value)
    fraction = value - whole
    return whole * ONE + min(int(fraction * ONE), ONE)


def _float_from_raw(raw: int) -> float:
    """Decode a non-negative raw value (int / int division rounds correctly)."""
    whole, remainder = divmod(raw, ONE)
    return whole + remainder / ONE


def _check_float(value: float, type_name: str) -> float:
    value = float(value)
    if value != value or value in (float("inf"), float("-inf")):
        raise ValueError(f"Cannot convert {value} to {type_name}")
    return value


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("fixed-point division by zero")
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def _tolerance_raw(tolerance: Optional[Prop]) -> int:
    if tolerance is None:
        return DEFAULT_TOLERANCE
    return Prop.coerce(tolerance).raw


# =============================================================================
# Proportion
# =============================================================================


@dataclass(frozen=True, slots=True, order=True)
class Prop:
    """
    A proportion in [0, 1], stored as ``raw / ONE``.

    Arithmetic that can leave [0, 1] widens the result:
    ``Prop + Prop`` is a UFDRNumber, ``Prop - Prop`` is an FDRNumber and
    ``Prop * int`` is a UFDRNumber. ``Prop * Prop`` and ``Prop / Prop``
    (numerator <= denominator) stay proportions.

    Attributes:
        raw: Integer numerator, 0 <= raw <= ONE
    """
    raw: int

    ZERO: ClassVar[Prop]
    HALF: ClassVar[Prop]
    ONE: ClassVar[Prop]

    def __post_init__(self) -> None:
        """Validate the raw encoding."""
        _check_raw(self.raw, "Prop")
        if not 0 <= self.raw <= ONE:
            raise ValueError(f"Prop raw value must be 0-{ONE}, got {self.raw}")

    # -- Construction ---------------------------------------------------------

    @classmethod
    def from_float(cls, value: float) -> Prop:
        """Encode a float, clamping it to [0, 1]."""
        value = _check_float(value, "Prop")
        if value <= 0.0:
            return cls.ZERO
        if value >= 1.0:
            return cls.ONE
        return cls(_raw_from_float(value))

    @classmethod
    def from_unsigned(cls, value: int, bits: int = 8) -> Prop:
        """Encode an n-bit unsigned integer, clamping it to [0, MAX]."""
        maximum = _unsigned_max(bits)
        value = min(max(int(value), 0), maximum)
        return cls(value * (ONE // maximum))

    @classmethod
    def coerce(cls, value: Union[Prop, UFDRNumber, FDRNumber, float]) -> Prop:
        """Build a proportion from any number, clamping it to [0, 1]."""
        if isinstance(value, Prop):
            return value
        if isinstance(value, (UFDRNumber, FDRNumber)):
            return value.clamp_to_prop()
        return cls.from_float(value)

    # -- Conversion -----------------------------------------------------------

    def to_float(self) -> float:
        return self.raw / ONE

    def __float__(self) -> float:
        return self.to_float()

    def to_unsigned(self, bits: int = 8) -> int:
        """Decode to an n-bit unsigned integer (floor)."""
        maximum = _unsigned_max(bits)
        return self.raw // (ONE // maximum)

    def __str__(self) -> str:
        return f"{self.to_float():.6f}"

    # -- Arithmetic -----------------------------------------------------------

    def complement(self) -> Prop:
        """1 - self."""
        return Prop(ONE - self.raw)

    def abs_diff(self, other: Prop) -> Prop:
        return Prop(abs(self.raw - other.raw))

    def approx_eq(self, other: Prop, tolerance: Optional[Prop] = None) -> bool:
        """Equality within ``tolerance`` (default: one part in 10**12)."""
        if self.raw == other.raw:
            return True
        return abs(self.raw - other.raw) <= _tolerance_raw(tolerance)

    def __add__(self, other):
        if isinstance(other, (Prop, UFDRNumber)):
            return UFDRNumber(self.raw + other.raw)
        if isinstance(other, FDRNumber):
            return FDRNumber(self.raw + other.raw)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (Prop, UFDRNumber, FDRNumber)):
            return FDRNumber(self.raw - other.raw)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Prop):
            return Prop(self.raw * other.raw // ONE)
        if isinstance(other, UFDRNumber):
            return UFDRNumber(self.raw * other.raw // ONE)
        if isinstance(other, int) and not isinstance(other, bool):
            if other < 0:
                return FDRNumber(self.raw * other)
            return UFDRNumber(self.raw * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Prop):
            if other.raw == 0:
                raise ZeroDivisionError("Prop division by zero")
            if self.raw > other.raw:
                raise ValueError("Prop division requires numerator <= denominator")
            return Prop(self.raw * ONE // other.raw)
        if isinstance(other, int) and not isinstance(other, bool):
            if other <= 0:
                raise ZeroDivisionError("Prop division by a non-positive integer")
            return Prop(self.raw // other)
        return NotImplemented


Prop.ZERO = Prop(0)
Prop.HALF = Prop(ONE // 2)
Prop.ONE = Prop(ONE)


# =============================================================================
# Unsigned Sum
# =============================================================================


@dataclass(frozen=True, slots=True, order=True)
class UFDRNumber:
    """
    An unsigned fixed-point number, typically the sum of three proportions.

    Any non-negative raw value is representable; ``is_valid_sum`` checks the
    [0, 3] range that colour sums must respect. Subtraction that would go
    below zero raises rather than wrapping.

    Attributes:
        raw: Integer numerator, raw >= 0
    """
    raw: int

    ZERO: ClassVar[UFDRNumber]
    ONE: ClassVar[UFDRNumber]
    TWO: ClassVar[UFDRNumber]
    THREE: ClassVar[UFDRNumber]

    def __post_init__(self) -> None:
        """Validate the raw encoding."""
        _check_raw(self.raw, "UFDRNumber")
        if self.raw < 0:
            raise ValueError(f"UFDRNumber must be >= 0, got raw {self.raw}")

    @classmethod
    def from_float(cls, value: float) -> UFDRNumber:
        """Encode a float, clamping negatives to zero."""
        value = _check_float(value, "UFDRNumber")
        if value <= 0.0:
            return cls.ZERO
        return cls(_raw_from_float(value))

    def to_float(self) -> float:
        return _float_from_raw(self.raw)

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return f"{self.to_float():.6f}"

    def is_valid_sum(self) -> bool:
        return self.raw <= 3 * ONE

    def is_proportion(self) -> bool:
        return self.raw <= ONE

    def to_prop(self) -> Prop:
        """Exact conversion; raises ValueError above 1."""
        return Prop(self.raw)

    def clamp_to_prop(self) -> Prop:
        return Prop(min(self.raw, ONE))

    def abs_diff(self, other: UFDRNumber) -> UFDRNumber:
        return UFDRNumber(abs(self.raw - other.raw))

    def approx_eq(self, other: UFDRNumber, tolerance: Optional[Prop] = None) -> bool:
        if self.raw == other.raw:
            return True
        return abs(self.raw - other.raw) <= _tolerance_raw(tolerance)

    def __add__(self, other):
        if isinstance(other, (Prop, UFDRNumber)):
            return UFDRNumber(self.raw + other.raw)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (Prop, UFDRNumber)):
            if other.raw > self.raw:
                raise ValueError("UFDRNumber subtraction would go below zero")
            return UFDRNumber(self.raw - other.raw)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (Prop, UFDRNumber)):
            return UFDRNumber(self.raw * other.raw // ONE)
        if isinstance(other, int) and not isinstance(other, bool):
            if other < 0:
                raise ValueError("UFDRNumber cannot be scaled by a negative integer")
            return UFDRNumber(self.raw * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.__mul__(other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (Prop, UFDRNumber)):
            if other.raw == 0:
                raise ZeroDivisionError("UFDRNumber division by zero")
            return UFDRNumber(self.raw * ONE // other.raw)
        if isinstance(other, int) and not isinstance(other, bool):
            if other <= 0:
                raise ZeroDivisionError("UFDRNumber division by a non-positive integer")
            return UFDRNumber(self.raw // other)
        return NotImplemented


UFDRNumber.ZERO = UFDRNumber(0)
UFDRNumber.ONE = UFDRNumber(ONE)
UFDRNumber.TWO = UFDRNumber(2 * ONE)
UFDRNumber.THREE = UFDRNumber(3 * ONE)


# =============================================================================
# Signed Difference
# =============================================================================


@dataclass(frozen=True, slots=True, order=True)
class FDRNumber:
    """
    A signed fixed-point number used for deltas and hue positions.

    Float conversion is sign-magnitude, so ``from_float(-x)`` is always the
    exact negation of ``from_float(x)``. Multiplication and division round
    toward zero for the same reason.

    Attributes:
        raw: Signed integer numerator
    """
    raw: int

    ZERO: ClassVar[FDRNumber]
    ONE: ClassVar[FDRNumber]

    def __post_init__(self) -> None:
        """Validate the raw encoding."""
        _check_raw(self.raw, "FDRNumber")

    @classmethod
    def from_float(cls, value: float) -> FDRNumber:
        value = _check_float(value, "FDRNumber")
        magnitude = _raw_from_float(abs(value))
        return cls(-magnitude if value < 0.0 else magnitude)

    def to_float(self) -> float:
        magnitude = _float_from_raw(abs(self.raw))
        return -magnitude if self.raw < 0 else magnitude

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return f"{self.to_float():.6f}"

    def is_negative(self) -> bool:
        return self.raw < 0

    def clamp_to_prop(self) -> Prop:
        return Prop(min(max(self.raw, 0), ONE))

    def to_ufdr(self) -> UFDRNumber:
        """Exact conversion; raises ValueError when negative."""
        return UFDRNumber(self.raw)

    def approx_eq(self, other: FDRNumber, tolerance: Optional[Prop] = None) -> bool:
        if self.raw == other.raw:
            return True
        return abs(self.raw - other.raw) <= _tolerance_raw(tolerance)

    def __neg__(self) -> FDRNumber:
        return FDRNumber(-self.raw)

    def __abs__(self) -> FDRNumber:
        return FDRNumber(abs(self.raw))

    def __add__(self, other):
        if isinstance(other, (Prop, UFDRNumber, FDRNumber)):
            return FDRNumber(self.raw + other.raw)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, (Prop, UFDRNumber, FDRNumber)):
            return FDRNumber(self.raw - other.raw)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, (Prop, UFDRNumber)):
            return FDRNumber(other.raw - self.raw)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (Prop, UFDRNumber, FDRNumber)):
            return FDRNumber(_trunc_div(self.raw * other.raw, ONE))
        if isinstance(other, int) and not isinstance(other, bool):
            return FDRNumber(self.raw * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, (Prop, UFDRNumber, FDRNumber)):
            return FDRNumber(_trunc_div(self.raw * ONE, other.raw))
        if isinstance(other, int) and not isinstance(other, bool):
            return FDRNumber(_trunc_div(self.raw, other))
        return NotImplemented


FDRNumber.ZERO = FDRNumber(0)
FDRNumber.ONE = FDRNumber(ONE)
