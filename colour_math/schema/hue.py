# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Hue and the geometry of the RGB cube.

A hue is a sector of the hue hexagon plus a position within it. Sectors are
60° wedges starting at a primary (RED, GREEN, BLUE) or a secondary
(YELLOW, CYAN, MAGENTA)::

    index   sector    channel order          position
      0     RED       r > g >= b             (g - b) / c
      1     YELLOW    g >= r > b             (g - r) / c
      2     GREEN     g > b >= r             (b - r) / c
      3     CYAN      b >= g > r             (b - g) / c
      4     BLUE      b > r >= g             (r - g) / c
      5     MAGENTA   r >= b > g             (r - b) / c

where c = max - min is the chroma. Position is 0 at the sector's leading
colour and approaches 1 at the next one, so the hue angle is
``60° * (index + position)``.

For a hue and chroma the RGB triple is fixed up to a grey offset ``least``
added to every channel::

    max = least + c,   mid = least + k(c),   min = least

where k(c) is the mid channel's offset above min. Integer encoding of k(c)
uses ceiling division so that the forward and inverse conversions agree
exactly. Every geometric query below is derived from k(c):

- sum_range_for_chroma(c) = [c + k(c), 3 - 2c + k(c)]
- max_chroma_for_sum(s) = largest c whose range contains s
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Optional

from colour_math.schema.fixed_point import ONE, FDRNumber, Prop, UFDRNumber

if TYPE_CHECKING:
    from colour_math.schema.hcv import HCV
    from colour_math.schema.levels import LightLevel
    from colour_math.schema.rgb import RGB


# One full turn of the hue hexagon in raw position units
FULL_TURN = 6 * ONE

DEGREES_PER_SECTOR = 60.0


# =============================================================================
# Sectors
# =============================================================================


class Sector(Enum):
    """The six 60° wedges of the hue hexagon, in angle order."""
    RED = 0
    YELLOW = 1
    GREEN = 2
    CYAN = 3
    BLUE = 4
    MAGENTA = 5

    @property
    def is_primary_led(self) -> bool:
        """True for RED, GREEN and BLUE (position measured from min)."""
        return self.value % 2 == 0

    @property
    def channels(self) -> tuple[int, int, int]:
        """Indices of the (max, mid, min) channels within (r, g, b)."""
        return _SECTOR_CHANNELS[self]


_SECTOR_CHANNELS = {
    Sector.RED: (0, 1, 2),
    Sector.YELLOW: (1, 0, 2),
    Sector.GREEN: (1, 2, 0),
    Sector.CYAN: (2, 1, 0),
    Sector.BLUE: (2, 0, 1),
    Sector.MAGENTA: (0, 2, 1),
}


def _classify(red: int, green: int, blue: int) -> Optional[Sector]:
    if red > green >= blue:
        return Sector.RED
    if green >= red > blue:
        return Sector.YELLOW
    if green > blue >= red:
        return Sector.GREEN
    if blue >= green > red:
        return Sector.CYAN
    if blue > red >= green:
        return Sector.BLUE
    if red >= blue > green:
        return Sector.MAGENTA
    return None


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _check_sum(total: UFDRNumber) -> None:
    if not total.is_valid_sum():
        raise ValueError(f"Sum must be 0-3, got {total.to_float()}")


# =============================================================================
# Hue
# =============================================================================


@dataclass(frozen=True, slots=True)
class Hue:
    """
    A hue: a sector of the hexagon and a position within it.

    Attributes:
        sector: The 60° wedge containing the hue
        position: Offset from the sector's leading colour, 0 <= position < 1
    """
    sector: Sector
    position: Prop

    RED: ClassVar[Hue]
    YELLOW: ClassVar[Hue]
    GREEN: ClassVar[Hue]
    CYAN: ClassVar[Hue]
    BLUE: ClassVar[Hue]
    MAGENTA: ClassVar[Hue]

    def __post_init__(self) -> None:
        """Validate hue components."""
        if not isinstance(self.sector, Sector):
            raise TypeError(f"Sector must be a Sector, got {type(self.sector).__name__}")
        if not isinstance(self.position, Prop):
            raise TypeError(f"Position must be a Prop, got {type(self.position).__name__}")
        if self.position == Prop.ONE:
            raise ValueError("Position must be < 1 (1 is the next sector's 0)")

    # -- Construction ---------------------------------------------------------

    @classmethod
    def from_props(cls, red: Prop, green: Prop, blue: Prop) -> Optional[Hue]:
        """Hue of an RGB triple, or None for a grey."""
        r, g, b = red.raw, green.raw, blue.raw
        sector = _classify(r, g, b)
        if sector is None:
            return None
        channels = (r, g, b)
        i_max, i_mid, i_min = sector.channels
        chroma = channels[i_max] - channels[i_min]
        if sector.is_primary_led:
            offset = channels[i_mid] - channels[i_min]
        else:
            offset = channels[i_max] - channels[i_mid]
        return cls(sector, Prop(offset * ONE // chroma))

    @classmethod
    def from_rgb(cls, rgb: RGB) -> Optional[Hue]:
        """Hue of an RGB value in any level, or None for a grey."""
        return cls.from_props(*rgb.props())

    @classmethod
    def from_angle(cls, degrees: float) -> Hue:
        """Hue at ``degrees`` (any real value; wrapped modulo 360)."""
        return cls._from_turn(FDRNumber.from_float(degrees / DEGREES_PER_SECTOR).raw)

    @classmethod
    def _from_turn(cls, turn: int) -> Hue:
        index, position = divmod(turn % FULL_TURN, ONE)
        return cls(Sector(index), Prop(position))

    # -- Angle ----------------------------------------------------------------

    @property
    def _turn(self) -> int:
        return self.sector.value * ONE + self.position.raw

    @property
    def angle(self) -> float:
        """Hue angle in degrees, 0 <= angle < 360."""
        degrees = (self.sector.value + self.position.to_float()) * DEGREES_PER_SECTOR
        return degrees % 360.0

    def rotated(self, degrees: float) -> Hue:
        """
        This hue rotated by ``degrees``.

        The rotation is exact modular integer arithmetic, so
        ``hue.rotated(a).rotated(-a) == hue``.
        """
        delta = FDRNumber.from_float(degrees / DEGREES_PER_SECTOR)
        return Hue._from_turn(self._turn + delta.raw)

    # -- Geometry -------------------------------------------------------------

    def _mid_offset(self, chroma: int) -> int:
        """k(c): raw offset of the mid channel above min for raw chroma ``c``."""
        along = _ceil_div(self.position.raw * chroma, ONE)
        if self.sector.is_primary_led:
            return along
        return chroma - along

    def _min_sum(self, chroma: int) -> int:
        return chroma + self._mid_offset(chroma)

    def _max_sum(self, chroma: int) -> int:
        return 3 * ONE - 2 * chroma + self._mid_offset(chroma)

    def sum_for_max_chroma(self) -> UFDRNumber:
        """Sum of the fully saturated colour with this hue (1 to 2)."""
        return UFDRNumber(self._min_sum(ONE))

    def sum_range_for_chroma(self, chroma: Prop) -> tuple[UFDRNumber, UFDRNumber]:
        """
        Inclusive [min_sum, max_sum] over which (self, chroma) is realisable.

        A zero chroma spans the whole grey axis, [0, 3].
        """
        c = chroma.raw
        return UFDRNumber(self._min_sum(c)), UFDRNumber(self._max_sum(c))

    def max_chroma_for_sum(self, total: UFDRNumber) -> Prop:
        """
        Greatest chroma realisable with this hue at sum ``total``.

        The profile rises linearly from 0 at sum 0 to 1 at
        ``sum_for_max_chroma()`` and falls back to 0 at sum 3. The result
        is the exact inverse of ``sum_range_for_chroma``: its range always
        contains ``total`` and has ``total`` on a boundary when chroma is
        limited by it.

        Raises:
            ValueError: Sum outside [0, 3]
        """
        _check_sum(total)
        s = total.raw
        k_one = self._mid_offset(ONE)

        # Rising edge: largest c with c + k(c) <= s
        rising = min(s * ONE // (ONE + k_one), ONE)
        while rising > 0 and self._min_sum(rising) > s:
            rising -= 1
        while rising < ONE and self._min_sum(rising + 1) <= s:
            rising += 1

        # Falling edge: largest c with 3 - 2c + k(c) >= s
        falling = min((3 * ONE - s) * ONE // (2 * ONE - k_one), ONE)
        while falling > 0 and self._max_sum(falling) < s:
            falling -= 1
        while falling < ONE and self._max_sum(falling + 1) >= s:
            falling += 1

        return Prop(min(rising, falling))

    def is_compatible(self, chroma: Prop, total: UFDRNumber) -> bool:
        """True if (self, chroma, total) lies inside the RGB cube."""
        min_sum, max_sum = self.sum_range_for_chroma(chroma)
        return min_sum <= total <= max_sum

    def props_for(self, chroma: Prop, total: UFDRNumber) -> tuple[Prop, Prop, Prop]:
        """
        The (red, green, blue) triple with this hue, ``chroma`` and ``total``.

        Sums that are not a multiple of the raw unit above min_sum lose
        their remainder (at most two raw units).

        Raises:
            ValueError: (chroma, total) is not realisable for this hue
        """
        if not self.is_compatible(chroma, total):
            raise ValueError(
                f"Chroma {chroma} is not realisable at sum {total} "
                f"for hue {self.angle:.3f}"
            )
        c = chroma.raw
        k = self._mid_offset(c)
        least = (total.raw - c - k) // 3
        channels = [0, 0, 0]
        i_max, i_mid, i_min = self.sector.channels
        channels[i_max] = least + c
        channels[i_mid] = least + k
        channels[i_min] = least
        return Prop(channels[0]), Prop(channels[1]), Prop(channels[2])

    def rgb_for(
        self,
        chroma: Prop,
        total: UFDRNumber,
        level: Optional[LightLevel] = None,
    ) -> RGB:
        """The RGB value (in ``level``, default F64) for ``props_for(chroma, total)``."""
        from colour_math.schema.rgb import RGB
        return RGB.from_props(self.props_for(chroma, total), level)

    def max_chroma_props(self) -> tuple[Prop, Prop, Prop]:
        """The fully saturated (red, green, blue) triple with this hue."""
        return self.props_for(Prop.ONE, self.sum_for_max_chroma())

    def max_chroma_hcv(self) -> HCV:
        from colour_math.schema.hcv import HCV
        return HCV(self, Prop.ONE, self.sum_for_max_chroma())

    def max_chroma_rgb(self, level: Optional[LightLevel] = None) -> RGB:
        from colour_math.schema.rgb import RGB
        return RGB.from_props(self.max_chroma_props(), level)

    # -- Serialization --------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to dictionary (position as its raw integer)."""
        return {"sector": self.sector.name, "position": self.position.raw}

    @classmethod
    def from_dict(cls, data: dict) -> Hue:
        """Deserialize from dictionary."""
        return cls(sector=Sector[data["sector"]], position=Prop(data["position"]))

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> Hue:
        return cls.from_dict(json.loads(text))


Hue.RED = Hue(Sector.RED, Prop.ZERO)
Hue.YELLOW = Hue(Sector.YELLOW, Prop.ZERO)
Hue.GREEN = Hue(Sector.GREEN, Prop.ZERO)
Hue.CYAN = Hue(Sector.CYAN, Prop.ZERO)
Hue.BLUE = Hue(Sector.BLUE, Prop.ZERO)
Hue.MAGENTA = Hue(Sector.MAGENTA, Prop.ZERO)

