# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
RGB colours in a chosen numeric representation.

An RGB value holds three channel values in one LightLevel (u8, u16, u32,
u64, f32 or f64). All conversions, whether to HCV or to another level, go
through ``Prop``, so:

- RGB -> HCV -> RGB returns the identical value in every level
- level -> level conversion is exact whenever the target can hold the value
  (0, 1 and any u8 value are exact everywhere)
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from colour_math.schema.fixed_point import Prop, UFDRNumber
from colour_math.schema.hcv import HCV, ColourBasics
from colour_math.schema.hue import Hue
from colour_math.schema.levels import F64, U8, Channel, LightLevel, level_for


_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


@dataclass(frozen=True, slots=True)
class RGB(ColourBasics):
    """
    An additive RGB colour.

    Channel values are stored in the representation named by ``level``
    (plain ``int`` for unsigned levels, ``float`` for float levels).

    Attributes:
        red: Red channel value
        green: Green channel value
        blue: Blue channel value
        level: Numeric representation of the channels (default F64)
    """
    red: Channel
    green: Channel
    blue: Channel
    level: LightLevel = F64

    RED: ClassVar[RGB]
    GREEN: ClassVar[RGB]
    BLUE: ClassVar[RGB]
    CYAN: ClassVar[RGB]
    MAGENTA: ClassVar[RGB]
    YELLOW: ClassVar[RGB]
    WHITE: ClassVar[RGB]
    BLACK: ClassVar[RGB]

    def __post_init__(self) -> None:
        """Validate channel values against the level."""
        if not isinstance(self.level, LightLevel):
            raise TypeError(f"Level must be a LightLevel, got {type(self.level).__name__}")
        for channel in (self.red, self.green, self.blue):
            self.level.validate(channel)

    # -- Construction ---------------------------------------------------------

    @classmethod
    def from_props(
        cls,
        props: Sequence[Prop],
        level: Optional[LightLevel] = None,
    ) -> RGB:
        """RGB from a (red, green, blue) proportion triple."""
        level = F64 if level is None else level
        red, green, blue = (level.from_prop(p) for p in props)
        return cls(red, green, blue, level)

    @classmethod
    def from_floats(
        cls,
        values: Sequence[float],
        level: Optional[LightLevel] = None,
    ) -> RGB:
        """RGB from three floats in [0, 1] (out of range values are clamped)."""
        return cls.from_props(_triple(Prop.from_float(v) for v in values), level)

    @classmethod
    def from_unsigned(cls, values: Sequence[int], level: LightLevel = U8) -> RGB:
        """
        RGB from three unsigned integers of an unsigned level.

        Out of range values are clamped to [0, MAX].

        Raises:
            ValueError: ``level`` is a float level
        """
        if level.is_float:
            raise ValueError(f"from_unsigned requires an unsigned level, got {level.name}")
        red, green, blue = _triple(level.coerce(v) for v in values)
        return cls(red, green, blue, level)

    @classmethod
    def from_array(cls, array: NDArray) -> RGB:
        """RGB from a 3-element numpy array; the level follows the dtype."""
        array = np.asarray(array)
        if array.shape != (3,):
            raise ValueError(f"Expected an array of shape (3,), got {array.shape}")
        level = level_for(array.dtype)
        red, green, blue = (level.coerce(v) for v in array.tolist())
        return cls(red, green, blue, level)

    @classmethod
    def from_hcv(cls, hcv: HCV, level: Optional[LightLevel] = None) -> RGB:
        return cls.from_props(hcv.to_props(), level)

    @classmethod
    def from_hex(cls, text: str, level: Optional[LightLevel] = None) -> RGB:
        """RGB from a "#RRGGBB" string."""
        m = _HEX_RE.match(text.strip())
        if not m:
            raise ValueError(f"Invalid hex colour: {text!r}")
        rgb = cls.from_unsigned([int(g, 16) for g in m.groups()], U8)
        return rgb if level is None or level == U8 else rgb.convert(level)

    # -- Channel access -------------------------------------------------------

    @property
    def values(self) -> tuple[Channel, Channel, Channel]:
        return self.red, self.green, self.blue

    def props(self) -> tuple[Prop, Prop, Prop]:
        red, green, blue = (self.level.to_prop(v) for v in self.values)
        return red, green, blue

    def to_floats(self) -> tuple[float, float, float]:
        red, green, blue = (p.to_float() for p in self.props())
        return red, green, blue

    def to_array(self) -> NDArray:
        return np.array(self.values, dtype=self.level.dtype)

    @property
    def hex(self) -> str:
        """Hex string like "#FF8000" (8-bit, rounded down)."""
        red, green, blue = (p.to_unsigned(8) for p in self.props())
        return f"#{red:02X}{green:02X}{blue:02X}"

    # -- Conversion -----------------------------------------------------------

    def convert(self, level: LightLevel) -> RGB:
        """This colour in another representation."""
        if level == self.level:
            return self
        return RGB.from_props(self.props(), level)

    def to_hcv(self) -> HCV:
        red, green, blue = self.props()
        return HCV.from_props(red, green, blue)

    def _like(self, hcv: HCV) -> RGB:
        return RGB.from_hcv(hcv, self.level)

    @property
    def hue(self) -> Optional[Hue]:
        return self.to_hcv().hue

    @property
    def chroma(self) -> Prop:
        return self.to_hcv().chroma

    @property
    def sum(self) -> UFDRNumber:
        red, green, blue = self.props()
        return red + green + blue

    # -- Named collections ----------------------------------------------------

    @classmethod
    def primaries(cls, level: Optional[LightLevel] = None) -> tuple[RGB, ...]:
        return tuple(cls.from_hcv(hcv, level) for hcv in HCV.PRIMARIES)

    @classmethod
    def secondaries(cls, level: Optional[LightLevel] = None) -> tuple[RGB, ...]:
        return tuple(cls.from_hcv(hcv, level) for hcv in HCV.SECONDARIES)

    @classmethod
    def in_betweens(cls, level: Optional[LightLevel] = None) -> tuple[RGB, ...]:
        return tuple(cls.from_hcv(hcv, level) for hcv in HCV.IN_BETWEENS)

    @classmethod
    def greys(cls, level: Optional[LightLevel] = None) -> tuple[RGB, ...]:
        return tuple(cls.from_hcv(hcv, level) for hcv in HCV.GREYS)

    # -- Serialization --------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to dictionary (native channel values and level name)."""
        return {"level": self.level.name, "values": list(self.values)}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        """Deserialize from dictionary."""
        level = level_for(data["level"])
        red, green, blue = _triple(data["values"])
        return cls(red, green, blue, level)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> RGB:
        return cls.from_dict(json.loads(text))


def _triple(values) -> tuple:
    values = tuple(values)
    if len(values) != 3:
        raise ValueError(f"Expected 3 channel values, got {len(values)}")
    return values


RGB.RED = RGB.from_hcv(HCV.RED)
RGB.GREEN = RGB.from_hcv(HCV.GREEN)
RGB.BLUE = RGB.from_hcv(HCV.BLUE)
RGB.CYAN = RGB.from_hcv(HCV.CYAN)
RGB.MAGENTA = RGB.from_hcv(HCV.MAGENTA)
RGB.YELLOW = RGB.from_hcv(HCV.YELLOW)
RGB.WHITE = RGB.from_hcv(HCV.WHITE)
RGB.BLACK = RGB.from_hcv(HCV.BLACK)
