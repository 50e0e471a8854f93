# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
HCV -- the Hue/Chroma/Value model, and the colour accessors built on it.

HCV is the canonical internal representation:
- hue: sector and position, or None for greys
- chroma: max channel minus min channel, in [0, 1]
- sum: red + green + blue, in [0, 3] (value = sum / 3)

Conversions RGB -> HCV -> RGB are exact: the inverse rebuilds the very
proportions the forward conversion started from.

ColourBasics provides the derived attributes (hue angle, value, greyness,
warmth, best foreground) for anything that can produce an HCV, so HCV and
RGB answer the same questions the same way.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

from colour_math.schema.fixed_point import Prop, UFDRNumber
from colour_math.schema.hue import Hue, Sector

if TYPE_CHECKING:
    from colour_math.schema.levels import LightLevel
    from colour_math.schema.rgb import RGB


SERIAL_VERSION = "1.0"


# =============================================================================
# Warmth
# =============================================================================

# Weight of the hue-independent part of a chromatic colour's warmth
WARMTH_BASE = 1.0 / 3.0
WARMTH_HUE_WEIGHT = 2.0 / 3.0

# Luma weights used to pick a readable overlay colour
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def _hue_warmth(sector: Sector, chroma: float, fraction: float) -> float:
    """
    Hue-dependent warmth term x' for a chromatic colour.

    ``fraction`` is (mid - min) / chroma. At the pure colours this gives
    RED (1 + c)/2, YELLOW and MAGENTA (2 + c)/4, GREEN and BLUE (2 - c)/4
    and CYAN (1 - c)/2, blending linearly in between.
    """
    along = fraction * chroma
    if sector in (Sector.RED, Sector.MAGENTA):
        return (2.0 + 2.0 * chroma - along) / 4.0
    if sector in (Sector.YELLOW, Sector.BLUE):
        return (2.0 + 2.0 * along - chroma) / 4.0
    return (2.0 - along - chroma) / 4.0


def warmth_of(hcv: HCV) -> Prop:
    """
    Warmth of a colour: RED 1, YELLOW 5/6, BLUE 1/2, CYAN 1/3.

    Greys run from 1/2 (BLACK) to 0 (WHITE). Shades (darker than the hue's
    fully saturated colour) keep the dark grey's warmth for their
    achromatic part.
    """
    total = hcv.sum.to_float()
    if hcv.hue is None:
        return Prop.from_float((3.0 - total) / 6.0)
    chroma = hcv.chroma.to_float()
    high, mid, low = sorted((p.raw for p in hcv.to_props()), reverse=True)
    fraction = (mid - low) / (high - low)
    x_dash = _hue_warmth(hcv.hue.sector, chroma, fraction)
    warmth = (WARMTH_BASE + WARMTH_HUE_WEIGHT * x_dash) * chroma
    if hcv.sum < hcv.hue.sum_for_max_chroma():
        warmth += 0.5 * (1.0 - chroma)
    return Prop.from_float(warmth)


# =============================================================================
# Accessor Interface
# =============================================================================


class ColourBasics(ABC):
    """
    Derived colour attributes for any type that can produce an HCV.

    Implementers provide ``to_hcv`` and ``_like`` (convert an HCV back into
    the implementer's own type, so results come back as the caller's type).
    """

    __slots__ = ()

    @abstractmethod
    def to_hcv(self) -> HCV: ...

    @abstractmethod
    def _like(self, hcv: HCV): ...

    @property
    def hue_angle(self) -> Optional[float]:
        """Hue in degrees [0, 360), or None for greys."""
        hue = self.to_hcv().hue
        return None if hue is None else hue.angle

    @property
    def value(self) -> Prop:
        """sum / 3."""
        return (self.to_hcv().sum / 3).to_prop()

    @property
    def greyness(self) -> Prop:
        """1 - chroma."""
        return self.to_hcv().chroma.complement()

    @property
    def is_grey(self) -> bool:
        return self.to_hcv().hue is None

    @property
    def warmth(self) -> Prop:
        return warmth_of(self.to_hcv())

    @property
    def best_foreground(self):
        """BLACK or WHITE, whichever reads better over this colour."""
        props = self.to_hcv().to_props()
        luma = sum(w * p.to_float() for w, p in zip(LUMA_WEIGHTS, props))
        return self._like(HCV.BLACK if luma > 0.5 else HCV.WHITE)

    def monochrome(self):
        """The grey with this colour's value."""
        return self._like(HCV(None, Prop.ZERO, self.to_hcv().sum))

    def max_chroma(self):
        """The fully saturated colour with this hue (greys are unchanged)."""
        hue = self.to_hcv().hue
        if hue is None:
            return self._like(self.to_hcv())
        return self._like(hue.max_chroma_hcv())


# =============================================================================
# HCV
# =============================================================================


@dataclass(frozen=True, slots=True)
class HCV(ColourBasics):
    """
    A colour as hue, chroma and sum.

    Invariants (checked on construction):
        - chroma == 0 if and only if hue is None
        - 0 <= sum <= 3
        - with a hue, sum lies in hue.sum_range_for_chroma(chroma),
          i.e. chroma <= hue.max_chroma_for_sum(sum)

    Attributes:
        hue: Hue, or None for greys
        chroma: max - min channel
        sum: red + green + blue
    """
    hue: Optional[Hue]
    chroma: Prop
    sum: UFDRNumber

    RED: ClassVar[HCV]
    GREEN: ClassVar[HCV]
    BLUE: ClassVar[HCV]
    CYAN: ClassVar[HCV]
    MAGENTA: ClassVar[HCV]
    YELLOW: ClassVar[HCV]
    WHITE: ClassVar[HCV]
    BLACK: ClassVar[HCV]
    PRIMARIES: ClassVar[tuple[HCV, ...]]
    SECONDARIES: ClassVar[tuple[HCV, ...]]
    IN_BETWEENS: ClassVar[tuple[HCV, ...]]
    GREYS: ClassVar[tuple[HCV, ...]]

    def __post_init__(self) -> None:
        """Validate HCV invariants."""
        if not isinstance(self.chroma, Prop):
            raise TypeError(f"Chroma must be a Prop, got {type(self.chroma).__name__}")
        if not isinstance(self.sum, UFDRNumber):
            raise TypeError(f"Sum must be a UFDRNumber, got {type(self.sum).__name__}")
        if not self.sum.is_valid_sum():
            raise ValueError(f"Sum must be 0-3, got {self.sum.to_float()}")
        if self.hue is None:
            if self.chroma != Prop.ZERO:
                raise ValueError(f"Chroma must be 0 for a grey, got {self.chroma}")
        else:
            if self.chroma == Prop.ZERO:
                raise ValueError("Chroma must be > 0 when a hue is given")
            if not self.hue.is_compatible(self.chroma, self.sum):
                raise ValueError(
                    f"Chroma {self.chroma} exceeds the maximum for sum {self.sum} "
                    f"at hue {self.hue.angle:.3f}"
                )

    # -- Construction ---------------------------------------------------------

    @classmethod
    def from_props(cls, red: Prop, green: Prop, blue: Prop) -> HCV:
        """HCV of an RGB proportion triple."""
        chroma = Prop(max(red.raw, green.raw, blue.raw) - min(red.raw, green.raw, blue.raw))
        return cls(Hue.from_props(red, green, blue), chroma, red + green + blue)

    @classmethod
    def from_rgb(cls, rgb: RGB) -> HCV:
        return rgb.to_hcv()

    @classmethod
    def grey(cls, value: Prop | float) -> HCV:
        """The grey with the given value (0 = BLACK, 1 = WHITE)."""
        return cls(None, Prop.ZERO, Prop.coerce(value) * 3)

    # -- Conversion -----------------------------------------------------------

    def to_hcv(self) -> HCV:
        return self

    def _like(self, hcv: HCV) -> HCV:
        return hcv

    def canonical(self) -> HCV:
        """
        The HCV that ``from_props`` derives from this colour's own triple.

        Edits that keep a hue while changing chroma or sum can leave the
        stored position a few raw units away from the one the triple would
        produce. Both describe the same RGB proportions, so compare
        ``a.canonical() == b.canonical()`` to test for the same colour.
        """
        return HCV.from_props(*self.to_props())

    def to_props(self) -> tuple[Prop, Prop, Prop]:
        """The (red, green, blue) proportions of this colour."""
        if self.hue is None:
            grey = (self.sum / 3).to_prop()
            return grey, grey, grey
        return self.hue.props_for(self.chroma, self.sum)

    def to_rgb(self, level: Optional[LightLevel] = None) -> RGB:
        from colour_math.schema.rgb import RGB
        return RGB.from_props(self.to_props(), level)

    # -- Serialization --------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to dictionary (fixed-point values as raw integers)."""
        return {
            "version": SERIAL_VERSION,
            "hue": None if self.hue is None else self.hue.to_dict(),
            "chroma": self.chroma.raw,
            "sum": self.sum.raw,
        }

    @classmethod
    def from_dict(cls, data: dict) -> HCV:
        """Deserialize from dictionary."""
        version = data.get("version", SERIAL_VERSION)
        if version != SERIAL_VERSION:
            raise ValueError(f"Unsupported HCV version: {version}")
        hue = data.get("hue")
        return cls(
            hue=None if hue is None else Hue.from_dict(hue),
            chroma=Prop(data["chroma"]),
            sum=UFDRNumber(data["sum"]),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> HCV:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(text))


def _hcv_for(props: Sequence[Prop]) -> HCV:
    red, green, blue = props
    return HCV.from_props(red, green, blue)


_O, _H, _I = Prop.ZERO, Prop.HALF, Prop.ONE

HCV.RED = _hcv_for((_I, _O, _O))
HCV.GREEN = _hcv_for((_O, _I, _O))
HCV.BLUE = _hcv_for((_O, _O, _I))
HCV.CYAN = _hcv_for((_O, _I, _I))
HCV.MAGENTA = _hcv_for((_I, _O, _I))
HCV.YELLOW = _hcv_for((_I, _I, _O))
HCV.WHITE = _hcv_for((_I, _I, _I))
HCV.BLACK = _hcv_for((_O, _O, _O))

HCV.PRIMARIES = (HCV.RED, HCV.GREEN, HCV.BLUE)
HCV.SECONDARIES = (HCV.CYAN, HCV.MAGENTA, HCV.YELLOW)
HCV.GREYS = (HCV.WHITE, HCV.BLACK)
HCV.IN_BETWEENS = tuple(
    _hcv_for(props)
    for props in (
        (_I, _H, _O),  # orange
        (_H, _I, _O),  # chartreuse
        (_O, _I, _H),  # spring green
        (_O, _H, _I),  # azure
        (_H, _O, _I),  # violet
        (_I, _O, _H),  # rose
    )
)
