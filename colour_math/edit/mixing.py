# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Paint-style colour mixing by parts.

Colours are added with integer part counts ("5 parts red, 10 parts green")
and the mix is the exact weighted mean of their RGB proportions. Running
totals are unbounded Python integers, so any number of additions is exact.

Despite the name this is an arithmetic mean of light, not a pigment model.
"""

from __future__ import annotations

import logging
from typing import Optional

from colour_math.schema import HCV, RGB, ColourBasics, LightLevel, Prop

logger = logging.getLogger(__name__)


class SubtractiveMixer:
    """Weighted accumulator of colours."""

    def __init__(self) -> None:
        self._channel_sums = [0, 0, 0]
        self._total_parts = 0

    @property
    def total_parts(self) -> int:
        return self._total_parts

    def add(self, colour: ColourBasics, parts: int) -> None:
        """
        Add ``parts`` parts of ``colour`` (an HCV or RGB).

        Raises:
            TypeError: parts is not an int
            ValueError: parts is negative
        """
        if isinstance(parts, bool) or not isinstance(parts, int):
            raise TypeError(f"Parts must be an int, got {type(parts).__name__}")
        if parts < 0:
            raise ValueError(f"Parts must be >= 0, got {parts}")
        for index, prop in enumerate(colour.to_hcv().to_props()):
            self._channel_sums[index] += prop.raw * parts
        self._total_parts += parts
        logger.debug("mixed in %d parts (total %d)", parts, self._total_parts)

    def mixed_props(self) -> Optional[tuple[Prop, Prop, Prop]]:
        if self._total_parts == 0:
            return None
        red, green, blue = (Prop(s // self._total_parts) for s in self._channel_sums)
        return red, green, blue

    def mixed_colour(self) -> Optional[HCV]:
        """The weighted mean of everything added, or None if nothing was."""
        props = self.mixed_props()
        if props is None:
            return None
        return HCV.from_props(*props)

    def mixed_rgb(self, level: Optional[LightLevel] = None) -> Optional[RGB]:
        props = self.mixed_props()
        if props is None:
            return None
        return RGB.from_props(props, level)

    def reset(self) -> None:
        """Forget everything added so far."""
        self._channel_sums = [0, 0, 0]
        self._total_parts = 0
