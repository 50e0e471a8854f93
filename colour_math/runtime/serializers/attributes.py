# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Attribute serializer.

Formats a colour's derived attributes (hue angle, chroma, value, greyness,
warmth, best foreground) for an outer display layer. Attribute values are
reported, never altered.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

from colour_math.schema import HCV, ColourBasics


class SerializerFormat(Enum):
    """Output format for colour attributes."""

    JSON = "json"                # compact attribute document
    JSON_PRETTY = "json_pretty"  # indented attribute document
    NATURAL = "natural"          # one line: name, attributes, hex, foreground

    @property
    def indent(self) -> Optional[int]:
        """json.dumps indent for the JSON formats."""
        return 2 if self is SerializerFormat.JSON_PRETTY else None


# Hue names on the RGB wheel, one per 30° band centred on the name's angle
_HUE_NAMES = (
    "Red",
    "Orange",
    "Yellow",
    "Chartreuse",
    "Green",
    "Spring green",
    "Cyan",
    "Azure",
    "Blue",
    "Violet",
    "Magenta",
    "Rose",
)


def to_attributes(
    colour: ColourBasics,
    *,
    format: SerializerFormat = SerializerFormat.NATURAL,
    precision: int = 2,
) -> str:
    """Serialize a colour's attributes.

    Args:
        colour: Any HCV or RGB value.
        format: NATURAL (one human-readable line), JSON or JSON_PRETTY.
        precision: Decimal places for proportions.

    Returns:
        Formatted attribute string.

    Example (NATURAL)::

        Orange (H=30°, C=1.0, V=0.5, warmth=0.92) #FF7F00 on black
    """
    data = attribute_dict(colour, precision=precision)
    if format == SerializerFormat.NATURAL:
        return _to_natural(data)
    return json.dumps(data, indent=format.indent)


def attribute_dict(colour: ColourBasics, *, precision: int = 2) -> dict:
    """Attribute values as a plain dictionary."""
    hcv = colour.to_hcv()
    angle = hcv.hue_angle
    return {
        "name": describe(hcv),
        "hue_angle": None if angle is None else round(angle, 1),
        "chroma": round(hcv.chroma.to_float(), precision),
        "value": round(hcv.value.to_float(), precision),
        "greyness": round(hcv.greyness.to_float(), precision),
        "warmth": round(hcv.warmth.to_float(), precision),
        "hex": hcv.to_rgb().hex,
        "foreground": "black" if hcv.best_foreground == HCV.BLACK else "white",
    }


def describe(colour: ColourBasics) -> str:
    """Approximate colour name, e.g. "Dark orange" or "Light grey"."""
    hcv = colour.to_hcv()
    value = hcv.value.to_float()
    if hcv.hue is None:
        if value > 0.9:
            return "White"
        if value < 0.1:
            return "Black"
        if value < 0.35:
            return "Dark grey"
        if value > 0.75:
            return "Light grey"
        return "Grey"
    name = _HUE_NAMES[int(((hcv.hue.angle + 15.0) % 360.0) // 30.0)]
    if hcv.sum < hcv.hue.sum_for_max_chroma() and value < 0.25:
        return f"Dark {name.lower()}"
    if hcv.greyness.to_float() > 0.5 and value > 0.5:
        return f"Pale {name.lower()}"
    return name


def _to_natural(data: dict) -> str:
    if data["hue_angle"] is None:
        attrs = f"V={data['value']}, warmth={data['warmth']}"
    else:
        attrs = (
            f"H={data['hue_angle']:.0f}°, C={data['chroma']}, "
            f"V={data['value']}, warmth={data['warmth']}"
        )
    return f"{data['name']} ({attrs}) {data['hex']} on {data['foreground']}"
