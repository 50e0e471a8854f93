# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Value types for colour math.

All types in this module are immutable (frozen dataclasses). Editing a
colour means producing a new value; the stateful editors live in
``colour_math.edit``.
"""

from colour_math.schema.fixed_point import (
    DEFAULT_TOLERANCE,
    FLOAT_EPSILON,
    ONE,
    FDRNumber,
    Prop,
    UFDRNumber,
)
from colour_math.schema.hcv import HCV, SERIAL_VERSION, ColourBasics, warmth_of
from colour_math.schema.hue import Hue, Sector
from colour_math.schema.levels import (
    F32,
    F64,
    LEVELS,
    U8,
    U16,
    U32,
    U64,
    FloatLevel,
    LightLevel,
    UnsignedLevel,
    level_for,
)
from colour_math.schema.rgb import RGB

__all__ = [
    # Fixed-point numbers
    "ONE",
    "FLOAT_EPSILON",
    "DEFAULT_TOLERANCE",
    "Prop",
    "UFDRNumber",
    "FDRNumber",
    # Representations
    "LightLevel",
    "UnsignedLevel",
    "FloatLevel",
    "U8",
    "U16",
    "U32",
    "U64",
    "F32",
    "F64",
    "LEVELS",
    "level_for",
    # Hue geometry
    "Sector",
    "Hue",
    # Colours
    "SERIAL_VERSION",
    "ColourBasics",
    "HCV",
    "RGB",
    "warmth_of",
]
