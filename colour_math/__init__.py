# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Colour Math -- exact fixed-point colour arithmetic.

Converts additive RGB colour to and from a Hue/Chroma/Value (HCV) model
with exact round trips, and provides editors that change chroma, value and
hue without leaving the RGB cube.

Quick start::

    from colour_math import HCV, RGB, U8, ColourManipulator

    rgb = RGB.from_unsigned([255, 128, 0], U8)
    hcv = rgb.to_hcv()
    hcv.hue_angle, hcv.chroma, hcv.warmth

    editor = ColourManipulator(hcv=hcv)
    editor.rotate(30.0)
    editor.rgb(U8)
"""

from __future__ import annotations

__version__ = "1.0.0"

from colour_math.edit import (
    ColourManipulator,
    ManipulatorConfig,
    ManipulatorState,
    Outcome,
    RotationPolicy,
    ScalarPolicy,
    SubtractiveMixer,
)
from colour_math.schema import (
    F32,
    F64,
    HCV,
    RGB,
    U8,
    U16,
    U32,
    U64,
    FDRNumber,
    Hue,
    LightLevel,
    Prop,
    Sector,
    UFDRNumber,
)

__all__ = [
    # Colours
    "HCV",
    "RGB",
    "Hue",
    "Sector",
    # Fixed-point numbers
    "Prop",
    "UFDRNumber",
    "FDRNumber",
    # Representations
    "LightLevel",
    "U8",
    "U16",
    "U32",
    "U64",
    "F32",
    "F64",
    # Editors
    "ColourManipulator",
    "ManipulatorConfig",
    "ManipulatorState",
    "Outcome",
    "RotationPolicy",
    "ScalarPolicy",
    "SubtractiveMixer",
    # Version
    "__version__",
]
