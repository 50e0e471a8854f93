# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Stateful colour editors.

Editors own a mutable colour (or running mix) and have no internal locking;
use one instance per editing session.
"""

from colour_math.edit.manipulator import (
    ColourManipulator,
    ManipulatorConfig,
    ManipulatorState,
    Outcome,
    RotationPolicy,
    ScalarPolicy,
)
from colour_math.edit.mixing import SubtractiveMixer

__all__ = [
    "ColourManipulator",
    "ManipulatorConfig",
    "ManipulatorState",
    "Outcome",
    "RotationPolicy",
    "ScalarPolicy",
    "SubtractiveMixer",
]
