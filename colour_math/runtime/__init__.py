# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Display runtime for colour math.

Renders colour attributes for consumption by an outer UI or report layer.
The runtime never modifies colour values.
"""

from colour_math.runtime.serializers import (
    SerializerFormat,
    attribute_dict,
    describe,
    to_attributes,
)

__all__ = [
    "to_attributes",
    "attribute_dict",
    "describe",
    "SerializerFormat",
]
