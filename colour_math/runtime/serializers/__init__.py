# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Serializers for colour attribute display.

Each serializer formats a colour's derived attributes for an outer layer.
All serializers report the attributes exactly -- no modification.
"""

from colour_math.runtime.serializers.attributes import (
    SerializerFormat,
    attribute_dict,
    describe,
    to_attributes,
)

__all__ = [
    "SerializerFormat",
    "to_attributes",
    "attribute_dict",
    "describe",
]
