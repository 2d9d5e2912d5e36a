"""Expose Wyze mesh lights as HomeKit accessories."""

from .accessories import TYPES, WyzeAccessory, get_accessory
from .buffer import PropertyWriteBuffer
from .type_lights import MeshLight

__all__ = [
    "TYPES",
    "MeshLight",
    "PropertyWriteBuffer",
    "WyzeAccessory",
    "get_accessory",
]
