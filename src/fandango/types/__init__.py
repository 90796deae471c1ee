"""Reusable type definitions."""

from .base import StrictBaseModel
from .byte_arrays import ZERO_HASH, BaseBytes, Bytes32

__all__ = [
    "BaseBytes",
    "Bytes32",
    "StrictBaseModel",
    "ZERO_HASH",
]
