"""Reusable type definitions for ENR identity keys."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32, Bytes33, Bytes64, NodeId

__all__ = [
    "BaseBytes",
    "Bytes32",
    "Bytes33",
    "Bytes64",
    "NodeId",
    "CamelModel",
    "StrictBaseModel",
]
