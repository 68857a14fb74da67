"""Vector types."""

from .base import Vector
from .binary import BinaryVector, create_zero_vector

__all__ = ['Vector', 'BinaryVector', 'create_zero_vector']
