"""
Módulo de utilidades
"""
from .helpers import (
    deg2dec,
    has_valid_coords,
    is_finite_number,
)

__all__ = [
    'deg2dec',
    'has_valid_coords',
    'is_finite_number',
]
