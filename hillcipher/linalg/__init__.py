"""
Linear Algebra Kernel Package

This package implements the integer and modular matrix operations the
Hill cipher is built on: determinants, inversion, adjugates,
matrix-vector products and residue normalisation.
"""

from .matrix_ops import (
    determinant, minor, is_invertible, invert, adjugate,
    multiply, normalize, mod_inverse, identity, ROUND_DECIMALS,
)

__all__ = [
    'determinant', 'minor', 'is_invertible', 'invert', 'adjugate',
    'multiply', 'normalize', 'mod_inverse', 'identity', 'ROUND_DECIMALS',
]
