"""
Key Schedule Package

This package turns a key string into the Hill cipher key matrix and
derives its inverse modulo the scheme size.
"""

from .key_matrix import build_key_matrix, inverse_key_matrix, validate_key

__all__ = ['build_key_matrix', 'inverse_key_matrix', 'validate_key']
