"""
Scheme Package

This package implements the alphabet ("scheme") of the cipher: the
bijective mapping between symbols and their integer residues.
"""

from .alphabet import Scheme, DEFAULT_SCHEME

__all__ = ['Scheme', 'DEFAULT_SCHEME']
