"""
Cipher Core Package

This package implements the Hill cipher engine and its validated,
immutable configuration.
"""

from .config import HillConfig, DEFAULT_BLOCK_SIZE, ENGINE_DEFAULTS
from .hill_cipher import HillCipher, encrypt, decrypt

__all__ = ['HillConfig', 'DEFAULT_BLOCK_SIZE', 'ENGINE_DEFAULTS', 'HillCipher', 'encrypt', 'decrypt']
