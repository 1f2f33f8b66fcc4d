"""
HillCipher - Hill Cipher Library

This library implements the Hill cipher, a classical block cipher that
multiplies fixed-size blocks of symbols by an invertible square key
matrix modulo the size of a configurable alphabet ("scheme").

Key Features:
- Configurable scheme (any ordered set of unique characters)
- Configurable block size (default: 1)
- Key validation: length, symbol membership, modular invertibility
- Exact integer determinants by cofactor expansion
- Gauss-Jordan matrix inversion with partial pivoting
- Atomic configuration changes that roll back on failure

The Hill cipher is a teaching cipher. It offers no authentication and
no modern security guarantees.
"""

from .exceptions import (
    HillCipherError, ConfigurationError, ValidationError, CipherArithmeticError,
)
from .scheme import Scheme, DEFAULT_SCHEME
from .cipher_core import HillCipher, HillConfig, encrypt, decrypt

__version__ = '0.1.0'
__author__ = 'HillCipher Team'

__all__ = [
    'HillCipher', 'HillConfig', 'Scheme', 'DEFAULT_SCHEME', 'encrypt', 'decrypt',
    'HillCipherError', 'ConfigurationError', 'ValidationError', 'CipherArithmeticError',
]
