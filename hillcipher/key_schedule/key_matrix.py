"""
Key Matrix Builder

This module turns a key string into the square key matrix of the Hill
cipher and derives the modular inverse matrix used for decryption.
"""

import math
import logging
from typing import Sequence

import numpy as np

from ..exceptions import (
    CipherArithmeticError, InvalidKeyLength, NonInvertibleKey, UnknownSymbolInKey,
)
from ..linalg import adjugate, determinant, mod_inverse, normalize
from ..scheme import Scheme

logger = logging.getLogger(__name__)


def validate_key(key: Sequence[str], block_size: int, scheme: Scheme) -> None:
    """
    Check the key length and that every key symbol is in the scheme.

    Args:
        key: Key symbols
        block_size: Dimension of the key matrix
        scheme: Active scheme

    Raises:
        InvalidKeyLength: If len(key) != block_size ** 2
        UnknownSymbolInKey: If a key symbol is not in the scheme
    """
    if len(key) != block_size * block_size:
        raise InvalidKeyLength(
            f"A key of length {len(key)} cannot be represented as a square "
            f"matrix with block size {block_size} (expected {block_size * block_size} symbols)"
        )

    missing = sorted({symbol for symbol in key if symbol not in scheme})
    if missing:
        raise UnknownSymbolInKey(
            "The key cannot be composed of symbols that have not been declared "
            f"in the scheme: {''.join(missing)!r}"
        )


def build_key_matrix(key: Sequence[str], block_size: int, scheme: Scheme) -> np.ndarray:
    """
    Build and validate the key matrix for a key.

    The matrix is filled row-major: element (i, j) is the residue of
    ``key[i * block_size + j]``. It must be invertible modulo the scheme
    size, i.e. its determinant is non-zero and coprime to the modulus.

    Args:
        key: Key symbols
        block_size: Dimension of the key matrix
        scheme: Active scheme

    Returns:
        block_size x block_size int64 matrix

    Raises:
        InvalidKeyLength: If len(key) != block_size ** 2
        UnknownSymbolInKey: If a key symbol is not in the scheme
        NonInvertibleKey: If the matrix has no inverse modulo len(scheme)
    """
    validate_key(key, block_size, scheme)

    matrix = np.array(
        [scheme.residue_of(symbol) for symbol in key], dtype=np.int64
    ).reshape(block_size, block_size)

    det = determinant(matrix)
    if det == 0:
        raise NonInvertibleKey("The key matrix has a zero determinant")
    if math.gcd(det, scheme.modulus) != 1:
        raise NonInvertibleKey(
            f"The key matrix determinant {det} shares a factor with the "
            f"scheme size {scheme.modulus} and has no modular inverse"
        )

    logger.debug("Built %dx%d key matrix", block_size, block_size)
    return matrix


def inverse_key_matrix(matrix: np.ndarray, modulus: int) -> np.ndarray:
    """
    Compute the inverse of a key matrix modulo ``modulus``.

    Args:
        matrix: Validated key matrix
        modulus: Scheme size

    Returns:
        int64 matrix K' with K . K' == I (mod modulus)

    Raises:
        NonInvertibleKey: If the determinant is not coprime to the modulus
        CipherArithmeticError: If K . K' is not the identity modulo ``modulus``
    """
    det = determinant(matrix)
    if det == 0 or math.gcd(det, modulus) != 1:
        raise NonInvertibleKey(f"Determinant {det} is not invertible modulo {modulus}")

    det_inverse = mod_inverse(det % modulus, modulus)
    inverse = normalize(adjugate(matrix) * det_inverse, modulus)

    product = normalize(np.asarray(matrix, dtype=object).dot(inverse.astype(object)), modulus)
    if not (product == np.eye(len(inverse), dtype=np.int64)).all():
        raise CipherArithmeticError(f"Inverse key matrix check failed modulo {modulus}")
    return inverse
