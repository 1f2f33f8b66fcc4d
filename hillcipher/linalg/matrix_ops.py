"""
Matrix Operations

This module implements the linear algebra kernel of the cipher.

Determinants are computed exactly on Python integers by recursive
cofactor expansion along the first row. The expansion costs O(n!) and is
meant for the small block sizes a Hill cipher uses (up to about 5);
callers are responsible for bounding the block size.

Inversion uses Gauss-Jordan elimination with partial pivoting over
floating point. The adjugate is built from exact integer cofactors, so
modular inverses stay exact however large the determinant grows.
"""

import math
import logging
from typing import Sequence, Union

import numpy as np

from ..exceptions import NotInvertible, NotSquareMatrix, ValidationError

logger = logging.getLogger(__name__)

# Decimal places kept on the floating point inverse
ROUND_DECIMALS = 10

Number = Union[int, float]
MatrixLike = Union[np.ndarray, Sequence[Sequence[Number]]]
VectorLike = Union[np.ndarray, Sequence[Number]]


def _scalar(value) -> Number:
    """Unwrap a numpy scalar into the matching Python number."""
    return value.item() if isinstance(value, np.generic) else value


def _as_square(matrix: MatrixLike) -> np.ndarray:
    """
    Convert input to a 2-D array and check that it is square.

    Raises:
        NotSquareMatrix: If the input is ragged, empty or not square
    """
    try:
        m = np.asarray(matrix)
    except ValueError:
        raise NotSquareMatrix("Matrix rows have different lengths") from None

    if m.ndim != 2 or m.shape[0] != m.shape[1] or m.shape[0] == 0:
        raise NotSquareMatrix(f"Expected a non-empty square matrix, got shape {m.shape}")
    return m


def identity(n: int) -> np.ndarray:
    """Integer identity matrix of size n."""
    return np.eye(n, dtype=np.int64)


def minor(matrix: MatrixLike, row: int, col: int) -> np.ndarray:
    """
    Return the submatrix obtained by deleting one row and one column.

    Args:
        matrix: Square matrix
        row: Index of the row to delete
        col: Index of the column to delete

    Returns:
        The (n-1) x (n-1) minor
    """
    m = _as_square(matrix)
    return np.delete(np.delete(m, row, axis=0), col, axis=1)


def _cofactor_expansion(m: np.ndarray) -> Number:
    n = m.shape[0]
    if n == 1:
        return _scalar(m[0, 0])
    if n == 2:
        a, b = _scalar(m[0, 0]), _scalar(m[0, 1])
        c, d = _scalar(m[1, 0]), _scalar(m[1, 1])
        return a * d - b * c

    total = 0
    for i in range(n):
        total += (-1) ** i * _scalar(m[0, i]) * _cofactor_expansion(minor(m, 0, i))
    return total


def determinant(matrix: MatrixLike) -> Number:
    """
    Compute the determinant by cofactor expansion along the first row.

    Integer input gives an exact Python ``int``; no floating point is
    involved.

    Args:
        matrix: Square matrix

    Returns:
        The determinant

    Raises:
        NotSquareMatrix: If the matrix is not square
    """
    return _cofactor_expansion(_as_square(matrix))


def is_invertible(matrix: MatrixLike) -> bool:
    """True iff the determinant is non-zero."""
    return determinant(matrix) != 0


def invert(matrix: MatrixLike) -> np.ndarray:
    """
    Invert a matrix by Gauss-Jordan elimination with partial pivoting.

    The augmented matrix [M | I] is reduced column by column. For every
    pivot column the remaining row with the largest absolute value in that
    column is swapped into place, the pivot row is divided by the pivot and
    the column is eliminated from all other rows.

    Args:
        matrix: Square matrix with a non-zero determinant

    Returns:
        The real inverse as a float array, rounded to ``ROUND_DECIMALS``

    Raises:
        NotSquareMatrix: If the matrix is not square
        NotInvertible: If the determinant is zero
    """
    m = _as_square(matrix)
    if determinant(m) == 0:
        raise NotInvertible("Matrix has a zero determinant and cannot be inverted")

    n = m.shape[0]
    augmented = np.hstack([m.astype(float), np.eye(n)])

    for col in range(n):
        pivot = col + int(np.argmax(np.abs(augmented[col:, col])))
        if pivot != col:
            augmented[[col, pivot]] = augmented[[pivot, col]]

        augmented[col] /= augmented[col, col]

        for row in range(n):
            if row != col:
                augmented[row] -= augmented[row, col] * augmented[col]

    # -0.0 after rounding is normalised to 0.0
    return np.round(augmented[:, n:], ROUND_DECIMALS) + 0.0


def adjugate(matrix: MatrixLike) -> np.ndarray:
    """
    Compute the adjugate (transposed cofactor matrix) of an integer matrix.

    Entry (j, i) is (-1) ** (i + j) times the determinant of the minor
    without row i and column j, so M . adj(M) == det(M) . I exactly.

    Returns:
        Object array of Python ints

    Raises:
        NotSquareMatrix: If the matrix is not square
    """
    m = _as_square(matrix)
    n = m.shape[0]
    adj = np.empty((n, n), dtype=object)
    if n == 1:
        adj[0, 0] = 1
        return adj

    for i in range(n):
        for j in range(n):
            adj[j, i] = (-1) ** (i + j) * determinant(minor(m, i, j))
    return adj


def multiply(matrix: MatrixLike, vector: VectorLike) -> np.ndarray:
    """
    Matrix-vector product without modular reduction.

    Arithmetic runs on Python integers so large products cannot overflow.

    Raises:
        ValidationError: If the dimensions do not match
    """
    m = np.asarray(matrix, dtype=object)
    v = np.asarray(vector, dtype=object)

    if m.ndim != 2 or v.ndim != 1 or m.shape[1] != v.shape[0]:
        raise ValidationError(
            f"Cannot multiply a matrix of shape {m.shape} by a vector of shape {v.shape}"
        )
    return m.dot(v)


def normalize(vector: VectorLike, modulus: int) -> np.ndarray:
    """
    Reduce every element into the range [0, modulus).

    Args:
        vector: Integer values, possibly negative
        modulus: Positive modulus

    Returns:
        int64 array of residues

    Raises:
        ValidationError: If the modulus is not positive
    """
    if modulus < 1:
        raise ValidationError(f"Modulus must be positive, got {modulus}")

    v = np.asarray(vector, dtype=object)
    return (((v % modulus) + modulus) % modulus).astype(np.int64)


def mod_inverse(value: int, modulus: int) -> int:
    """
    Multiplicative inverse of ``value`` modulo ``modulus``.

    Raises:
        NotInvertible: If value and modulus are not coprime
    """
    value, modulus = int(value), int(modulus)
    if modulus < 1:
        raise ValidationError(f"Modulus must be positive, got {modulus}")
    if math.gcd(value, modulus) != 1:
        raise NotInvertible(f"{value} has no inverse modulo {modulus}")
    return pow(value, -1, modulus)
