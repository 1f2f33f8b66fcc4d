import random

import numpy as np
import pytest

from hillcipher.exceptions import NotInvertible, NotSquareMatrix, ValidationError
from hillcipher.linalg import (
    adjugate, determinant, identity, invert, is_invertible, minor,
    mod_inverse, multiply, normalize,
)
from hillcipher.scheme import Scheme

from .conftest import RANDOM_KEY_CASES, TEXTBOOK_MATRIX, random_invertible_key


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_identity_determinant_is_one(n):
    assert determinant(identity(n)) == 1


def test_zero_row_determinant_is_zero():
    assert determinant([[0, 0, 0], [1, 2, 3], [4, 5, 6]]) == 0
    assert determinant([[1, 2, 3], [4, 5, 6], [0, 0, 0]]) == 0


@pytest.mark.parametrize("matrix, expected", [
    ([[7]], 7),
    ([[3, 3], [2, 5]], 9),
    ([[0, 1], [1, 0]], -1),
    (TEXTBOOK_MATRIX, 441),
    ([[1, 0, 2, -1], [3, 0, 0, 5], [2, 1, 4, -3], [1, 0, 5, 0]], 30),
])
def test_determinant_values(matrix, expected):
    result = determinant(matrix)
    assert result == expected
    assert isinstance(result, int)


def test_determinant_is_exact_for_large_entries():
    big = 10 ** 12
    assert determinant([[big, 1], [1, big]]) == big * big - 1


@pytest.mark.parametrize("matrix", [
    [[1, 2, 3], [4, 5, 6]],
    [1, 2, 3],
    [[1, 2], [3]],
    [],
])
def test_determinant_requires_square_matrix(matrix):
    with pytest.raises(NotSquareMatrix):
        determinant(matrix)


def test_minor_deletes_row_and_column():
    result = minor(TEXTBOOK_MATRIX, 0, 1)
    assert result.tolist() == [[13, 10], [20, 15]]


def test_is_invertible():
    assert is_invertible(TEXTBOOK_MATRIX)
    assert not is_invertible([[1, 2], [2, 4]])


def test_invert_known_matrix():
    result = invert([[4, 7], [2, 6]])
    assert np.allclose(result, [[0.6, -0.7], [-0.2, 0.4]])


def test_invert_needs_pivoting():
    result = invert([[0, 1], [1, 0]])
    assert np.allclose(result, [[0, 1], [1, 0]])


def test_invert_twice_returns_original():
    matrix = np.array(TEXTBOOK_MATRIX)
    assert np.allclose(invert(invert(matrix)), matrix)


def test_invert_times_matrix_is_identity():
    matrix = np.array(TEXTBOOK_MATRIX)
    assert np.allclose(matrix @ invert(matrix), np.eye(3))


def test_invert_singular_matrix_fails():
    with pytest.raises(NotInvertible):
        invert([[1, 2], [2, 4]])


def test_adjugate_is_exact_integer_matrix():
    adj = adjugate([[4, 7], [2, 6]])
    assert adj.tolist() == [[6, -7], [-2, 4]]
    assert all(isinstance(x, int) for x in adj.flat)


def test_adjugate_identity_relation():
    matrix = np.array(TEXTBOOK_MATRIX, dtype=object)
    assert (matrix.dot(adjugate(matrix)) == np.eye(3, dtype=np.int64) * 441).all()


def test_multiply_has_no_reduction():
    assert multiply([[1, 2], [3, 4]], [5, 6]).tolist() == [17, 39]


def test_multiply_dimension_mismatch():
    with pytest.raises(ValidationError):
        multiply([[1, 2], [3, 4]], [1, 2, 3])


def test_normalize_handles_negative_values():
    assert normalize([-1, -27, 53, 0, 25], 26).tolist() == [25, 25, 1, 0, 25]


@pytest.mark.parametrize("value", range(-60, 60, 7))
def test_normalize_range(value):
    (residue,) = normalize([value], 26)
    assert 0 <= residue < 26


def test_normalize_rejects_bad_modulus():
    with pytest.raises(ValidationError):
        normalize([1, 2], 0)


def test_mod_inverse():
    assert mod_inverse(3, 26) == 9
    assert mod_inverse(441 % 26, 26) == 25
    with pytest.raises(NotInvertible):
        mod_inverse(2, 26)


def test_adjugate_exact_for_large_determinant():
    # 90 * I + J has determinant 90 ** 5 * 96, far beyond float precision
    matrix = np.full((6, 6), 1, dtype=np.int64) + 90 * np.eye(6, dtype=np.int64)
    det = determinant(matrix)
    assert det == 90 ** 5 * 96

    product = matrix.astype(object).dot(adjugate(matrix))
    assert (product == np.eye(6, dtype=object) * det).all()


def test_adjugate_of_one_by_one():
    assert adjugate([[7]]).tolist() == [[1]]


@pytest.mark.parametrize("seed", range(3))
@pytest.mark.parametrize("scheme, block_size", RANDOM_KEY_CASES)
def test_adjugate_identity_on_random_keys(scheme, block_size, seed):
    rng = random.Random(seed)
    key = random_invertible_key(rng, scheme, block_size)
    matrix = np.array([scheme.residue_of(s) for s in key], dtype=object).reshape(block_size, block_size)
    det = determinant(matrix)

    product = matrix.dot(adjugate(matrix))
    assert (product == np.eye(block_size, dtype=object) * det).all()


@pytest.mark.parametrize("seed", range(3))
@pytest.mark.parametrize("block_size", [2, 3, 4, 5])
def test_invert_twice_on_random_matrices(block_size, seed):
    rng = random.Random(seed)
    key = random_invertible_key(rng, Scheme(), block_size)
    matrix = np.array([ord(s) - ord("A") for s in key]).reshape(block_size, block_size)
    assert np.allclose(invert(invert(matrix)), matrix, atol=1e-6)
