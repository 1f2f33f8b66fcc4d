import math
import random

import pytest

from hillcipher import HillCipher, Scheme
from hillcipher.linalg import determinant

TEXTBOOK_KEY = "GYBNQKURP"
TEXTBOOK_MATRIX = [[6, 24, 1], [13, 16, 10], [20, 17, 15]]
TEXTBOOK_INVERSE = [[8, 5, 10], [21, 8, 21], [21, 12, 8]]

# Printable ASCII, space through tilde
PRINTABLE_SCHEME = ''.join(chr(c) for c in range(32, 127))

# (scheme, block size) pairs for randomised key checks
RANDOM_KEY_CASES = [
    (Scheme(), 2),
    (Scheme(), 3),
    (Scheme("ABCDEFGHIJKLMNOPQRSTUVWXYZ .?"), 4),
    (Scheme(PRINTABLE_SCHEME), 5),
    (Scheme(PRINTABLE_SCHEME), 6),
    (Scheme(PRINTABLE_SCHEME), 7),
]


def random_invertible_key(rng: random.Random, scheme: Scheme, block_size: int) -> str:
    """Draw keys until one has a determinant coprime to the scheme size."""
    while True:
        key = ''.join(rng.choice(scheme.symbols) for _ in range(block_size * block_size))
        residues = [scheme.residue_of(s) for s in key]
        rows = [residues[i:i + block_size] for i in range(0, len(residues), block_size)]
        det = determinant(rows)
        if det != 0 and math.gcd(det, scheme.modulus) == 1:
            return key


@pytest.fixture
def alphabet():
    return Scheme()


@pytest.fixture
def textbook_cipher():
    return HillCipher(block_size=3, key=TEXTBOOK_KEY)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("HILLCIPHER_SCHEME", "HILLCIPHER_BLOCK_SIZE", "HILLCIPHER_KEY"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
