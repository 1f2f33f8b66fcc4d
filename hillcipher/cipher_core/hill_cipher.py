"""
Hill Cipher Engine

This module provides the HillCipher engine: it holds one validated
HillConfig and transforms text block by block with the key matrix (for
encryption) or its modular inverse (for decryption).
"""

import math
import logging
import threading
from typing import Callable, Iterable, Optional, Union

import numpy as np

from ..block_codec import from_blocks, to_blocks
from ..exceptions import KeyNotSet, ValidationError
from ..linalg import multiply, normalize
from ..scheme import DEFAULT_SCHEME, Scheme
from .config import DEFAULT_BLOCK_SIZE, HillConfig

logger = logging.getLogger(__name__)


class HillCipher:
    """
    Hill cipher over a configurable scheme.

    Setters build a new configuration and swap it in under a lock, so a
    rejected change leaves the engine exactly as it was. Encryption and
    decryption work on a single snapshot of the configuration.
    """

    def __init__(self,
                 scheme: Union[Scheme, Iterable[str]] = DEFAULT_SCHEME,
                 block_size: int = DEFAULT_BLOCK_SIZE,
                 key: Optional[str] = None,
                 config: Optional[HillConfig] = None):
        """
        Initialize the engine.

        Args:
            scheme: Ordered alphabet (default: A-Z)
            block_size: Symbols per block (default: 1)
            key: Optional key of block_size ** 2 symbols
            config: Pre-built configuration; overrides the other arguments
        """
        if config is None:
            config = HillConfig(scheme=scheme, block_size=block_size, key=key)
        self._config = config
        self._lock = threading.Lock()

    def _update(self, change: Callable[[HillConfig], HillConfig]) -> HillConfig:
        with self._lock:
            self._config = change(self._config)
            return self._config

    @property
    def config(self) -> HillConfig:
        return self._config

    @property
    def scheme(self) -> Scheme:
        return self._config.scheme

    @property
    def block_size(self) -> int:
        return self._config.block_size

    @property
    def key(self) -> str:
        """
        The active key.

        Raises:
            KeyNotSet: If no key has been set
        """
        key = self._config.key
        if key is None:
            raise KeyNotSet("You have not set a key for encryption yet.")
        return key

    @property
    def key_matrix(self) -> np.ndarray:
        config = self._config
        if config.key_matrix is None:
            raise KeyNotSet("Key has not been set up yet.")
        return config.key_matrix

    def set_scheme(self, symbols: Union[Scheme, Iterable[str]]) -> None:
        config = self._update(lambda c: c.with_scheme(symbols))
        logger.info("Scheme set to %d symbols", len(config.scheme))

    def set_block_size(self, block_size: int) -> None:
        config = self._update(lambda c: c.with_block_size(block_size))
        logger.info("Block size set to %d", config.block_size)

    def set_key(self, key: str) -> None:
        """
        Replace the key.

        Raises:
            InvalidKeyLength: If len(key) != block_size ** 2
            UnknownSymbolInKey: If a key symbol is not in the scheme
            NonInvertibleKey: If the key matrix has no modular inverse
        """
        config = self._update(lambda c: c.with_key(key))
        logger.info("Key accepted for block size %d", config.block_size)

    def add_symbol(self, symbol: str) -> None:
        config = self._update(lambda c: c.with_symbol_added(symbol))
        logger.info("Symbol %r added; scheme size is now %d", symbol, len(config.scheme))

    def remove_symbol(self, symbol: str) -> None:
        config = self._update(lambda c: c.with_symbol_removed(symbol))
        logger.info("Symbol %r removed; scheme size is now %d", symbol, len(config.scheme))

    @staticmethod
    def _transform_block(matrix: np.ndarray, block, modulus: int) -> np.ndarray:
        block = np.asarray(block)
        if block.shape != (matrix.shape[0],):
            raise ValidationError(
                f"Block must hold exactly {matrix.shape[0]} residues, got shape {block.shape}"
            )
        return normalize(multiply(matrix, block), modulus)

    def _transform(self, text: str, config: HillConfig, matrix: np.ndarray) -> str:
        blocks = to_blocks(text, config.block_size, config.scheme)
        return from_blocks(
            (self._transform_block(matrix, block, config.modulus) for block in blocks),
            config.scheme,
        )

    def encrypt_block(self, block) -> np.ndarray:
        """
        Encrypt one residue vector.

        Args:
            block: block_size residues

        Returns:
            The ciphertext residues
        """
        config = self._config
        config.require_ready()
        return self._transform_block(config.key_matrix, block, config.modulus)

    def decrypt_block(self, block) -> np.ndarray:
        """
        Decrypt one residue vector.

        Args:
            block: block_size residues

        Returns:
            The plaintext residues
        """
        config = self._config
        config.require_ready()
        return self._transform_block(config.inverse_matrix, block, config.modulus)

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt text over the active scheme.

        A trailing partial block is padded with the scheme's last symbol.

        Args:
            plaintext: Symbols from the scheme

        Returns:
            The ciphertext
        """
        config = self._config
        config.require_ready()
        return self._transform(plaintext, config, config.key_matrix)

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt text over the active scheme.

        Args:
            ciphertext: Symbols from the scheme

        Returns:
            The plaintext, including any padding added by encryption
        """
        config = self._config
        config.require_ready()
        return self._transform(ciphertext, config, config.inverse_matrix)


def _one_shot(key: str, block_size: Optional[int],
              scheme: Union[Scheme, Iterable[str]]) -> HillCipher:
    if block_size is None:
        block_size = max(1, math.isqrt(len(key)))
    return HillCipher(scheme=scheme, block_size=block_size, key=key)


def encrypt(plaintext: str, key: str,
            block_size: Optional[int] = None,
            scheme: Union[Scheme, Iterable[str]] = DEFAULT_SCHEME) -> str:
    """
    Convenience function to encrypt text with a one-off engine.

    Args:
        plaintext: The text to encrypt
        key: The key string
        block_size: Block size (default: square root of the key length)
        scheme: Alphabet (default: A-Z)

    Returns:
        The ciphertext
    """
    return _one_shot(key, block_size, scheme).encrypt(plaintext)


def decrypt(ciphertext: str, key: str,
            block_size: Optional[int] = None,
            scheme: Union[Scheme, Iterable[str]] = DEFAULT_SCHEME) -> str:
    """
    Convenience function to decrypt text with a one-off engine.

    Args:
        ciphertext: The text to decrypt
        key: The key string
        block_size: Block size (default: square root of the key length)
        scheme: Alphabet (default: A-Z)

    Returns:
        The plaintext
    """
    return _one_shot(key, block_size, scheme).decrypt(ciphertext)


if __name__ == "__main__":
    # Textbook example: 3x3 key over A-Z
    cipher = HillCipher(block_size=3, key="GYBNQKURP")
    print(f"Key matrix:\n{cipher.key_matrix}")

    ciphertext = cipher.encrypt("ACT")
    print(f"Ciphertext: {ciphertext}")
    assert ciphertext == "POH"

    plaintext = cipher.decrypt(ciphertext)
    print(f"Plaintext: {plaintext}")
    assert plaintext == "ACT"

    print("Hill cipher tests completed successfully!")
