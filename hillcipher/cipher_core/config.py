"""
Engine Configuration

This module holds the immutable configuration of the Hill cipher engine:
the scheme, the block size and the key with its validated key matrix.
Every configuration is validated as it is constructed, and the ``with_*``
builders return new instances, so a rejected change leaves the original
configuration untouched.
"""

import os
import logging
from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Any, Dict, Iterable, Mapping, Optional, Union

import numpy as np

from ..block_codec import check_block_size
from ..exceptions import InvalidBlockSize, KeyNotSet, SchemeNotSet, ValidationError
from ..key_schedule import build_key_matrix, inverse_key_matrix
from ..scheme import DEFAULT_SCHEME, Scheme

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 1

ENGINE_DEFAULTS: Dict[str, Any] = {
    'scheme': DEFAULT_SCHEME,
    'block_size': DEFAULT_BLOCK_SIZE,
}

# Environment variables read by HillConfig.from_env
ENV_SCHEME = 'HILLCIPHER_SCHEME'
ENV_BLOCK_SIZE = 'HILLCIPHER_BLOCK_SIZE'
ENV_KEY = 'HILLCIPHER_KEY'


@dataclass(frozen=True)
class HillConfig:
    """
    Validated, immutable engine configuration.

    Attributes:
        scheme: Alphabet used for all modular arithmetic
        block_size: Dimension of the key matrix and length of each block
        key: Key string of block_size ** 2 symbols, or None when unset
        key_matrix: Key matrix derived from the key, or None when unset
    """
    scheme: Scheme = field(default_factory=Scheme)
    block_size: int = DEFAULT_BLOCK_SIZE
    key: Optional[str] = field(default=None, repr=False)
    key_matrix: Optional[np.ndarray] = field(init=False, default=None, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.scheme, Scheme):
            object.__setattr__(self, 'scheme', Scheme(self.scheme))

        check_block_size(self.block_size)

        if self.key is not None:
            if not isinstance(self.key, str):
                raise ValidationError(f"Key must be a string, got {type(self.key).__name__}")
            matrix = build_key_matrix(self.key, self.block_size, self.scheme)
            matrix.setflags(write=False)
            object.__setattr__(self, 'key_matrix', matrix)

    @classmethod
    def from_env(cls,
                 environ: Optional[Mapping[str, str]] = None,
                 scheme: Optional[Union[Scheme, Iterable[str]]] = None,
                 block_size: Optional[int] = None,
                 key: Optional[str] = None) -> 'HillConfig':
        """
        Build a configuration from environment variables and overrides.

        Reads HILLCIPHER_SCHEME, HILLCIPHER_BLOCK_SIZE and HILLCIPHER_KEY,
        falling back to ENGINE_DEFAULTS for the first two. Keyword arguments
        that are not None take precedence over the environment. The merged
        values are validated together, once.

        Args:
            environ: Mapping to read instead of os.environ
            scheme: Scheme override
            block_size: Block size override
            key: Key override

        Raises:
            InvalidBlockSize: If the block size is not a positive integer
            ValidationError: If the scheme or key is invalid
        """
        environ = os.environ if environ is None else environ

        if block_size is None:
            raw_block_size = environ.get(ENV_BLOCK_SIZE)
            if raw_block_size is None:
                block_size = ENGINE_DEFAULTS['block_size']
            else:
                try:
                    block_size = int(raw_block_size)
                except ValueError:
                    raise InvalidBlockSize(
                        f"{ENV_BLOCK_SIZE} must be a positive integer, got {raw_block_size!r}"
                    ) from None

        if scheme is None:
            scheme = environ.get(ENV_SCHEME, ENGINE_DEFAULTS['scheme'])
        if key is None:
            key = environ.get(ENV_KEY) or None

        return cls(scheme=scheme, block_size=block_size, key=key)

    @property
    def modulus(self) -> int:
        return self.scheme.modulus

    @property
    def has_key(self) -> bool:
        return self.key is not None

    @cached_property
    def inverse_matrix(self) -> np.ndarray:
        """Key matrix inverse modulo the scheme size, computed once per config."""
        self.require_ready()
        logger.debug("Computing inverse key matrix modulo %d", self.modulus)
        matrix = inverse_key_matrix(self.key_matrix, self.modulus)
        matrix.setflags(write=False)
        return matrix

    def require_ready(self) -> None:
        """
        Check that the configuration can encrypt and decrypt.

        Raises:
            SchemeNotSet: If the scheme is empty
            KeyNotSet: If no key has been set
        """
        if len(self.scheme) == 0:
            raise SchemeNotSet("You have not set a scheme for encryption yet.")
        if self.key is None:
            raise KeyNotSet("You have not set a key for encryption yet.")

    def with_scheme(self, symbols: Union[Scheme, Iterable[str]]) -> 'HillConfig':
        """Return a copy using a new scheme; the key is re-validated against it."""
        scheme = symbols if isinstance(symbols, Scheme) else Scheme(symbols)
        return replace(self, scheme=scheme)

    def with_block_size(self, block_size: int) -> 'HillConfig':
        """
        Return a copy with a new block size.

        The key survives only if its length is still block_size ** 2;
        otherwise the copy has no key.
        """
        check_block_size(block_size)
        key = self.key
        if key is not None and len(key) != block_size * block_size:
            logger.warning(
                "Block size %d does not fit the current key of length %d; key cleared",
                block_size, len(key),
            )
            key = None
        return replace(self, block_size=block_size, key=key)

    def with_key(self, key: str) -> 'HillConfig':
        """Return a copy using ``key``."""
        if key is None:
            raise ValidationError("You cannot pass a null key.")
        return replace(self, key=key)

    def with_symbol_added(self, symbol: str) -> 'HillConfig':
        return replace(self, scheme=self.scheme.add(symbol))

    def with_symbol_removed(self, symbol: str) -> 'HillConfig':
        return replace(self, scheme=self.scheme.remove(symbol))
