"""
Symbol Scheme

This module implements the ordered alphabet used for all modular
arithmetic. A symbol's residue is its position in the scheme, and the
size of the scheme is the modulus.
"""

import string
import logging
from typing import Dict, Iterable, Iterator, Tuple

from ..exceptions import (
    DuplicateSymbol, SchemeNotSet, UnknownSymbol, UnmappableResidue,
    ValidationError,
)

logger = logging.getLogger(__name__)

# A=0 ... Z=25
DEFAULT_SCHEME = string.ascii_uppercase


class Scheme:
    """
    Immutable ordered alphabet mapping symbols to residues and back.

    Mutating operations (``add``, ``remove``) return a new scheme so a
    failed change never leaves a half-updated mapping behind.
    """

    __slots__ = ('_symbols', '_residues')

    def __init__(self, symbols: Iterable[str] = DEFAULT_SCHEME):
        """
        Build a scheme from an ordered sequence of unique symbols.

        Args:
            symbols: Single-character symbols in residue order

        Raises:
            ValidationError: If an entry is not a single character
            DuplicateSymbol: If a symbol occurs more than once
        """
        ordered: Tuple[str, ...] = tuple(symbols)
        residues: Dict[str, int] = {}

        for residue, symbol in enumerate(ordered):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ValidationError(
                    f"Scheme symbols must be single characters, got {symbol!r}"
                )
            if symbol in residues:
                raise DuplicateSymbol(f"Symbol {symbol!r} occurs more than once in the scheme")
            residues[symbol] = residue

        self._symbols = ordered
        self._residues = residues

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    @property
    def modulus(self) -> int:
        """Modulus of the residue arithmetic (the number of symbols)."""
        return len(self._symbols)

    @property
    def pad_symbol(self) -> str:
        """
        Symbol used to fill the last partial block: the scheme's last symbol.

        Raises:
            SchemeNotSet: If the scheme is empty
        """
        if not self._symbols:
            raise SchemeNotSet("The scheme is empty, there is no pad symbol")
        return self._symbols[-1]

    def residue_of(self, symbol: str) -> int:
        try:
            return self._residues[symbol]
        except KeyError:
            raise UnknownSymbol(f"Symbol {symbol!r} has not been declared in the scheme") from None

    def symbol_of(self, residue: int) -> str:
        if not 0 <= residue < len(self._symbols):
            raise UnmappableResidue(
                f"Residue {residue} has no symbol in a scheme of size {len(self._symbols)}"
            )
        return self._symbols[residue]

    def add(self, symbol: str) -> 'Scheme':
        """
        Return a new scheme with ``symbol`` appended at the next residue.

        Raises:
            DuplicateSymbol: If the symbol is already present
        """
        if symbol in self._residues:
            raise DuplicateSymbol(f"Symbol {symbol!r} already exists in the scheme")
        logger.debug("Adding symbol %r at residue %d", symbol, len(self._symbols))
        return Scheme(self._symbols + (symbol,))

    def remove(self, symbol: str) -> 'Scheme':
        """
        Return a new scheme without ``symbol``.

        Symbols after the removed one move down by one residue.

        Raises:
            UnknownSymbol: If the symbol is absent
        """
        if symbol not in self._residues:
            raise UnknownSymbol(f"Symbol {symbol!r} does not exist in the scheme")
        logger.debug("Removing symbol %r from residue %d", symbol, self._residues[symbol])
        return Scheme(s for s in self._symbols if s != symbol)

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._residues

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scheme):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __str__(self) -> str:
        return ''.join(self._symbols)

    def __repr__(self) -> str:
        return f"Scheme({str(self)!r})"
