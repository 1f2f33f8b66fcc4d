"""
Block Codec

This module converts between text and the integer block vectors the
cipher transforms. The final partial block is padded with the scheme's
pad symbol (its last symbol).
"""

import logging
from typing import Iterable, Iterator

import numpy as np

from ..exceptions import EmptyBlock, InvalidBlockSize
from ..scheme import Scheme

logger = logging.getLogger(__name__)


def check_block_size(block_size) -> None:
    """
    Check that a block size is a positive integer.

    Raises:
        InvalidBlockSize: If block_size is not an int (bools excluded) or is below 1
    """
    if not isinstance(block_size, int) or isinstance(block_size, bool) or block_size < 1:
        raise InvalidBlockSize(f"Block size must be a positive integer, got {block_size!r}")


class BlockSequence:
    """
    Lazy, restartable sequence of residue vectors over a text.

    Every iteration starts again from the first block, and blocks are
    only encoded when they are reached.
    """

    def __init__(self, text: str, block_size: int, scheme: Scheme):
        check_block_size(block_size)

        self.text = text
        self.block_size = block_size
        self.scheme = scheme

    def __len__(self) -> int:
        return -(-len(self.text) // self.block_size)

    def block(self, index: int) -> np.ndarray:
        """
        Encode the block at ``index``.

        Args:
            index: Zero-based block index

        Returns:
            int64 vector of length block_size

        Raises:
            EmptyBlock: If no characters are available at this index
            UnknownSymbol: If a character is not in the scheme
        """
        start = index * self.block_size
        chunk = self.text[start:start + self.block_size]
        if index < 0 or not chunk:
            raise EmptyBlock(f"Block {index} has no characters available")

        chunk = chunk.ljust(self.block_size, self.scheme.pad_symbol)
        return np.array([self.scheme.residue_of(symbol) for symbol in chunk], dtype=np.int64)

    def __iter__(self) -> Iterator[np.ndarray]:
        for index in range(len(self)):
            yield self.block(index)


def to_blocks(text: str, block_size: int, scheme: Scheme) -> BlockSequence:
    """
    Split text into residue vectors of length ``block_size``.

    Args:
        text: Symbols from the scheme
        block_size: Number of symbols per block
        scheme: Active scheme

    Returns:
        A lazy BlockSequence
    """
    blocks = BlockSequence(text, block_size, scheme)
    logger.debug("Split %d symbols into %d blocks of %d", len(text), len(blocks), block_size)
    return blocks


def from_blocks(blocks: Iterable[Iterable[int]], scheme: Scheme) -> str:
    """
    Map residue vectors back to text.

    Raises:
        UnmappableResidue: If a residue has no symbol in the scheme
    """
    return ''.join(
        scheme.symbol_of(int(residue))
        for block in blocks
        for residue in block
    )


def pad(text: str, block_size: int, scheme: Scheme) -> str:
    """Pad text with the scheme's pad symbol to a multiple of ``block_size``."""
    check_block_size(block_size)

    remainder = len(text) % block_size
    if remainder == 0:
        return text
    return text + scheme.pad_symbol * (block_size - remainder)
