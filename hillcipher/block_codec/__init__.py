"""
Block Codec Package

This package splits text into fixed-size residue vectors and maps
residue vectors back to text.
"""

from .codec import BlockSequence, check_block_size, to_blocks, from_blocks, pad

__all__ = ['BlockSequence', 'check_block_size', 'to_blocks', 'from_blocks', 'pad']
