"""
Exception Hierarchy

This module defines the errors raised by the Hill cipher engine. They fall
into three kinds: configuration errors (the engine is not ready to run),
validation errors (an input breaks a precondition) and arithmetic errors
(an internal invariant was violated after modular reduction).
"""


class HillCipherError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(HillCipherError, RuntimeError):
    """The engine configuration is incomplete or invalid."""


class ValidationError(HillCipherError, ValueError):
    """An argument violates a precondition of the requested operation."""


class CipherArithmeticError(HillCipherError, ArithmeticError):
    """Modular arithmetic produced a value outside the scheme."""


# Configuration errors

class KeyNotSet(ConfigurationError):
    pass


class SchemeNotSet(ConfigurationError):
    pass


class InvalidBlockSize(ConfigurationError, ValueError):
    pass


# Validation errors

class InvalidKeyLength(ValidationError):
    pass


class UnknownSymbolInKey(ValidationError):
    pass


class NonInvertibleKey(ValidationError):
    pass


class NotSquareMatrix(ValidationError):
    pass


class NotInvertible(ValidationError):
    pass


class UnknownSymbol(ValidationError, KeyError):
    """A symbol is not part of the active scheme."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ''


class DuplicateSymbol(ValidationError):
    pass


class EmptyBlock(ValidationError):
    pass


# Arithmetic errors

class UnmappableResidue(CipherArithmeticError):
    pass


__all__ = [
    'HillCipherError', 'ConfigurationError', 'ValidationError',
    'CipherArithmeticError', 'KeyNotSet', 'SchemeNotSet', 'InvalidBlockSize',
    'InvalidKeyLength', 'UnknownSymbolInKey', 'NonInvertibleKey',
    'NotSquareMatrix', 'NotInvertible', 'UnknownSymbol', 'DuplicateSymbol',
    'EmptyBlock', 'UnmappableResidue',
]
