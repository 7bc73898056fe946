"""Exceptions raised by bitmask types and their registries."""

from typing import Union


class BitmaskError(Exception):
    """Base class for bitmask errors.

    Attributes:
        bit: The bit identifier (a name or a value) that caused the error
    """

    def __init__(self, bit: Union[int, str], message: str):
        super().__init__(message)
        self.bit = bit


class DuplicatedBitIdentifierError(BitmaskError):
    """Raised when a bit name or value is declared for more than one bit."""

    def __init__(self, bit: Union[int, str]):
        kind = 'value' if isinstance(bit, int) else 'name'
        super().__init__(bit, f'The {kind} "{bit}" is used for more than one bit.')


class UnknownBitError(BitmaskError):
    """Raised when a bit name or value is not declared on the bitmask type."""

    def __init__(self, bit: Union[int, str]):
        super().__init__(bit, f'Unknown bit "{bit}".')
