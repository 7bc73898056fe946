"""Declaration helpers for marking class constants as bits.

A constant becomes a bit when it is created with :func:`bit`:

    class Permissions(Bitmask):
        READ = bit(1, 'read')
        WRITE = bit(2, 'write')
        EXEC = bit(4)         # bit name defaults to the constant name, 'EXEC'
        ALL = 7               # plain constant, not a bit

The returned object is an ``int``, so constants still combine with the usual
operators: ``Permissions.READ | Permissions.WRITE == 3``.
"""

from typing import Any, Optional


class BitConstant(int):
    """An integer class constant marked as a bit, with an optional bit name."""

    bit_name: Optional[str]

    def __new__(cls, value: int, name: Optional[str] = None):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Bit constant expects integer, got {type(value).__name__}")
        if name is not None and not isinstance(name, str):
            raise TypeError(f"Bit name must be a string, got {type(name).__name__}")
        constant = super().__new__(cls, value)
        constant.bit_name = name
        return constant

    def __repr__(self) -> str:
        if self.bit_name is None:
            return f"bit({int(self)})"
        return f"bit({int(self)}, {self.bit_name!r})"

    @staticmethod
    def annotated_on(attr: Any) -> Optional['BitConstant']:
        """Return attr if it was declared as a bit, otherwise None."""
        return attr if isinstance(attr, BitConstant) else None


def bit(value: int, name: Optional[str] = None) -> BitConstant:
    """Declare a bit constant.

    Args:
        value: Integer value of the bit
        name: Bit name. If not provided, the constant name will be used.
    """
    return BitConstant(value, name)
