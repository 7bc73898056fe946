"""Bitmask types shared by the tests.

Types with invalid declarations are fine to define here: bits are only
validated when a type is first used.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from bitmask import Bitmask, bit


class Permissions(Bitmask):
    READ = bit(1, 'read')
    WRITE = bit(2, 'write')
    EXEC = bit(4, 'exec')


class ExtendedPermissions(Permissions):
    ADMIN = bit(8, 'admin')


class NoExecPermissions(Permissions):
    # Redefined as a plain constant, so no longer a bit
    EXEC = 4


class Colors(Bitmask):
    """Bits without explicit names use the constant name."""
    RED = bit(1)
    GREEN = bit(2)
    BLUE = bit(4)
    WHITE = 7


class LowerCaseColors(Bitmask):
    RED = bit(1)
    GREEN = bit(2)
    BLUE = bit(4, 'Blue')

    @classmethod
    def bit_name(cls, annotated_name, constant_name):
        return (annotated_name or constant_name).lower()


class MetaBits(Bitmask):
    """Declares a value with more than one bit set."""
    LOW = bit(1, 'low')
    PAIR = bit(6, 'pair')


class DuplicatedNames(Bitmask):
    READ = bit(1, 'read')
    ALSO_READ = bit(2, 'read')


class DuplicatedValues(Bitmask):
    READ = bit(1, 'read')
    WRITE = bit(1, 'write')


class DuplicatedNamesAndValues(Bitmask):
    READ = bit(1, 'read')
    WRITE = bit(2, 'write')
    ALSO_WRITE = bit(2, 'write')


class Empty(Bitmask):
    pass


class StaticPermissions(Bitmask):
    """Bits come from BitRegistry.register instead of class constants."""
    pass


class SeparatorInName(Bitmask):
    A = bit(1, 'a|b')
    C = bit(2, 'c')
