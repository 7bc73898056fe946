"""
Named bit flags declared as class constants.

Key features:
- Bits declared inline on a Bitmask subclass with bit(value, name)
- Construction from integers, "name|name" strings or other instances
- Immutable values: has/add/remove, export to int, dict, list or string
- Duplicate names and values are rejected when the type is first used
- Explicit declaration tables through BitRegistry.register
"""

from .annotations import BitConstant, bit
from .bits import Bit
from .bitmask import Bitmask
from .exceptions import BitmaskError, DuplicatedBitIdentifierError, UnknownBitError
from .registry import BIT_SEPARATOR, BitDeclaration, BitRegistry, collect_declarations
from .version import __version__

__all__ = [
    'Bit',
    'BitConstant',
    'bit',
    'Bitmask',
    'BitDeclaration',
    'BitRegistry',
    'collect_declarations',
    'BIT_SEPARATOR',
    'BitmaskError',
    'DuplicatedBitIdentifierError',
    'UnknownBitError',
    '__version__',
]
