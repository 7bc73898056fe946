"""Per-type registry of declared bits.

The registry turns the bit constants declared on a bitmask type into an
ordered tuple of :class:`Bit` (highest value first) and decomposes integers
and "name|name" strings into those bits.

Declarations normally come from the class itself (see ``collect_declarations``)
but a type can also be given an explicit table with ``BitRegistry.register``.
"""

import logging as log
import threading
from collections import Counter
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

from .annotations import BitConstant
from .bits import Bit
from .exceptions import DuplicatedBitIdentifierError, UnknownBitError


# Separator between bit names in string specs, e.g. "read|write"
BIT_SEPARATOR = '|'


class BitDeclaration(NamedTuple):
    """A class constant marked as a bit."""
    constant_name: str
    raw_value: int
    annotated_name: Optional[str] = None


def collect_declarations(bitmask_type: type) -> List[BitDeclaration]:
    """Collect the bit constants declared on a type and its bases.

    Base classes are visited first and declaration order is kept. A constant
    redefined on a subclass replaces the inherited one; redefining it as a
    plain value removes the bit.
    """
    found: Dict[str, BitDeclaration] = {}
    for klass in reversed(bitmask_type.__mro__):
        for constant_name, attr in vars(klass).items():
            if constant_name.startswith('_'):
                continue
            constant = BitConstant.annotated_on(attr)
            if constant is None:
                found.pop(constant_name, None)
                continue
            found[constant_name] = BitDeclaration(constant_name, int(constant), constant.bit_name)
    return list(found.values())


def _default_bit_name(annotated_name: Optional[str], constant_name: str) -> str:
    return annotated_name if annotated_name is not None else constant_name


class BitRegistry:
    """Builds, validates and caches the bits of each bitmask type."""

    _BITS: Dict[type, Tuple[Bit, ...]] = {}
    _DECLARATIONS: Dict[type, List[BitDeclaration]] = {}
    _lock = threading.RLock()

    @classmethod
    def bits(cls, bitmask_type: type) -> Tuple[Bit, ...]:
        """Get the bits of a type, sorted by value in descending order.

        Raises:
            DuplicatedBitIdentifierError: If two bits share a name or a value
        """
        bits = cls._BITS.get(bitmask_type)
        if bits is not None:
            return bits

        with cls._lock:
            bits = cls._BITS.get(bitmask_type)
            if bits is None:
                declarations = cls._DECLARATIONS.get(bitmask_type)
                if declarations is None:
                    declarations = collect_declarations(bitmask_type)
                bits = cls._build(bitmask_type, declarations)
                cls._BITS[bitmask_type] = bits
                log.debug(f"Built bit registry for {bitmask_type.__name__}: {len(bits)} bits")
        return bits

    @classmethod
    def register(
        cls,
        bitmask_type: type,
        declarations: Iterable[Union[BitDeclaration, Sequence]]
    ) -> Tuple[Bit, ...]:
        """Register an explicit declaration table for a type, replacing reflection.

        Args:
            bitmask_type: The type the table belongs to
            declarations: (constant_name, raw_value[, annotated_name]) entries

        Returns:
            The validated bits of the type
        """
        table = [BitDeclaration(*declaration) for declaration in declarations]

        with cls._lock:
            bits = cls._build(bitmask_type, table)
            cls._DECLARATIONS[bitmask_type] = table
            cls._BITS[bitmask_type] = bits
            log.debug(f"Registered bit table for {bitmask_type.__name__}: {len(bits)} bits")
        return bits

    @classmethod
    def clear(cls, bitmask_type: Optional[type] = None) -> None:
        """Drop cached bits for one type, or for all types if none is given.

        Explicitly registered tables are kept and rebuilt on next access.
        """
        with cls._lock:
            if bitmask_type is None:
                cls._BITS.clear()
                log.debug("Cleared all bit registries")
            else:
                cls._BITS.pop(bitmask_type, None)
                log.debug(f"Cleared bit registry for {bitmask_type.__name__}")

    @classmethod
    def get_bits(cls, bitmask_type: type, spec: Union[int, str]) -> List[Bit]:
        """Decompose an integer or a "name|name" string into known bits.

        Integers are decomposed greedily, highest bit value first. Names are
        resolved in the order they appear and are not deduplicated.

        Raises:
            UnknownBitError: If a name or a part of the value is not a known bit
            TypeError: If spec is neither an integer nor a string
        """
        if isinstance(spec, str):
            if BIT_SEPARATOR in spec:
                found = []
                for name in spec.split(BIT_SEPARATOR):
                    found.extend(cls.get_bits(bitmask_type, name))
                return found

            for known in cls.bits(bitmask_type):
                if known.name == spec:
                    return [known]
            raise UnknownBitError(spec)

        if isinstance(spec, bool) or not isinstance(spec, int):
            raise TypeError(f"Bits must be given as integer or string, got {type(spec).__name__}")

        if spec == 0:
            return []
        if spec < 0:
            raise UnknownBitError(spec)

        for known in cls.bits(bitmask_type):
            if known.value & spec:
                remainder = spec - known.value
                if remainder == 0:
                    return [known]
                return [known] + cls.get_bits(bitmask_type, remainder)

        # Report the highest unmatched bit
        raise UnknownBitError(1 << (spec.bit_length() - 1))

    @staticmethod
    def _build(bitmask_type: type, declarations: List[BitDeclaration]) -> Tuple[Bit, ...]:
        resolve_name = getattr(bitmask_type, 'bit_name', _default_bit_name)
        bits = [
            Bit(resolve_name(declaration.annotated_name, declaration.constant_name), declaration.raw_value)
            for declaration in declarations
        ]

        for b in bits:
            if BIT_SEPARATOR in b.name:
                raise ValueError(f"Bit '{b.name}' name must not contain '{BIT_SEPARATOR}'")

        for name, count in Counter(b.name for b in bits).items():
            if count > 1:
                raise DuplicatedBitIdentifierError(name)

        for value, count in Counter(b.value for b in bits).items():
            if count > 1:
                raise DuplicatedBitIdentifierError(value)

        return tuple(sorted(bits, key=lambda b: b.value, reverse=True))
