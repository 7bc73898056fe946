"""Bitmask base class for immutable combinations of declared bits."""

import logging as log
from typing import Dict, Iterator, List, Mapping, Tuple, Union

from .bits import Bit
from .exceptions import UnknownBitError
from .registry import BIT_SEPARATOR, BitRegistry


class Bitmask:
    """Immutable integer value made of the bits declared on a subclass.

    Subclasses declare their bits as class constants:

        class Permissions(Bitmask):
            READ = bit(1, 'read')
            WRITE = bit(2, 'write')

        Permissions('read|write').to_int()    # 3
        Permissions(3).has('read')             # True
        Permissions(3).remove('write')         # <Permissions read (1)>

    Operations never modify an instance; add() and remove() return new ones.
    """

    __slots__ = ('_value',)

    def __init__(self, spec: Union[int, str, 'Bitmask'] = 0):
        """
        Args:
            spec: An integer value, a "name|name" string, or an instance of the
                same type. Instances of other Bitmask subclasses are rejected
                with TypeError rather than reinterpreted.
        """
        if type(self) is Bitmask:
            raise TypeError("Bitmask is abstract, declare bits on a subclass")

        # Fails here if the declared bits are malformed, even for an empty value
        self.bits()

        if isinstance(spec, str):
            value = 0
            for known in self.get_bits(spec):
                value |= known.value
        elif isinstance(spec, Bitmask):
            if type(spec) is not type(self):
                raise TypeError(
                    f"Cannot create {type(self).__name__} from {type(spec).__name__}"
                )
            value = spec.value
        else:
            value = spec

        # Rejects negative values and bits that are not declared
        self.get_bits(value)
        object.__setattr__(self, '_value', int(value))

    def __setattr__(self, key: str, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through the validating constructor
        return (type(self), (self._value,))

    @property
    def value(self) -> int:
        return self._value

    def has(self, bits: Union[int, str, 'Bitmask']) -> bool:
        """Check if all of the specified bits are set."""
        for known in self._resolve(bits):
            if known.value & self._value != known.value:
                return False
        return True

    def add(self, bits: Union[int, str, 'Bitmask']) -> 'Bitmask':
        """Return a new bitmask with the specified bits added."""
        value = self._value
        for known in self._resolve(bits):
            value |= known.value
        return type(self)(value)

    def remove(self, bits: Union[int, str, 'Bitmask']) -> 'Bitmask':
        """Return a new bitmask with the specified bits removed."""
        value = self._value
        for known in self._resolve(bits):
            value &= ~known.value
        return type(self)(value)

    def to_int(self) -> int:
        return self._value

    def to_dict(self) -> Dict[int, str]:
        """
        Export the set bits to a dictionary.

        Keys are bit values and values are bit names, highest value first.
        """
        return {known.value: known.name for known in self.get_bits(self._value)}

    def to_list(self) -> List[str]:
        """Names of the set bits, highest value first."""
        return [known.name for known in self.get_bits(self._value)]

    def to_string(self) -> str:
        """
        Serialize to a "name|name" string accepted by the constructor.
        An empty bitmask gives an empty string.
        """
        return BIT_SEPARATOR.join(self.to_list())

    @classmethod
    def from_dict(cls, data: Mapping[int, str], strict: bool = True) -> 'Bitmask':
        """
        Import bits from a {value: name} dictionary such as the one to_dict() returns.

        Args:
            data: Bit values mapped to bit names
            strict: If False, entries that don't match a declared bit are logged and skipped
        """
        value = 0
        for bit_value, name in data.items():
            try:
                known = cls.get_bits(name)
                if len(known) != 1 or known[0].value != bit_value:
                    raise UnknownBitError(bit_value)
            except (UnknownBitError, TypeError) as e:
                if strict:
                    raise
                log.warning(f"Skipping bit {bit_value} '{name}' for {cls.__name__}: {e}")
                continue
            value |= bit_value
        return cls(value)

    @classmethod
    def bits(cls) -> Tuple[Bit, ...]:
        """All declared bits of this type, highest value first."""
        return BitRegistry.bits(cls)

    @classmethod
    def get_bits(cls, bits: Union[int, str]) -> List[Bit]:
        """Decompose an integer or a "name|name" string into declared bits."""
        return BitRegistry.get_bits(cls, bits)

    @classmethod
    def bit_name(cls, annotated_name, constant_name: str) -> str:
        """Name of a declared bit. Override to change the naming rule."""
        return annotated_name if annotated_name is not None else constant_name

    def _resolve(self, bits) -> List[Bit]:
        if isinstance(bits, Bitmask):
            if type(bits) is not type(self):
                raise TypeError(
                    f"Cannot combine {type(self).__name__} with {type(bits).__name__}"
                )
            bits = bits.value
        return self.get_bits(bits)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __iter__(self) -> Iterator[Bit]:
        return iter(self.get_bits(self._value))

    def __contains__(self, bits) -> bool:
        return self.has(bits)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        names = self.to_string()
        if names:
            return f"<{type(self).__name__} {names} ({self._value})>"
        return f"<{type(self).__name__} ({self._value})>"
