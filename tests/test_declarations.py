"""Tests for bit declarations, the Bit value type and the exceptions."""

import dataclasses

import pytest
import sys
from pathlib import Path

# Add parent directory to path to import the bitmask package
sys.path.insert(0, str(Path(__file__).parent.parent))

from bitmask import (
    Bit, BitConstant, BitmaskError, DuplicatedBitIdentifierError, UnknownBitError, bit
)
from sample_bitmasks import Colors, Permissions


def test_bit_constant_is_int():
    assert Permissions.READ == 1
    assert Permissions.READ | Permissions.WRITE == 3
    assert isinstance(Permissions.READ, int)
    assert Permissions.READ.bit_name == 'read'
    assert Colors.RED.bit_name is None


def test_bit_constant_repr():
    assert repr(bit(4, 'exec')) == "bit(4, 'exec')"
    assert repr(bit(4)) == "bit(4)"


def test_bit_constant_type_checks():
    with pytest.raises(TypeError):
        bit('1')
    with pytest.raises(TypeError):
        bit(True)
    with pytest.raises(TypeError):
        bit(1, 2)


def test_annotated_on():
    assert BitConstant.annotated_on(Permissions.READ) is Permissions.READ
    assert BitConstant.annotated_on(Colors.WHITE) is None
    assert BitConstant.annotated_on('read') is None


def test_bit_is_frozen():
    read = Bit('read', 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        read.value = 2
    assert int(read) == 1
    assert read == Bit('read', 1)
    assert hash(read) == hash(Bit('read', 1))


def test_bit_validation():
    with pytest.raises(TypeError):
        Bit(1, 1)
    with pytest.raises(TypeError):
        Bit('read', '1')
    with pytest.raises(TypeError):
        Bit('read', True)
    with pytest.raises(ValueError):
        Bit('read', 0)
    with pytest.raises(ValueError):
        Bit('read', -2)


def test_bit_accepts_multi_bit_value():
    assert Bit('pair', 6).value == 6


def test_exception_hierarchy():
    assert issubclass(DuplicatedBitIdentifierError, BitmaskError)
    assert issubclass(UnknownBitError, BitmaskError)
    assert issubclass(BitmaskError, Exception)


def test_exception_messages():
    assert str(UnknownBitError('delete')) == 'Unknown bit "delete".'
    assert str(UnknownBitError(16)) == 'Unknown bit "16".'
    assert str(DuplicatedBitIdentifierError('read')) == 'The name "read" is used for more than one bit.'
    assert str(DuplicatedBitIdentifierError(2)) == 'The value "2" is used for more than one bit.'
    assert DuplicatedBitIdentifierError(2).bit == 2


def test_package_exports_bit_function():
    import bitmask
    assert callable(bitmask.bit)
    assert isinstance(bitmask.bit(1), BitConstant)
    assert bitmask.bit(2, 'write').bit_name == 'write'
