from collections import OrderedDict
from typing import NewType, Optional, TypeVar

import pytest

from tagcodec import (
    Capability,
    EncodeError,
    UnsupportedTypeError,
    borrow_decode_from_bytes,
    decode_from_bytes,
    encode_to_bytes,
    i8,
    i16,
    i32,
    i64,
    u8,
    u16,
    u32,
    u64,
)
from tagcodec.runtime.codec_types import make_codec_type

T = TypeVar('T')
Amount = NewType('Amount', u64)


@pytest.mark.parametrize(
    ['type_', 'lower', 'upper', 'size'],
    [
        (u8, 0, 2**8 - 1, 1),
        (u16, 0, 2**16 - 1, 2),
        (u32, 0, 2**32 - 1, 4),
        (u64, 0, 2**64 - 1, 8),
        (i8, -2**7, 2**7 - 1, 1),
        (i16, -2**15, 2**15 - 1, 2),
        (i32, -2**31, 2**31 - 1, 4),
        (i64, -2**63, 2**63 - 1, 8),
    ],
)
def test_sized_int_bounds(type_, lower: int, upper: int, size: int) -> None:
    assert len(encode_to_bytes(type_, lower)) == size
    assert decode_from_bytes(type_, encode_to_bytes(type_, upper)) == upper
    with pytest.raises(EncodeError):
        encode_to_bytes(type_, upper + 1)
    with pytest.raises(EncodeError):
        encode_to_bytes(type_, lower - 1)


def test_sized_ints_are_big_endian() -> None:
    assert encode_to_bytes(u32, 0x01020304) == bytes.fromhex('01020304')
    assert encode_to_bytes(i16, -2) == bytes.fromhex('fffe')


def test_bool_is_not_an_int() -> None:
    with pytest.raises(TypeError):
        encode_to_bytes(u8, True)
    with pytest.raises(TypeError):
        encode_to_bytes(int, False)
    with pytest.raises(TypeError):
        encode_to_bytes(bool, 1)
    assert encode_to_bytes(bool, True) == b'\x01'


def test_int_is_unbounded() -> None:
    assert decode_from_bytes(int, encode_to_bytes(int, -10**40)) == -10**40


def test_newtype_uses_its_supertype() -> None:
    assert encode_to_bytes(Amount, 5) == encode_to_bytes(u64, 5)


def test_optional() -> None:
    assert encode_to_bytes(Optional[u8], None) == b'\x00'
    assert encode_to_bytes(u8 | None, 3) == b'\x01\x03'
    assert decode_from_bytes(Optional[str], b'\x01\x01a') == 'a'


def test_collections() -> None:
    assert encode_to_bytes(list[u8], [1, 2]) == b'\x02\x01\x02'
    assert decode_from_bytes(set[u8], b'\x02\x01\x02') == {1, 2}
    assert decode_from_bytes(frozenset[u8], b'\x01\x07') == frozenset({7})
    assert decode_from_bytes(dict[str, u8], b'\x01\x01a\x05') == {'a': 5}
    assert decode_from_bytes(OrderedDict[str, u8], b'\x00') == {}
    assert encode_to_bytes(tuple[u8, str], (1, 'a')) == b'\x01\x01a'
    assert encode_to_bytes(tuple[u8, ...], (1, 2, 3)) == b'\x03\x01\x02\x03'


def test_collection_type_is_checked() -> None:
    with pytest.raises(TypeError):
        encode_to_bytes(list[u8], (1, 2))
    with pytest.raises(TypeError):
        encode_to_bytes(tuple[u8, u8], (1,))


def test_borrowed_bytes() -> None:
    value = borrow_decode_from_bytes(list[bytes], b'\x01\x02ab')
    assert isinstance(value[0], memoryview)
    assert decode_from_bytes(list[bytes], b'\x01\x02ab') == [b'ab']


@pytest.mark.parametrize('type_', [complex, float, tuple, list, int | str, T, 'u8', object])
def test_unsupported(type_) -> None:
    with pytest.raises(UnsupportedTypeError):
        make_codec_type(type_)


def test_supports() -> None:
    assert make_codec_type(dict[str, list[Optional[u8]]]).supports(Capability.BORROW_DECODE)
