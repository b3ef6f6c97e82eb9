from dataclasses import dataclass, field, replace
from typing import NamedTuple, Optional

import pytest

from tagcodec import (
    BadDataError,
    Capability,
    EncodeError,
    MaxBytesExceededError,
    OutOfDataError,
    TrailingDataError,
    UnsupportedTypeError,
    borrow_decode_from_bytes,
    bound,
    decode_from_bytes,
    derive,
    encode_to_bytes,
    i16,
    u8,
    u16,
    u32,
)
from tagcodec.runtime import BorrowDecode, Decode, Encode
from tagcodec_tests import unittest


@derive
@dataclass(frozen=True)
class Point:
    x: u32
    y: u32


@derive
class Header(NamedTuple):
    version: u8
    flags: u16
    label: str


@derive
@dataclass
class Empty:
    pass


@derive
@dataclass
class Document:
    header: Header
    points: list[Point]
    tags: frozenset[str]
    attrs: dict[str, int]
    origin: Optional[Point]
    offset: i16
    blob: bytes
    pair: tuple[bool, int]
    rest: tuple[u8, ...] = field(default=())


@derive(capabilities=['encode'])
@dataclass
class WriteOnly:
    value: u8


@dataclass(frozen=True)
class LabeledPoint(Point):
    label: str


class RecordRoundTripTest(unittest.TestCase):
    def test_wire_format(self) -> None:
        # fields in declaration order, no framing
        self.assertEqual(encode_to_bytes(Point, Point(1, 2)), bytes.fromhex('00000001' '00000002'))
        self.assertEqual(encode_to_bytes(Header, Header(1, 0x0203, 'ab')), bytes.fromhex('01' '0203' '02' '6162'))
        self.assertEqual(encode_to_bytes(Empty, Empty()), b'')

    def test_round_trip(self) -> None:
        self.assertRoundTrip(Point, Point(2**32 - 1, 0))
        self.assertRoundTrip(Header, Header(255, 0, ''))
        self.assertRoundTrip(Empty, Empty())
        document = Document(
            header=Header(1, 2, 'doc'),
            points=[Point(1, 2), Point(3, 4)],
            tags=frozenset({'a', 'b'}),
            attrs={'x': -1, 'y': 10**30},
            origin=None,
            offset=-300,
            blob=b'\x00\xff',
            pair=(True, -5),
            rest=(1, 2, 3),
        )
        self.assertRoundTrip(Document, document)
        self.assertRoundTrip(Document, replace(document, origin=Point(0, 0)))

    def test_procedures_are_called_directly(self) -> None:
        data = self.encode_with(Point, Point(5, 6))
        self.assertEqual(self.decode_with(Point, data), Point(5, 6))
        self.assertEqual(self.decode_with(Point, data, borrow=True), Point(5, 6))

    def test_decoded_types(self) -> None:
        header = decode_from_bytes(Header, encode_to_bytes(Header, Header(1, 2, 'x')))
        self.assertIsInstance(header, Header)
        self.assertIsInstance(decode_from_bytes(Point, bytes(8)), Point)

    def test_procedure_metadata(self) -> None:
        self.assertEqual(Point.encode.__qualname__, 'Point.encode')
        self.assertEqual(Point.decode.__qualname__, 'Point.decode')
        self.assertEqual(Point.encode.__module__, __name__)
        self.assertEqual(Point.__tagcodec_capabilities__, frozenset(Capability))  # type: ignore[attr-defined]

    def test_traits(self) -> None:
        self.assertIsInstance(Point(1, 2), Encode)
        self.assertTrue(issubclass(Point, Decode))
        self.assertTrue(issubclass(Point, BorrowDecode))
        bound(Point, Encode)
        bound(list[Point], BorrowDecode)


class RecordErrorsTest(unittest.TestCase):
    def test_out_of_range_field(self) -> None:
        with self.assertRaises(EncodeError):
            encode_to_bytes(Header, Header(256, 0, ''))

    def test_wrong_field_type(self) -> None:
        with self.assertRaises(TypeError):
            encode_to_bytes(Point, Point('1', 2))  # type: ignore[arg-type]

    def test_short_input(self) -> None:
        with self.assertRaises(OutOfDataError):
            decode_from_bytes(Point, bytes(7))

    def test_trailing_input(self) -> None:
        with self.assertRaises(TrailingDataError):
            decode_from_bytes(Point, bytes(9))

    def test_failure_is_not_wrapped(self) -> None:
        # invalid utf-8 in the last field surfaces as is
        with self.assertRaises(BadDataError):
            decode_from_bytes(Header, bytes.fromhex('01' '0203' '01' 'ff'))

    def test_missing_capability(self) -> None:
        self.assertEqual(encode_to_bytes(WriteOnly, WriteOnly(3)), b'\x03')
        self.assertFalse(hasattr(WriteOnly, 'decode'))
        with self.assertRaises(UnsupportedTypeError):
            decode_from_bytes(WriteOnly, b'\x03')
        with self.assertRaises(UnsupportedTypeError):
            bound(WriteOnly, Decode)

    def test_subclass_of_derived_class_is_not_derived(self) -> None:
        with self.assertRaises(UnsupportedTypeError):
            encode_to_bytes(LabeledPoint, LabeledPoint(1, 2, 'a'))
        with self.assertRaises(UnsupportedTypeError):
            decode_from_bytes(LabeledPoint, bytes.fromhex('00000001' '00000002' '01' '61'))
        with self.assertRaises(UnsupportedTypeError):
            bound(LabeledPoint, Encode)


class MaxBytesTest(unittest.TestCase):
    def test_encode_within_limit(self) -> None:
        self.assertEqual(encode_to_bytes(Point, Point(1, 2), max_bytes=8), encode_to_bytes(Point, Point(1, 2)))
        self.assertEqual(encode_to_bytes(Empty, Empty(), max_bytes=0), b'')

    def test_decode_within_limit(self) -> None:
        self.assertEqual(decode_from_bytes(Point, bytes(8), max_bytes=8), Point(0, 0))
        header = borrow_decode_from_bytes(Header, bytes.fromhex('01' '0203' '02' '6162'), max_bytes=6)
        self.assertEqual(header, Header(1, 0x0203, 'ab'))

    def test_limit_does_not_hide_trailing_input(self) -> None:
        with self.assertRaises(TrailingDataError):
            decode_from_bytes(Point, bytes(9), max_bytes=8)

    def test_length_prefix_is_checked_before_reading(self) -> None:
        data = encode_to_bytes(Header, Header(1, 2, 'x' * 1000))
        with self.assertRaises(MaxBytesExceededError) as cm:
            decode_from_bytes(Header, data, max_bytes=100)
        # version, flags and the two byte length prefix were consumed, the label was not
        self.assertEqual(cm.exception.needed, 1005)
        self.assertEqual(cm.exception.max_bytes, 100)


@pytest.mark.parametrize('max_bytes', [0, 4, 7])
def test_encode_over_limit(max_bytes: int) -> None:
    with pytest.raises(MaxBytesExceededError):
        encode_to_bytes(Point, Point(1, 2), max_bytes=max_bytes)


@pytest.mark.parametrize('max_bytes', [0, 4, 7])
def test_decode_over_limit(max_bytes: int) -> None:
    with pytest.raises(MaxBytesExceededError):
        decode_from_bytes(Point, bytes(8), max_bytes=max_bytes)
