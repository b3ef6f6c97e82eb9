from dataclasses import dataclass
from typing import Annotated, Optional

from pydantic import BaseModel

from tagcodec import (
    WITH_PYDANTIC,
    BadDataError,
    BorrowCompat,
    Compat,
    EncodeError,
    TaggedUnion,
    borrow_decode_from_bytes,
    decode_from_bytes,
    derive,
    encode_to_bytes,
    u8,
    variant,
)
from tagcodec_tests import unittest


class Settings(BaseModel):
    name: str
    retries: int = 3
    labels: list[str] = []


@derive
@dataclass
class Plain:
    id: u8
    meta: dict[str, int]


@derive
@dataclass
class Adapted:
    id: u8
    meta: Annotated[dict[str, int], WITH_PYDANTIC]


@derive
@dataclass
class Job:
    id: u8
    settings: Annotated[Settings, WITH_PYDANTIC]
    fallback: Annotated[Optional[Settings], WITH_PYDANTIC] = None


@derive
class Event(TaggedUnion):
    @variant
    class Started:
        job: Annotated[Settings, WITH_PYDANTIC]

    @variant
    class Stopped:
        code: u8


class InteropTest(unittest.TestCase):
    def test_adapted_field_round_trips_like_plain_one(self) -> None:
        meta = {'a': 1, 'b': -2}
        self.assertRoundTrip(Plain, Plain(1, meta))
        adapted = decode_from_bytes(Adapted, encode_to_bytes(Adapted, Adapted(1, meta)))
        self.assertEqual(adapted.meta, Plain(1, meta).meta)
        self.assertEqual(adapted, Adapted(1, meta))
        self.assertEqual(borrow_decode_from_bytes(Adapted, encode_to_bytes(Adapted, Adapted(1, meta))),
                         Adapted(1, meta))

    def test_adapted_field_is_json(self) -> None:
        data = encode_to_bytes(Adapted, Adapted(7, {'a': 1}))
        payload = b'{"a":1}'
        self.assertEqual(data, b'\x07' + bytes([len(payload)]) + payload)

    def test_pydantic_model(self) -> None:
        job = Job(1, Settings(name='build', labels=['x']))
        data = self.assertRoundTrip(Job, job)
        self.assertIsInstance(decode_from_bytes(Job, data).settings, Settings)
        self.assertRoundTrip(Job, Job(2, Settings(name='a'), Settings(name='b', retries=0)))

    def test_in_union(self) -> None:
        self.assertRoundTrip(Event, Event.Started(Settings(name='x')))
        self.assertRoundTrip(Event, Event.Stopped(3))

    def test_compat_wrappers(self) -> None:
        data = encode_to_bytes(Compat[list[int]], Compat([1, 2]))
        self.assertEqual(decode_from_bytes(Compat[list[int]], data), Compat([1, 2]))
        self.assertEqual(borrow_decode_from_bytes(BorrowCompat[list[int]], data), BorrowCompat([1, 2]))
        # both wrappers share the wire format
        self.assertEqual(encode_to_bytes(BorrowCompat[list[int]], BorrowCompat([1, 2])), data)

    def test_invalid_document(self) -> None:
        payload = b'{"name": 5}'
        data = b'\x01' + bytes([len(payload)]) + payload
        with self.assertRaises(BadDataError):
            decode_from_bytes(Job, data)

    def test_unserializable_value(self) -> None:
        with self.assertRaises(EncodeError):
            encode_to_bytes(Compat[object], Compat(object()))
