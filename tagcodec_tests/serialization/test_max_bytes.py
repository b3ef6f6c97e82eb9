import pytest

from tagcodec.serialization import Deserializer, MaxBytesExceededError, Serializer
from tagcodec.serialization.encoding.bytes import decode_bytes_view


def test_serializer_budget() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(3)
    se.write_bytes(b'ab')
    assert se.bytes_left == 1
    with pytest.raises(MaxBytesExceededError) as exc_info:
        se.write_bytes(b'cd')
    assert (exc_info.value.max_bytes, exc_info.value.needed) == (3, 4)


def test_optional_budget() -> None:
    se = Serializer.build_bytes_serializer()
    assert se.with_optional_max_bytes(None) is se
    de = Deserializer.build_bytes_deserializer(b'')
    assert de.with_optional_max_bytes(None) is de


def test_peeking_is_free() -> None:
    de = Deserializer.build_bytes_deserializer(b'abc').with_max_bytes(1)
    assert bytes(de.peek_bytes(3)) == b'abc'
    assert de.read_byte() == ord('a')
    with pytest.raises(MaxBytesExceededError):
        de.read_byte()


def test_read_all() -> None:
    de = Deserializer.build_bytes_deserializer(b'abc').with_max_bytes(3)
    assert bytes(de.read_all()) == b'abc'
    de.finalize()
    de = Deserializer.build_bytes_deserializer(b'abcd').with_max_bytes(3)
    with pytest.raises(MaxBytesExceededError):
        de.read_all()


def test_views_pass_through() -> None:
    data = bytearray(b'\x02abX')
    de = Deserializer.build_bytes_deserializer(data).with_max_bytes(3)
    view = decode_bytes_view(de)
    data[1] = ord('z')
    assert bytes(view) == b'zb'


def test_negative_budget() -> None:
    with pytest.raises(ValueError):
        Serializer.build_bytes_serializer().with_max_bytes(-1)
