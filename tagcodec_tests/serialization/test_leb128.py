import pytest

from tagcodec.serialization import BadDataError, Deserializer, EncodeError, OutOfDataError, Serializer
from tagcodec.serialization.encoding.leb128 import decode_leb128, encode_leb128


def _encode(n: int, signed: bool) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_leb128(se, n, signed=signed)
    return bytes(se.finalize())


@pytest.mark.parametrize(
    ['n', 'encoded_hex'],
    [
        (0, '00'),
        (63, '3f'),
        (64, 'c000'),
        (-1, '7f'),
        (-64, '40'),
        (-65, 'bf7f'),
        (624485, 'e58e26'),
        (-123456, 'c0bb78'),
    ],
)
def test_signed_known_encodings(n: int, encoded_hex: str) -> None:
    assert _encode(n, signed=True).hex() == encoded_hex
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(encoded_hex))
    assert decode_leb128(de, signed=True) == n
    de.finalize()


@pytest.mark.parametrize(
    ['n', 'encoded_hex'],
    [
        (0, '00'),
        (127, '7f'),
        (128, '8001'),
        (624485, 'e58e26'),
        (2**64 - 1, 'ffffffffffffffffff01'),
    ],
)
def test_unsigned_known_encodings(n: int, encoded_hex: str) -> None:
    assert _encode(n, signed=False).hex() == encoded_hex
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(encoded_hex))
    assert decode_leb128(de, signed=False) == n


def test_unsigned_rejects_negative() -> None:
    with pytest.raises(EncodeError):
        _encode(-1, signed=False)


def test_max_bytes_is_enforced() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('808080808001'))
    with pytest.raises(BadDataError):
        decode_leb128(de, signed=False, max_bytes=3)


def test_truncated_input() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('8080'))
    with pytest.raises(OutOfDataError):
        decode_leb128(de, signed=False)
