# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as a LEB128
unsigned integer.

There are two decoders: `decode_bytes` returns an owned `bytes` copy and `decode_bytes_view` returns a memoryview that
borrows from the decoder's input.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend b'\x04' before writing b'test'
>>> bytes(se.finalize()).hex()
'0474657374'

>>> de = Deserializer.build_bytes_deserializer(b'\x04test')
>>> decode_bytes(de)
b'test'
>>> de.finalize()

>>> data = bytearray(b'\x04test')
>>> de = Deserializer.build_bytes_deserializer(data)
>>> view = decode_bytes_view(de)
>>> data[1:5] = b'TEST'
>>> bytes(view)
b'TEST'
"""

from ..consts import DEFAULT_BYTES_MAX_LENGTH, DEFAULT_LEB128_MAX_BYTES
from ..deserializer import Deserializer
from ..exceptions import BadDataError, TooLongError
from ..serializer import Serializer
from ..types import Buffer
from .leb128 import decode_leb128, encode_leb128


def encode_bytes(serializer: Serializer, data: Buffer, *, max_length: int = DEFAULT_BYTES_MAX_LENGTH) -> None:
    """ Encodes a byte-sequence adding a length prefix.
    """
    view = memoryview(data)
    if view.nbytes > max_length:
        raise TooLongError(f'byte sequence of length {view.nbytes} exceeds {max_length}')
    encode_leb128(serializer, view.nbytes, signed=False)
    serializer.write_bytes(view)


def _decode_length(deserializer: Deserializer, max_length: int) -> int:
    size = decode_leb128(deserializer, signed=False, max_bytes=DEFAULT_LEB128_MAX_BYTES)
    if size > max_length:
        raise BadDataError(f'declared length {size} exceeds {max_length}')
    return size


def decode_bytes(deserializer: Deserializer, *, max_length: int = DEFAULT_BYTES_MAX_LENGTH) -> bytes:
    """ Decodes a byte-sequence with a length prefix, the result is a copy.
    """
    size = _decode_length(deserializer, max_length)
    return bytes(deserializer.read_bytes(size))


def decode_bytes_view(deserializer: Deserializer, *, max_length: int = DEFAULT_BYTES_MAX_LENGTH) -> memoryview:
    """ Decodes a byte-sequence with a length prefix, the result borrows from the decoder's input when possible.
    """
    size = _decode_length(deserializer, max_length)
    return memoryview(deserializer.read_bytes(size))
