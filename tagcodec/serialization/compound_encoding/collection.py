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
A collection is any value that has a known size and is iterable.

Layout: [N: unsigned leb128][value_0]...[value_N]

>>> from tagcodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_collection(se, ['foo', 'bar'], encode_utf8)
>>> bytes(se.finalize()).hex()
'0203666f6f03626172'

When decoding, the builder can be any compatible collection, it only matters that it can be initialized with an
`Iterable[T]`.

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0203666f6f03626172'))
>>> decode_collection(de, decode_utf8, tuple)
('foo', 'bar')
>>> de.finalize()
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from ..consts import DEFAULT_BYTES_MAX_LENGTH, DEFAULT_LEB128_MAX_BYTES
from ..deserializer import Deserializer
from ..encoding.leb128 import decode_leb128, encode_leb128
from ..exceptions import BadDataError
from ..serializer import Serializer
from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_leb128(serializer, len(values), signed=False)
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
    *,
    max_length: int = DEFAULT_BYTES_MAX_LENGTH,
) -> R:
    length = decode_leb128(deserializer, signed=False, max_bytes=DEFAULT_LEB128_MAX_BYTES)
    if length > max_length:
        raise BadDataError(f'declared collection length {length} exceeds {max_length}')
    return builder(decoder(deserializer) for _ in range(length))
