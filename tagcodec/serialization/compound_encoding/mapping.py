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
Encoding a mapping is equivalent to encoding a collection of 2-tuples.

Layout: [N: unsigned leb128][key_0][value_0]...[key_N][value_N]

>>> from tagcodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from tagcodec.serialization.encoding.bool import encode_bool, decode_bool
>>> se = Serializer.build_bytes_serializer()
>>> encode_mapping(se, {'foo': False, 'bar': True}, encode_utf8, encode_bool)
>>> bytes(se.finalize()).hex()
'0203666f6f000362617201'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0203666f6f000362617201'))
>>> decode_mapping(de, decode_utf8, decode_bool, dict)
{'foo': False, 'bar': True}
>>> de.finalize()
"""

from collections.abc import Iterable, Mapping
from typing import Callable, TypeVar

from ..consts import DEFAULT_BYTES_MAX_LENGTH, DEFAULT_LEB128_MAX_BYTES
from ..deserializer import Deserializer
from ..encoding.leb128 import decode_leb128, encode_leb128
from ..exceptions import BadDataError
from ..serializer import Serializer
from . import Decoder, Encoder

KT = TypeVar('KT')
VT = TypeVar('VT')
R = TypeVar('R', bound=Mapping)


def encode_mapping(
    serializer: Serializer,
    values_mapping: Mapping[KT, VT],
    key_encoder: Encoder[KT],
    value_encoder: Encoder[VT],
) -> None:
    encode_leb128(serializer, len(values_mapping), signed=False)
    for key, value in values_mapping.items():
        key_encoder(serializer, key)
        value_encoder(serializer, value)


def decode_mapping(
    deserializer: Deserializer,
    key_decoder: Decoder[KT],
    value_decoder: Decoder[VT],
    mapping_builder: Callable[[Iterable[tuple[KT, VT]]], R],
    *,
    max_length: int = DEFAULT_BYTES_MAX_LENGTH,
) -> R:
    size = decode_leb128(deserializer, signed=False, max_bytes=DEFAULT_LEB128_MAX_BYTES)
    if size > max_length:
        raise BadDataError(f'declared mapping length {size} exceeds {max_length}')
    return mapping_builder(
        (key_decoder(deserializer), value_decoder(deserializer))
        for _ in range(size)
    )
