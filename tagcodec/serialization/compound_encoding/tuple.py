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
Only `tuple[A, B, C]` (fixed length, heterogeneous) is handled here, `tuple[X, ...]` goes through the collection
encoder.

The encoding of `tuple[A, B, C]` is the encoding of A concatenated with B concatenated with C, which is also exactly
how record fields are laid out.

>>> from tagcodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from tagcodec.serialization.encoding.bool import encode_bool, decode_bool
>>> se = Serializer.build_bytes_serializer()
>>> encode_tuple(se, ('foobar', False), (encode_utf8, encode_bool))
>>> bytes(se.finalize()).hex()
'06666f6f62617200'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('06666f6f62617200'))
>>> decode_tuple(de, (decode_utf8, decode_bool))
('foobar', False)
"""

from typing import Any

from ..deserializer import Deserializer
from ..serializer import Serializer
from . import Decoder, Encoder


def encode_tuple(serializer: Serializer, values: tuple[Any, ...], encoders: tuple[Encoder[Any], ...]) -> None:
    assert len(values) == len(encoders)
    for value, encoder in zip(values, encoders):
        encoder(serializer, value)


def decode_tuple(deserializer: Deserializer, decoders: tuple[Decoder[Any], ...]) -> tuple[Any, ...]:
    return tuple(decoder(deserializer) for decoder in decoders)
