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

from typing import Any

from typing_extensions import Self, override

from tagcodec.runtime.codec_types.codec_type import CodecType
from tagcodec.serialization import Deserializer, Serializer
from tagcodec.serialization.encoding.bytes import decode_bytes, decode_bytes_view, encode_bytes
from tagcodec.serialization.types import Buffer


class BytesCodecType(CodecType[Buffer]):
    """ Represents `bytes` values (also accepts `bytearray` and `memoryview` when encoding).

    This is the one codec where the decode mode matters: an owning decode returns `bytes`, a borrowing decode returns a
    `memoryview` into the decoder's input.
    """

    __slots__ = ()

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: CodecType.TypeMap) -> Self:
        if type_ not in (bytes, bytearray, memoryview):
            raise TypeError('expected bytes type')
        return cls()

    @override
    def _check_value(self, value: Buffer, /) -> None:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError('expected bytes-like')

    @override
    def _serialize(self, serializer: Serializer, value: Buffer, /) -> None:
        encode_bytes(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /, *, borrow: bool) -> Buffer:
        if borrow:
            return decode_bytes_view(deserializer)
        return decode_bytes(deserializer)
