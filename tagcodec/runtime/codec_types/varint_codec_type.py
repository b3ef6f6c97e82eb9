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
from tagcodec.serialization.encoding.leb128 import decode_leb128, encode_leb128


class VarIntCodecType(CodecType[int]):
    """ Represents builtin `int` values of any size, encoded as a signed LEB128.
    """

    __slots__ = ()

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: CodecType.TypeMap) -> Self:
        if type_ is not int:
            raise TypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_leb128(serializer, value, signed=True)

    @override
    def _deserialize(self, deserializer: Deserializer, /, *, borrow: bool) -> int:
        return decode_leb128(deserializer, signed=True)
