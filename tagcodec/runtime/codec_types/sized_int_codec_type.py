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

from __future__ import annotations

from typing import Any, ClassVar

from typing_extensions import Self, override

from tagcodec.runtime.codec_types.codec_type import CodecType
from tagcodec.serialization import Deserializer, EncodeError, Serializer
from tagcodec.serialization.encoding.int import decode_int, encode_int
from tagcodec.utils.typing import is_subclass


class _SizedIntCodecType(CodecType[int]):
    """ Base class for codecs of `int` values with a fixed size and signedness.
    """

    __slots__ = ()

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: CodecType.TypeMap) -> Self:
        if not is_subclass(type_, int):
            raise TypeError('expected int type')
        return cls()

    @override
    def _check_value(self, value: int, /) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('expected integer')
        if not self._lower_bound_value() <= value <= self._upper_bound_value():
            raise EncodeError(
                f'{value} is out of range for {type(self).__name__} '
                f'[{self._lower_bound_value()}, {self._upper_bound_value()}]'
            )

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, length=self._byte_size, signed=self._signed)

    @override
    def _deserialize(self, deserializer: Deserializer, /, *, borrow: bool) -> int:
        return decode_int(deserializer, length=self._byte_size, signed=self._signed)


class Uint8CodecType(_SizedIntCodecType):
    _signed = False
    _byte_size = 1


class Uint16CodecType(_SizedIntCodecType):
    _signed = False
    _byte_size = 2


class Uint32CodecType(_SizedIntCodecType):
    _signed = False
    _byte_size = 4  # union tags use this one


class Uint64CodecType(_SizedIntCodecType):
    _signed = False
    _byte_size = 8


class Int8CodecType(_SizedIntCodecType):
    _signed = True
    _byte_size = 1


class Int16CodecType(_SizedIntCodecType):
    _signed = True
    _byte_size = 2


class Int32CodecType(_SizedIntCodecType):
    _signed = True
    _byte_size = 4


class Int64CodecType(_SizedIntCodecType):
    _signed = True
    _byte_size = 8
