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

from collections.abc import Iterator
from typing import Any, TypeVar

from typing_extensions import Self, override

from tagcodec.runtime.codec_types.codec_type import CodecType
from tagcodec.runtime.codec_types.utils import get_optional_arg
from tagcodec.serialization import Deserializer, Serializer
from tagcodec.serialization.compound_encoding.optional import decode_optional, encode_optional

V = TypeVar('V')


class OptionalCodecType(CodecType[V | None]):
    """ Represents a value that is either `V` or `None`.
    """

    __slots__ = ('_value',)

    _value: CodecType[V]

    def __init__(self, codec_type: CodecType[V]) -> None:
        self._value = codec_type

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: CodecType.TypeMap) -> Self:
        return cls(CodecType.from_type(get_optional_arg(type_), type_map=type_map))

    @override
    def _children(self) -> Iterator[CodecType]:
        yield self._value

    @override
    def _check_value(self, value: V | None, /) -> None:
        pass

    @override
    def _serialize(self, serializer: Serializer, value: V | None, /) -> None:
        encode_optional(serializer, value, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /, *, borrow: bool) -> V | None:
        return decode_optional(deserializer, self._value.decoder(borrow=borrow))
