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

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, TypeVar

from typing_extensions import Self, override

from tagcodec.runtime.codec_types.codec_type import CodecType
from tagcodec.runtime.codec_types.utils import pretty_type
from tagcodec.serialization import Deserializer, Serializer, UnsupportedTypeError
from tagcodec.serialization.compound_encoding.mapping import decode_mapping, encode_mapping
from tagcodec.utils.typing import get_args

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class DictCodecType(CodecType[Mapping[H, T]]):
    """ Represents builtin `dict` values, entries are written in insertion order.
    """

    __slots__ = ('_key', '_value')

    _key: CodecType[H]
    _value: CodecType[T]

    def __init__(self, key: CodecType[H], value: CodecType[T]) -> None:
        self._key = key
        self._value = value

    def _build(self, items: Iterable[tuple[H, T]]) -> dict[H, T]:
        return dict(items)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: CodecType.TypeMap) -> Self:
        args = get_args(type_)
        if len(args) != 2:
            raise UnsupportedTypeError(f'expected {pretty_type(type_)}[<key type>, <value type>]')
        key_type, value_type = args
        return cls(CodecType.from_type(key_type, type_map=type_map), CodecType.from_type(value_type, type_map=type_map))

    @override
    def _children(self) -> Iterator[CodecType]:
        yield self._key
        yield self._value

    @override
    def _check_value(self, value: Mapping[H, T], /) -> None:
        if not isinstance(value, Mapping):
            raise TypeError('expected Mapping type')

    @override
    def _serialize(self, serializer: Serializer, value: Mapping[H, T], /) -> None:
        encode_mapping(serializer, value, self._key.serialize, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /, *, borrow: bool) -> Mapping[H, T]:
        return decode_mapping(
            deserializer,
            self._key.decoder(borrow=borrow),
            self._value.decoder(borrow=borrow),
            self._build,
        )
