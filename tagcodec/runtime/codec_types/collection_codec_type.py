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

from abc import ABC, abstractmethod
from collections.abc import Collection, Hashable, Iterable, Iterator
from typing import Any, TypeVar

from typing_extensions import Self, override

from tagcodec.runtime.codec_types.codec_type import CodecType
from tagcodec.runtime.codec_types.utils import pretty_type
from tagcodec.serialization import Deserializer, Serializer, UnsupportedTypeError
from tagcodec.serialization.compound_encoding.collection import decode_collection, encode_collection
from tagcodec.utils.typing import get_args

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class _CollectionCodecType(CodecType[Collection[T]], ABC):
    """ Used as base for codecs that represent collections.
    """

    __slots__ = ('_item',)

    _item: CodecType[T]
    # XXX: subclasses must define the concrete collection type
    _collection_type: type

    def __init__(self, item_codec_type: CodecType[T], /) -> None:
        self._item = item_codec_type

    @abstractmethod
    def _build(self, items: Iterable[T]) -> Collection[T]:
        """ How to build the concrete collection from an iterable of items.
        """
        raise NotImplementedError

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: CodecType.TypeMap) -> Self:
        args = get_args(type_)
        if len(args) != 1:
            raise UnsupportedTypeError(f'expected {pretty_type(type_)}[<type>]')
        member_type, = args
        return cls(CodecType.from_type(member_type, type_map=type_map))

    @override
    def _children(self) -> Iterator[CodecType]:
        yield self._item

    @override
    def _check_value(self, value: Collection[T], /) -> None:
        if not isinstance(value, self._collection_type):
            raise TypeError(f'expected {self._collection_type.__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: Collection[T], /) -> None:
        encode_collection(serializer, value, self._item.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /, *, borrow: bool) -> Collection[T]:
        return decode_collection(deserializer, self._item.decoder(borrow=borrow), self._build)


class ListCodecType(_CollectionCodecType[T]):
    """ Represents builtin `list` values.
    """

    _collection_type = list

    @override
    def _build(self, items: Iterable[T]) -> list[T]:
        return list(items)


class SetCodecType(_CollectionCodecType[H]):
    """ Represents builtin `set` values, items are written in iteration order.
    """

    _collection_type = set

    @override
    def _build(self, items: Iterable[H]) -> set[H]:
        return set(items)


class FrozenSetCodecType(_CollectionCodecType[H]):
    """ Represents builtin `frozenset` values.
    """

    _collection_type = frozenset

    @override
    def _build(self, items: Iterable[H]) -> frozenset[H]:
        return frozenset(items)
