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

from collections.abc import Iterable, Iterator
from typing import Any

from typing_extensions import Self, override

from tagcodec.runtime.codec_types.codec_type import CodecType
from tagcodec.serialization import Deserializer, Serializer, UnsupportedTypeError
from tagcodec.serialization.compound_encoding.collection import decode_collection, encode_collection
from tagcodec.serialization.compound_encoding.tuple import decode_tuple, encode_tuple
from tagcodec.utils.typing import get_args


class TupleCodecType(CodecType[tuple]):
    """ Represents tuple values, which can either be homogeneous-type variable size or heterogeneous-type fixed size.

    A fixed size tuple has no length prefix, its items are laid out exactly like the fields of a record.
    """

    __slots__ = ('_varsize', '_args')

    _varsize: bool
    _args: tuple[CodecType, ...]

    def __init__(self, args: CodecType | Iterable[CodecType]) -> None:
        if isinstance(args, CodecType):
            self._varsize = True
            self._args = (args,)
        else:
            self._varsize = False
            self._args = tuple(args)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: CodecType.TypeMap) -> Self:
        args = get_args(type_)
        if type_ is tuple:
            raise UnsupportedTypeError('expected tuple[<args...>]')
        if args and args[-1] is Ellipsis:
            if len(args) != 2:
                raise UnsupportedTypeError('ellipsis only allowed with one type: tuple[T, ...]')
            arg, _ellipsis = args
            return cls(CodecType.from_type(arg, type_map=type_map))
        else:
            return cls(CodecType.from_type(arg, type_map=type_map) for arg in args)

    @override
    def _children(self) -> Iterator[CodecType]:
        return iter(self._args)

    @override
    def _check_value(self, value: tuple, /) -> None:
        if not isinstance(value, tuple):
            raise TypeError('expected tuple')
        if not self._varsize and len(value) != len(self._args):
            raise TypeError(f'expected tuple of size {len(self._args)}, got {len(value)}')

    @override
    def _serialize(self, serializer: Serializer, value: tuple, /) -> None:
        if self._varsize:
            item, = self._args
            encode_collection(serializer, value, item.serialize)
        else:
            encode_tuple(serializer, value, tuple(i.serialize for i in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, /, *, borrow: bool) -> tuple:
        if self._varsize:
            item, = self._args
            return decode_collection(deserializer, item.decoder(borrow=borrow), tuple)
        else:
            return decode_tuple(deserializer, tuple(i.decoder(borrow=borrow) for i in self._args))
