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

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from typing_extensions import Self, override

from tagcodec.runtime.codec_types.codec_type import CodecType
from tagcodec.runtime.codec_types.utils import pretty_type
from tagcodec.runtime.interop import BorrowCompat, Compat
from tagcodec.serialization import BadDataError, Deserializer, EncodeError, Serializer, UnsupportedTypeError
from tagcodec.serialization.encoding.bytes import decode_bytes_view, encode_bytes
from tagcodec.utils.typing import get_args, get_origin


@lru_cache(maxsize=None)
def _get_type_adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


class CompatCodecType(CodecType[Compat | BorrowCompat]):
    """ Represents `Compat[T]` and `BorrowCompat[T]`, the inner value goes through pydantic as a JSON document.

    Layout: [N: unsigned leb128][N bytes of JSON]
    """

    __slots__ = ('_wrapper', '_inner_type', '_adapter')

    _wrapper: type[Compat] | type[BorrowCompat]
    _inner_type: Any
    _adapter: TypeAdapter

    def __init__(self, wrapper: type[Compat] | type[BorrowCompat], inner_type: Any) -> None:
        self._wrapper = wrapper
        self._inner_type = inner_type
        self._adapter = _get_type_adapter(inner_type)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: CodecType.TypeMap) -> Self:
        wrapper = get_origin(type_)
        args = get_args(type_)
        if len(args) != 1:
            raise UnsupportedTypeError(f'expected {pretty_type(wrapper)}[<type>]')
        inner_type, = args
        return cls(wrapper, inner_type)

    @override
    def _check_value(self, value: Compat | BorrowCompat, /) -> None:
        if not isinstance(value, (Compat, BorrowCompat)):
            raise TypeError('expected Compat or BorrowCompat')

    @override
    def _serialize(self, serializer: Serializer, value: Compat | BorrowCompat, /) -> None:
        try:
            data = self._adapter.dump_json(value.value)
        except PydanticSerializationError as e:
            raise EncodeError(f'cannot encode {pretty_type(self._inner_type)} through pydantic: {e}') from e
        encode_bytes(serializer, data)

    @override
    def _deserialize(self, deserializer: Deserializer, /, *, borrow: bool) -> Compat | BorrowCompat:
        data = decode_bytes_view(deserializer)
        try:
            inner = self._adapter.validate_json(bytes(data))
        except ValidationError as e:
            raise BadDataError(f'invalid {pretty_type(self._inner_type)} document: {e}') from e
        return self._wrapper(inner)
