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

"""
Codec for classes that went through `tagcodec.codegen`.

The generated procedures are called unbound through the class, `Cls.encode(value, encoder, *type_args)`, which works
the same for records (the value is an instance of the class) and for tagged unions (the value is an instance of one
of the nested variant classes). Type arguments of a parameterised generic, like the `int` in `Pair[int]`, are passed
along as the extra arguments the generated procedures expect.
"""

from __future__ import annotations

from typing import Any

from typing_extensions import Self, override

from tagcodec.runtime.codec_types.codec_type import CodecType
from tagcodec.runtime.codec_types.utils import get_capabilities, pretty_type
from tagcodec.runtime.traits import Capability
from tagcodec.serialization import Deserializer, Serializer, UnsupportedTypeError
from tagcodec.utils.typing import get_args, get_origin


class DerivedCodecType(CodecType[Any]):
    __slots__ = ('_class', '_type_args')

    _class: type
    _type_args: tuple[Any, ...]

    def __init__(self, class_: type, type_args: tuple[Any, ...]) -> None:
        self._class = class_
        self._type_args = type_args

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: CodecType.TypeMap) -> Self:
        class_ = get_origin(type_)
        type_args = get_args(type_)
        params = getattr(class_, '__parameters__', ())
        if len(type_args) != len(params):
            raise UnsupportedTypeError(
                f'{pretty_type(class_)} takes {len(params)} type arguments, got {pretty_type(type_)}'
            )
        return cls(class_, type_args)

    def _capabilities(self) -> frozenset[Capability]:
        return get_capabilities(self._class) or frozenset()

    def _require(self, capability: Capability) -> None:
        if capability not in self._capabilities():
            raise UnsupportedTypeError(f'{pretty_type(self._class)} does not implement {capability.value}')

    @override
    def supports(self, capability: Capability) -> bool:
        return capability in self._capabilities()

    @override
    def _check_value(self, value: Any, /) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {pretty_type(self._class)} instance, got {type(value).__qualname__}')

    @override
    def _serialize(self, serializer: Serializer, value: Any, /) -> None:
        self._require(Capability.ENCODE)
        self._class.encode(value, serializer, *self._type_args)  # type: ignore[attr-defined]

    @override
    def _deserialize(self, deserializer: Deserializer, /, *, borrow: bool) -> Any:
        if borrow:
            self._require(Capability.BORROW_DECODE)
            return self._class.borrow_decode(deserializer, *self._type_args)  # type: ignore[attr-defined]
        self._require(Capability.DECODE)
        return self._class.decode(deserializer, *self._type_args)  # type: ignore[attr-defined]
