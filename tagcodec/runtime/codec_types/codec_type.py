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
from collections.abc import Iterator
from typing import Any, Generic, NamedTuple, TypeVar, final

from typing_extensions import Self

from tagcodec.runtime.codec_types.utils import TypeAliasMap, TypeToCodecTypeMap, get_usable_origin_type, pretty_type
from tagcodec.runtime.traits import Capability
from tagcodec.serialization import Deserializer, Serializer, UnsupportedTypeError
from tagcodec.serialization.compound_encoding import Decoder
from tagcodec.serialization.types import Buffer

T = TypeVar('T')


class CodecType(ABC, Generic[T]):
    """ Models how values of one concrete type signature are encoded and decoded.

    Instances are built from a type with `CodecType.from_type` and are cached by the runtime entry points, generated
    procedures never build them directly, they call `tagcodec.encode(encoder, type_, value)` and friends.

    Decoding comes in two modes: `deserialize` returns owned values and `borrow_deserialize` may return values that
    keep views into the decoder's input (only `bytes` does that at the moment, compound types forward the mode).
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        codec_types_map: TypeToCodecTypeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    @staticmethod
    def from_type(type_: Any, /, *, type_map: TypeMap) -> CodecType:
        """ Instantiate a CodecType from a type signature using the given map.
        """
        usable_origin, usable_type = get_usable_origin_type(type_, type_map=type_map)
        codec_type = type_map.codec_types_map[usable_origin]
        return codec_type._from_type(usable_type, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeMap) -> Self:
        """ Instantiate from a type signature.

        Implementations inspect the type's args and use `CodecType.from_type` with the same `type_map` for any inner
        type, which is how compound codecs like OptionalCodecType or DictCodecType are built.
        """
        raise UnsupportedTypeError(f'{cls.__name__} cannot be built from {pretty_type(type_)}')

    def _children(self) -> Iterator[CodecType]:
        """Codecs this one delegates to, used to answer `supports`."""
        return iter(())

    def supports(self, capability: Capability) -> bool:
        """ Whether values can go through the given procedure.

        Builtin codecs support everything, a derived class only supports what was generated for it.
        """
        return all(child.supports(capability) for child in self._children())

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Check the value's type shallowly and encode it.
        """
        self._check_value(value)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, /) -> T:
        return self._deserialize(deserializer, borrow=False)

    @final
    def borrow_deserialize(self, deserializer: Deserializer, /) -> T:
        return self._deserialize(deserializer, borrow=True)

    @final
    def decoder(self, *, borrow: bool) -> Decoder[T]:
        """The bound decode method for the given mode, to be handed to compound decoders."""
        return self.borrow_deserialize if borrow else self.deserialize

    @final
    def to_bytes(self, value: T, /, *, max_bytes: int | None = None) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes` and avoid using the serialization system.

        With `max_bytes` the encode fails with `MaxBytesExceededError` as soon as the output would be longer.
        """
        serializer = Serializer.build_bytes_serializer().with_optional_max_bytes(max_bytes)
        self.serialize(serializer, value)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: Buffer, /, *, borrow: bool = False, max_bytes: int | None = None) -> T:
        """ Shortcut to parse a value T from a whole buffer, trailing bytes are an error.

        With `max_bytes` no more than that many bytes are consumed, a value that needs more fails with
        `MaxBytesExceededError` before its oversized parts are read.
        """
        deserializer = Deserializer.build_bytes_deserializer(data).with_optional_max_bytes(max_bytes)
        value = self._deserialize(deserializer, borrow=borrow)
        deserializer.finalize()
        return value

    @abstractmethod
    def _check_value(self, value: T, /) -> None:
        """ Raise a TypeError if the value's type is not compatible, inner values are checked when they are encoded.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /, *, borrow: bool) -> T:
        raise NotImplementedError
