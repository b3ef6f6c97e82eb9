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

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from typing_extensions import Self

from tagcodec.serialization import Deserializer, Serializer


class Capability(str, Enum):
    """One of the procedures that can be generated for a type, the value is the attached method's name."""

    ENCODE = 'encode'
    DECODE = 'decode'
    BORROW_DECODE = 'borrow_decode'

    @property
    def trait_name(self) -> str:
        """Name of the matching trait in the runtime namespace, used in generated bound checks."""
        return _TRAIT_NAMES[self]


_TRAIT_NAMES = {
    Capability.ENCODE: 'Encode',
    Capability.DECODE: 'Decode',
    Capability.BORROW_DECODE: 'BorrowDecode',
}


@runtime_checkable
class Encode(Protocol):
    def encode(self, encoder: Serializer, /, *type_args: Any) -> None:
        ...


@runtime_checkable
class Decode(Protocol):
    @classmethod
    def decode(cls, decoder: Deserializer, /, *type_args: Any) -> Self:
        ...


@runtime_checkable
class BorrowDecode(Protocol):
    """Values produced by `borrow_decode` may hold views into the decoder's input and are only valid while it lives."""

    @classmethod
    def borrow_decode(cls, decoder: Deserializer, /, *type_args: Any) -> Self:
        ...


TRAIT_CAPABILITIES: dict[type, Capability] = {
    Encode: Capability.ENCODE,
    Decode: Capability.DECODE,
    BorrowDecode: Capability.BORROW_DECODE,
}
