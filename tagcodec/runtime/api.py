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
Entry points called by generated procedures.

Generated code reaches these through the configured root namespace, `tagcodec.encode(encoder, tagcodec.u32, 5)` with
the default one, so everything here is re-exported from the top-level package.
"""

from typing import Any, NoReturn, TypeVar

from typing_extensions import assert_never

from tagcodec.runtime.codec_types import make_codec_type
from tagcodec.runtime.codec_types.utils import pretty_type
from tagcodec.runtime.traits import TRAIT_CAPABILITIES
from tagcodec.serialization import Deserializer, Serializer, UnsupportedTypeError
from tagcodec.serialization.types import Buffer

T = TypeVar('T')


def encode(encoder: Serializer, type_: Any, value: Any, /) -> None:
    """Encode `value` as an instance of `type_`."""
    make_codec_type(type_).serialize(encoder, value)


def decode(decoder: Deserializer, type_: Any, /) -> Any:
    """Decode an owned instance of `type_`."""
    return make_codec_type(type_).deserialize(decoder)


def borrow_decode(decoder: Deserializer, type_: Any, /) -> Any:
    """Decode an instance of `type_` that may keep views into the decoder's input."""
    return make_codec_type(type_).borrow_deserialize(decoder)


def encode_to_bytes(type_: Any, value: Any, /, *, max_bytes: int | None = None) -> bytes:
    """Encode a single value, `max_bytes` limits the size of the output."""
    return make_codec_type(type_).to_bytes(value, max_bytes=max_bytes)


def decode_from_bytes(type_: Any, data: Buffer, /, *, max_bytes: int | None = None) -> Any:
    """ Decode a whole buffer, `TrailingDataError` is raised when bytes are left over.

    `max_bytes` limits how much of `data` the decode may consume, `MaxBytesExceededError` is raised past it.
    """
    return make_codec_type(type_).from_bytes(data, max_bytes=max_bytes)


def borrow_decode_from_bytes(type_: Any, data: Buffer, /, *, max_bytes: int | None = None) -> Any:
    """Like `decode_from_bytes`, but `bytes` fields come back as views into `data`."""
    return make_codec_type(type_).from_bytes(data, borrow=True, max_bytes=max_bytes)


def bound(type_: Any, trait: type, /) -> None:
    """ Check that a type argument handed to a generated procedure satisfies the trait that procedure requires.

    >>> from tagcodec.runtime.traits import Encode
    >>> bound(int, Encode)
    >>> try:
    ...     bound(complex, Encode)
    ... except UnsupportedTypeError as e:
    ...     print(*e.args)
    type complex is not supported by any codec
    """
    capability = TRAIT_CAPABILITIES[trait]
    if not make_codec_type(type_).supports(capability):
        raise UnsupportedTypeError(f'{pretty_type(type_)} does not implement {trait.__name__}')


def unreachable(value: Any, /) -> NoReturn:
    """Marks the arm that no value can reach, an uninhabited union has no value to encode."""
    assert_never(value)


def type_name(type_: type, /) -> str:
    """ The fully qualified name of a type, used in error values.

    >>> type_name(int)
    'builtins.int'
    """
    return f'{type_.__module__}.{type_.__qualname__}'
