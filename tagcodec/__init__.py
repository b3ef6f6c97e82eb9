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
Generates `encode`, `decode` and `borrow_decode` for dataclasses, NamedTuples and tagged unions.

The generated procedures call back into this package through its top-level names (`tagcodec.encode`,
`tagcodec.u32`, `tagcodec.UnexpectedVariantError`, ...), so everything they reference is re-exported here. A module
that re-exports the same names can be used as the root namespace instead, see `CodegenSettings.CRATE_ROOT`.
"""

from tagcodec.codegen import WITH_PYDANTIC, Attr, TaggedUnion, derive, variant
from tagcodec.conf import CodegenSettings
from tagcodec.exception import CodegenError, InvalidShapeError, TagcodecError, UnknownFieldAttribute
from tagcodec.runtime import (
    AllowedRange,
    AllowedTags,
    AllowedVariants,
    BorrowCompat,
    BorrowDecode,
    Capability,
    Compat,
    Decode,
    EmptyUnionError,
    Encode,
    UnexpectedVariantError,
    borrow_decode,
    borrow_decode_from_bytes,
    bound,
    decode,
    decode_from_bytes,
    encode,
    encode_to_bytes,
    i8,
    i16,
    i32,
    i64,
    type_name,
    u8,
    u16,
    u32,
    u64,
    unreachable,
)
from tagcodec.serialization import (
    BadDataError,
    DecodeError,
    Deserializer,
    EncodeError,
    MaxBytesExceededError,
    OutOfDataError,
    SerializationError,
    Serializer,
    TooLongError,
    TrailingDataError,
    UnsupportedTypeError,
)
from tagcodec.version import __version__

__all__ = [
    'AllowedRange',
    'AllowedTags',
    'AllowedVariants',
    'Attr',
    'BadDataError',
    'BorrowCompat',
    'BorrowDecode',
    'Capability',
    'CodegenError',
    'CodegenSettings',
    'Compat',
    'Decode',
    'DecodeError',
    'Deserializer',
    'EmptyUnionError',
    'Encode',
    'EncodeError',
    'InvalidShapeError',
    'MaxBytesExceededError',
    'OutOfDataError',
    'SerializationError',
    'Serializer',
    'TaggedUnion',
    'TagcodecError',
    'TooLongError',
    'TrailingDataError',
    'UnexpectedVariantError',
    'UnknownFieldAttribute',
    'UnsupportedTypeError',
    'WITH_PYDANTIC',
    '__version__',
    'borrow_decode',
    'borrow_decode_from_bytes',
    'bound',
    'decode',
    'decode_from_bytes',
    'derive',
    'encode',
    'encode_to_bytes',
    'i8',
    'i16',
    'i32',
    'i64',
    'type_name',
    'u8',
    'u16',
    'u32',
    'u64',
    'unreachable',
    'variant',
]
