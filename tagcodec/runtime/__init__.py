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

from tagcodec.runtime.api import (
    borrow_decode,
    borrow_decode_from_bytes,
    bound,
    decode,
    decode_from_bytes,
    encode,
    encode_to_bytes,
    type_name,
    unreachable,
)
from tagcodec.runtime.errors import AllowedRange, AllowedTags, AllowedVariants, EmptyUnionError, UnexpectedVariantError
from tagcodec.runtime.interop import BorrowCompat, Compat
from tagcodec.runtime.traits import BorrowDecode, Capability, Decode, Encode
from tagcodec.runtime.types import i8, i16, i32, i64, u8, u16, u32, u64

__all__ = [
    'AllowedRange',
    'AllowedTags',
    'AllowedVariants',
    'BorrowCompat',
    'BorrowDecode',
    'Capability',
    'Compat',
    'Decode',
    'EmptyUnionError',
    'Encode',
    'UnexpectedVariantError',
    'borrow_decode',
    'borrow_decode_from_bytes',
    'bound',
    'decode',
    'decode_from_bytes',
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
]
