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

from collections import OrderedDict
from functools import lru_cache
from types import UnionType
from typing import Any

from tagcodec.runtime.codec_types.bool_codec_type import BoolCodecType
from tagcodec.runtime.codec_types.bytes_codec_type import BytesCodecType
from tagcodec.runtime.codec_types.codec_type import CodecType
from tagcodec.runtime.codec_types.collection_codec_type import FrozenSetCodecType, ListCodecType, SetCodecType
from tagcodec.runtime.codec_types.compat_codec_type import CompatCodecType
from tagcodec.runtime.codec_types.derived_codec_type import DerivedCodecType
from tagcodec.runtime.codec_types.map_codec_type import DictCodecType
from tagcodec.runtime.codec_types.optional_codec_type import OptionalCodecType
from tagcodec.runtime.codec_types.sized_int_codec_type import (
    Int8CodecType,
    Int16CodecType,
    Int32CodecType,
    Int64CodecType,
    Uint8CodecType,
    Uint16CodecType,
    Uint32CodecType,
    Uint64CodecType,
)
from tagcodec.runtime.codec_types.str_codec_type import StrCodecType
from tagcodec.runtime.codec_types.tuple_codec_type import TupleCodecType
from tagcodec.runtime.codec_types.utils import DerivedType, TypeAliasMap, TypeToCodecTypeMap, is_derived
from tagcodec.runtime.codec_types.varint_codec_type import VarIntCodecType
from tagcodec.runtime.interop import BorrowCompat, Compat
from tagcodec.runtime.types import i8, i16, i32, i64, u8, u16, u32, u64

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'DEFAULT_TYPE_TO_CODEC_TYPE_MAP',
    'BoolCodecType',
    'BytesCodecType',
    'CodecType',
    'CompatCodecType',
    'DerivedCodecType',
    'DictCodecType',
    'FrozenSetCodecType',
    'ListCodecType',
    'OptionalCodecType',
    'SetCodecType',
    'StrCodecType',
    'TupleCodecType',
    'TypeAliasMap',
    'TypeToCodecTypeMap',
    'VarIntCodecType',
    'is_derived',
    'make_codec_type',
]

DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    OrderedDict: dict,
}

DEFAULT_TYPE_TO_CODEC_TYPE_MAP: TypeToCodecTypeMap = {
    # builtin types:
    bool: BoolCodecType,
    bytes: BytesCodecType,
    bytearray: BytesCodecType,
    memoryview: BytesCodecType,
    dict: DictCodecType,
    frozenset: FrozenSetCodecType,
    int: VarIntCodecType,
    list: ListCodecType,
    set: SetCodecType,
    str: StrCodecType,
    tuple: TupleCodecType,
    UnionType: OptionalCodecType,
    # fixed width integers:
    u8: Uint8CodecType,
    u16: Uint16CodecType,
    u32: Uint32CodecType,
    u64: Uint64CodecType,
    i8: Int8CodecType,
    i16: Int16CodecType,
    i32: Int32CodecType,
    i64: Int64CodecType,
    # interop adapters:
    Compat: CompatCodecType,
    BorrowCompat: CompatCodecType,
    # classes with generated procedures:
    DerivedType: DerivedCodecType,
}

DEFAULT_TYPE_MAP = CodecType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_CODEC_TYPE_MAP)


@lru_cache(maxsize=None)
def make_codec_type(type_: Any, /) -> CodecType:
    """ Like CodecType.from_type with the default map, cached per type.

    If you need to customize the mapping use `CodecType.from_type` instead.
    """
    return CodecType.from_type(type_, type_map=DEFAULT_TYPE_MAP)
