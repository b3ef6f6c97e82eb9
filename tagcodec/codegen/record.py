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
Procedures for records: fields are written in declaration order with no framing, and read back in the same order.
"""

from typing import Any

from tagcodec.codegen.crate import CrateName
from tagcodec.codegen.fields import DecodeMode, bind_field_types, construct_args, encode_field, type_expr
from tagcodec.codegen.shape import Field, RecordShape
from tagcodec.codegen.source import SourceBuilder


def _accessor(field: Field) -> str:
    if isinstance(field.identity, int):
        return f'self[{field.identity}]'
    return f'self.{field.identity}'


def emit_encode(source: SourceBuilder, shape: RecordShape, crate: CrateName) -> dict[str, Any]:
    for field in shape.fields:
        source.line(encode_field(crate, field, type_expr(field), _accessor(field)))
    return bind_field_types(shape.fields)


def emit_decode(source: SourceBuilder, shape: RecordShape, crate: CrateName, mode: DecodeMode) -> dict[str, Any]:
    source.call('return Self', construct_args(crate, shape.fields, mode))
    return bind_field_types(shape.fields)
