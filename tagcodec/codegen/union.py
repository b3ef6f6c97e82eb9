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
Procedures for tagged unions.

Encode dispatches on the value's variant class and writes the variant's tag as an u32 followed by its fields. Decode
reads the u32 tag and dispatches on it, literal tags are matched directly and computed ones through a guard.
"""

from typing import Any

from tagcodec.codegen.crate import CrateName
from tagcodec.codegen.fields import DecodeMode, bind_field_types, construct_args, encode_field, type_expr
from tagcodec.codegen.invalid_variant import emit_empty_union_decode, emit_invalid_variant_arm
from tagcodec.codegen.shape import Fields, FieldsStyle, UnionShape
from tagcodec.codegen.source import SourceBuilder
from tagcodec.codegen.tags import Tag, iter_variant_tags

FIELD_PREFIX = 'field_'


def _type_prefix(index: int) -> str:
    # variants may have fields with the same name and different types
    return f'{index}_'


def _class_pattern(fields: Fields) -> str:
    match fields.style:
        case FieldsStyle.NAMED:
            return ', '.join(f'{field.slot}={FIELD_PREFIX}{field.slot}' for field in fields)
        case FieldsStyle.POSITIONAL:
            return ', '.join(f'{FIELD_PREFIX}{field.slot}' for field in fields)
        case FieldsStyle.UNIT:
            return ''


def _tag_pattern(tag: Tag) -> str:
    if tag.is_literal:
        return tag.render()
    return f'x if x == {tag.render()}'


def emit_encode(source: SourceBuilder, shape: UnionShape, crate: CrateName) -> dict[str, Any]:
    namespace: dict[str, Any] = {}
    with source.block('match self:'):
        for index, (tag, variant) in enumerate(iter_variant_tags(shape.variants)):
            prefix = _type_prefix(index)
            namespace.update(bind_field_types(variant.fields, prefix=prefix))
            with source.block(f'case Self.{variant.name}({_class_pattern(variant.fields)}):'):
                source.line(f'{crate.ty("encode")}(encoder, {crate.ty("u32")}, {tag.render()})')
                for field in variant.fields:
                    value = f'{FIELD_PREFIX}{field.slot}'
                    source.line(encode_field(crate, field, type_expr(field, prefix=prefix), value))
        with source.block('case _:'):
            source.line(f'{crate.ty("unreachable")}(self)')
    return namespace


def emit_decode(source: SourceBuilder, shape: UnionShape, crate: CrateName, mode: DecodeMode) -> dict[str, Any]:
    if shape.is_empty:
        emit_empty_union_decode(source, crate)
        return {}

    namespace: dict[str, Any] = {}
    tags: list[Tag] = []
    source.line(f'variant_index = {crate.ty("decode")}(decoder, {crate.ty("u32")})')
    with source.block('match variant_index:'):
        for index, (tag, variant) in enumerate(iter_variant_tags(shape.variants)):
            tags.append(tag)
            prefix = _type_prefix(index)
            namespace.update(bind_field_types(variant.fields, prefix=prefix))
            with source.block(f'case {_tag_pattern(tag)}:'):
                source.call(f'return Self.{variant.name}', construct_args(crate, variant.fields, mode, prefix=prefix))
        emit_invalid_variant_arm(source, shape, tags, crate)
    return namespace
