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
How a single field is written and read by generated procedures.

Every generator goes through `encode_field` and `decode_field`, so the choice between the plain call and the interop
call is made in one place and is the same for encode and both decodes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from tagcodec.codegen.crate import CrateName
from tagcodec.codegen.shape import Field, FieldAdapter, Fields, FieldsStyle
from tagcodec.runtime.traits import Capability
from tagcodec.utils.typing import get_type_params


class DecodeMode(Enum):
    OWNED = 'owned'
    BORROWED = 'borrowed'

    @property
    def capability(self) -> Capability:
        return Capability.DECODE if self is DecodeMode.OWNED else Capability.BORROW_DECODE

    @property
    def entry_point(self) -> str:
        """Runtime function that decodes a field."""
        return 'decode' if self is DecodeMode.OWNED else 'borrow_decode'

    @property
    def adapter(self) -> str:
        """Runtime interop wrapper for fields marked `with_pydantic`."""
        return 'Compat' if self is DecodeMode.OWNED else 'BorrowCompat'


def type_binding_name(field: Field, *, prefix: str = '') -> str:
    """ Name under which the field's type is placed in the procedure's namespace.

    >>> type_binding_name(Field('radius', int), prefix='1_')
    '_ty_1_radius'
    """
    return f'_ty_{prefix}{field.slot}'


def type_expr(field: Field, *, prefix: str = '') -> str:
    """ Expression for the field's type inside a procedure.

    A field typed by a bare type parameter uses the procedure argument of that name, a type that mentions type
    parameters is subscripted with them, so `list[T]` becomes `_ty_items[T]` and is completed at call time.

    >>> T = TypeVar('T')
    >>> type_expr(Field('a', int))
    '_ty_a'
    >>> type_expr(Field('a', T))
    'T'
    >>> type_expr(Field('a', dict[str, T]))
    '_ty_a[T]'
    """
    if isinstance(field.type_, TypeVar):
        return field.type_.__name__
    binding = type_binding_name(field, prefix=prefix)
    params = get_type_params(field.type_)
    if params:
        return f'{binding}[{", ".join(param.__name__ for param in params)}]'
    return binding


def bind_field_types(fields: Fields, *, prefix: str = '') -> dict[str, Any]:
    """The namespace entries that `type_expr` refers to."""
    return {
        type_binding_name(field, prefix=prefix): field.type_
        for field in fields
        if not isinstance(field.type_, TypeVar)
    }


def encode_field(crate: CrateName, field: Field, type_: str, value: str) -> str:
    """ Statement that encodes one field.

    >>> crate = CrateName('tagcodec')
    >>> encode_field(crate, Field('a', int), '_ty_a', 'self.a')
    'tagcodec.encode(encoder, _ty_a, self.a)'
    >>> encode_field(crate, Field('a', int, FieldAdapter.INTEROP), '_ty_a', 'self.a')
    'tagcodec.encode(encoder, tagcodec.Compat[_ty_a], tagcodec.Compat(self.a))'
    """
    match field.adapter:
        case FieldAdapter.PLAIN:
            return f'{crate.ty("encode")}(encoder, {type_}, {value})'
        case FieldAdapter.INTEROP:
            compat = crate.ty('Compat')
            return f'{crate.ty("encode")}(encoder, {compat}[{type_}], {compat}({value}))'


def decode_field(crate: CrateName, field: Field, type_: str, mode: DecodeMode) -> str:
    """ Expression that decodes one field.

    >>> crate = CrateName('tagcodec')
    >>> decode_field(crate, Field('a', int), '_ty_a', DecodeMode.OWNED)
    'tagcodec.decode(decoder, _ty_a)'
    >>> decode_field(crate, Field('a', int, FieldAdapter.INTEROP), '_ty_a', DecodeMode.BORROWED)
    'tagcodec.borrow_decode(decoder, tagcodec.BorrowCompat[_ty_a]).value'
    """
    entry_point = crate.ty(mode.entry_point)
    match field.adapter:
        case FieldAdapter.PLAIN:
            return f'{entry_point}(decoder, {type_})'
        case FieldAdapter.INTEROP:
            return f'{entry_point}(decoder, {crate.ty(mode.adapter)}[{type_}]).value'


def construct_args(crate: CrateName, fields: Fields, mode: DecodeMode, *, prefix: str = '') -> list[str]:
    """ One constructor argument per field, keyword for named fields and positional otherwise, in declaration order.
    """
    args = []
    for field in fields:
        expr = decode_field(crate, field, type_expr(field, prefix=prefix), mode)
        if fields.style is FieldsStyle.NAMED:
            args.append(f'{field.identity}={expr}')
        else:
            args.append(expr)
    return args
