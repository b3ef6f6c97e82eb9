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
Builds a shape out of a Python class.

Records are dataclasses (named fields, or unit when there are none) and NamedTuples (positional fields). Tagged unions
subclass `TaggedUnion` and declare their variants as nested classes marked with `@variant`:

    class Shape(TaggedUnion):
        @variant
        class Circle:
            radius: u32

        @variant(tag=5)
        class Rect(NamedTuple):
            width: u32
            height: u32

        @variant
        class Empty:
            pass

Variants are kept in class body order, which is the order tags are assigned in.
"""

from __future__ import annotations

import dataclasses
from typing import Annotated, Any, Callable, ClassVar, TypeVar, get_type_hints, overload

from tagcodec.codegen.attributes import Attr, parse_field_adapter
from tagcodec.codegen.shape import UNIT, Field, Fields, FieldsStyle, RecordShape, Shape, UnionShape, Variant
from tagcodec.exception import InvalidShapeError
from tagcodec.utils.typing import get_origin

C = TypeVar('C', bound=type)

VARIANT_TAG_ATTR = '__tagcodec_variant_tag__'
VARIANTS_ATTR = '__tagcodec_variants__'

U32_MAX = 2**32 - 1

# names used by generated procedures, a type parameter cannot take them
RESERVED_NAMES = frozenset({'self', 'cls', 'encoder', 'decoder', 'Self', 'variant', 'variant_index', 'x'})
RESERVED_PREFIXES = ('_ty_', 'field_')


class _TaggedUnionMeta(type):
    def __instancecheck__(cls, instance: Any) -> bool:
        variants = cls.__dict__.get(VARIANTS_ATTR, ())
        if any(isinstance(instance, variant_class) for _, variant_class in variants):
            return True
        return super().__instancecheck__(instance)


class TaggedUnion(metaclass=_TaggedUnionMeta):
    """ Base class for tagged unions.

    A tagged union is never instantiated itself, its values are instances of its variants, and `isinstance` reports
    those as instances of the union.
    """

    __tagcodec_variants__: ClassVar[tuple[tuple[str, type], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__tagcodec_variants__ = tuple(
            (name, value)
            for name, value in cls.__dict__.items()
            if isinstance(value, type) and VARIANT_TAG_ATTR in value.__dict__
        )

    def __new__(cls, *args: Any, **kwargs: Any) -> Any:
        raise TypeError(f'{cls.__qualname__} is a tagged union, instantiate one of its variants instead')


def _is_namedtuple(cls: type) -> bool:
    return issubclass(cls, tuple) and hasattr(cls, '_fields')


@overload
def variant(cls: C, /) -> C:
    ...


@overload
def variant(*, tag: int | None = None) -> Callable[[C], C]:
    ...


def variant(cls: C | None = None, /, *, tag: int | None = None) -> C | Callable[[C], C]:
    """ Mark a nested class as a variant of the enclosing `TaggedUnion`, optionally with a fixed tag.

    Classes that are neither a dataclass nor a NamedTuple are turned into a frozen dataclass. A variant cannot
    subclass another variant, its values would also match the base variant's arm.
    """
    if tag is not None:
        if not isinstance(tag, int) or isinstance(tag, bool):
            raise InvalidShapeError(f'variant tag must be an int, got {tag!r}')
        if not 0 <= tag <= U32_MAX:
            raise InvalidShapeError(f'variant tag {tag} does not fit in an u32')

    def wrap(cls: C) -> C:
        for base in cls.__mro__[1:]:
            if VARIANT_TAG_ATTR in base.__dict__:
                raise InvalidShapeError(f'variant {cls.__qualname__} cannot subclass variant {base.__qualname__}')
        # a dataclass base does not make the subclass a dataclass, its own fields need the decorator too
        if '__dataclass_fields__' not in cls.__dict__ and not _is_namedtuple(cls):
            cls = dataclasses.dataclass(frozen=True)(cls)
        setattr(cls, VARIANT_TAG_ATTR, tag)
        return cls

    if cls is None:
        return wrap
    return wrap(cls)


def shape_from_class(cls: type) -> Shape:
    """ Describe a record or a tagged union.

    Raises `InvalidShapeError` for anything else, and `UnknownFieldAttribute` when a field carries an unrecognized
    attribute.
    """
    if not isinstance(cls, type):
        raise InvalidShapeError(f'expected a class, got {cls!r}')
    type_params = _get_type_params(cls)
    if issubclass(cls, TaggedUnion):
        if cls is TaggedUnion:
            raise InvalidShapeError('TaggedUnion itself has no variants, subclass it')
        localns = {**vars(cls), cls.__name__: cls}
        variants = tuple(
            Variant(
                name=name,
                fields=_fields_from_class(variant_class, localns),
                fixed_tag=getattr(variant_class, VARIANT_TAG_ATTR),
            )
            for name, variant_class in cls.__tagcodec_variants__
        )
        return UnionShape(cls.__name__, cls.__qualname__, variants, type_params)
    if dataclasses.is_dataclass(cls) or _is_namedtuple(cls):
        fields = _fields_from_class(cls, {cls.__name__: cls})
        return RecordShape(cls.__name__, cls.__qualname__, fields, type_params)
    raise InvalidShapeError(f'{cls.__qualname__} is not a dataclass, a NamedTuple or a TaggedUnion subclass')


def _get_type_params(cls: type) -> tuple[TypeVar, ...]:
    type_params = tuple(getattr(cls, '__parameters__', ()))
    for param in type_params:
        name = param.__name__
        if not name.isidentifier() or name in RESERVED_NAMES or name.startswith(RESERVED_PREFIXES):
            raise InvalidShapeError(f'type parameter name {name!r} of {cls.__qualname__} is reserved')
    return type_params


def _fields_from_class(cls: type, localns: dict[str, Any]) -> Fields:
    try:
        hints = get_type_hints(cls, localns=localns, include_extras=True)
    except NameError as e:
        raise InvalidShapeError(f'cannot resolve the annotations of {cls.__qualname__}: {e}') from e

    names: list[str]
    if _is_namedtuple(cls):
        style = FieldsStyle.POSITIONAL
        names = list(cls._fields)  # type: ignore[attr-defined]
    elif dataclasses.is_dataclass(cls):
        style = FieldsStyle.NAMED
        names = []
        for dataclass_field in dataclasses.fields(cls):
            if not dataclass_field.init:
                raise InvalidShapeError(f'{cls.__qualname__}.{dataclass_field.name} is not an __init__ argument')
            names.append(dataclass_field.name)
    else:
        raise InvalidShapeError(f'{cls.__qualname__} is not a dataclass or a NamedTuple')

    if not names:
        return UNIT

    items = []
    for index, name in enumerate(names):
        type_, attrs = _split_annotated(hints[name])
        identity: str | int = index if style is FieldsStyle.POSITIONAL else name
        items.append(Field(identity, type_, parse_field_adapter(attrs, field=name)))
    return Fields(style, tuple(items))


def _split_annotated(type_: Any) -> tuple[Any, list[Attr]]:
    """ Separate `Annotated[T, ...]` into `T` and the `Attr` instances in its metadata.

    >>> _split_annotated(Annotated[int, 'doc', Attr('with_pydantic')])
    (<class 'int'>, [Attr(token='with_pydantic')])
    >>> _split_annotated(int)
    (<class 'int'>, [])
    """
    if get_origin(type_) is Annotated:
        return type_.__origin__, [m for m in type_.__metadata__ if isinstance(m, Attr)]
    return type_, []
