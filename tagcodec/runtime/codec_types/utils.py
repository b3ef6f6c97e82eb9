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

from collections.abc import Mapping
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, TypeAlias, TypeVar, Union

from tagcodec.serialization.exceptions import UnsupportedTypeError
from tagcodec.utils.typing import get_args, get_origin

if TYPE_CHECKING:
    from tagcodec.runtime.codec_types.codec_type import CodecType

TypeAliasMap: TypeAlias = Mapping[Any, Any]
TypeToCodecTypeMap: TypeAlias = Mapping[Any, type['CodecType']]

# attribute set on every class that went through `derive`
CAPABILITIES_ATTR = '__tagcodec_capabilities__'


class DerivedType:
    """Key used in a type map for classes with generated procedures, it is never instantiated."""


def get_capabilities(class_: Any) -> frozenset | None:
    """ Capabilities generated for exactly this class, inherited ones do not count.

    >>> get_capabilities(int) is None
    True
    """
    return getattr(class_, '__dict__', {}).get(CAPABILITIES_ATTR)


def is_derived(type_: Any) -> bool:
    return get_capabilities(get_origin(type_)) is not None


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(int)
    'int'
    >>> pretty_type(None)
    'None'
    >>> pretty_type(list[int])
    'list[int]'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__qualname__', None) or repr(type_)


def get_usable_origin_type(type_: Any, /, *, type_map: 'CodecType.TypeMap') -> tuple[Any, Any]:
    """ Map a type to the key under which its codec is found in `type_map.codec_types_map`.

    Returns the key and the type that the codec should be built from, which differs from `type_` when `type_` is a
    `NewType` that is not itself in the map, in that case the first supertype that is usable is taken.

    >>> from tagcodec.runtime.codec_types import DEFAULT_TYPE_MAP
    >>> get_usable_origin_type(list[int], type_map=DEFAULT_TYPE_MAP)
    (<class 'list'>, list[int])
    >>> from typing import Optional
    >>> get_usable_origin_type(Optional[str], type_map=DEFAULT_TYPE_MAP)[0]
    <class 'types.UnionType'>
    """
    if isinstance(type_, str):
        raise UnsupportedTypeError(f'unresolved string annotation {type_!r}')
    if isinstance(type_, TypeVar):
        raise UnsupportedTypeError(f'type parameter {type_} was not bound to a concrete type')

    current = type_
    while True:
        origin = get_origin(current)
        if origin is Union:
            origin = UnionType
        origin = type_map.alias_map.get(origin, origin)
        if origin in type_map.codec_types_map:
            return origin, current
        if DerivedType in type_map.codec_types_map and get_capabilities(origin) is not None:
            return DerivedType, current
        supertype = getattr(current, '__supertype__', None)
        if supertype is None:
            break
        current = supertype

    raise UnsupportedTypeError(f'type {pretty_type(type_)} is not supported by any codec')


def get_optional_arg(type_: Any) -> Any:
    """ The `T` in `T | None`, raises `UnsupportedTypeError` for any other union.

    >>> get_optional_arg(int | None)
    <class 'int'>
    """
    args = get_args(type_)
    if len(args) != 2 or NoneType not in args:
        raise UnsupportedTypeError(f'only `T | None` unions are supported, got {pretty_type(type_)}')
    not_none_type, = (arg for arg in args if arg is not NoneType)
    return not_none_type
