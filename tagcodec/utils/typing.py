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

from types import UnionType
from typing import Any, TypeVar, get_args as _typing_get_args, get_origin as _typing_get_origin


def get_origin(t: Any, /) -> Any:
    """Like typing.get_origin, but a bare class is its own origin."""
    return _typing_get_origin(t) or t


def get_args(t: Any, /) -> tuple[Any, ...]:
    return _typing_get_args(t)


def get_type_params(t: Any, /) -> tuple[TypeVar, ...]:
    """ The type parameters still free in a type expression, in the order they first appear.

    >>> T = TypeVar('T')
    >>> U = TypeVar('U')
    >>> get_type_params(int)
    ()
    >>> get_type_params(T)
    (~T,)
    >>> get_type_params(dict[U, list[T]])
    (~U, ~T)
    """
    if isinstance(t, TypeVar):
        return (t,)
    return tuple(getattr(t, '__parameters__', ()))


def is_subclass(cls: Any, class_or_tuple: type | tuple[type, ...] | UnionType, /) -> bool:
    """ Reimplements issubclass() with support for recursive NewType classes.

    >>> from typing import NewType
    >>> N = NewType('N', int)
    >>> is_subclass(N, int)
    True
    >>> M = NewType('M', N)
    >>> is_subclass(M, int)
    True
    >>> is_subclass(M, str)
    False
    """
    while (super_type := getattr(cls, '__supertype__', None)) is not None:
        cls = super_type
    return isinstance(cls, type) and issubclass(cls, class_or_tuple)
