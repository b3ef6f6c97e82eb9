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
The description of a class that procedures are generated from.

A shape is built once by `tagcodec.codegen.reflection.shape_from_class` and only read afterwards, every generator gets
the same frozen instance and nothing is shared between the procedures besides it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, TypeAlias, TypeVar


class FieldsStyle(Enum):
    NAMED = 'named'
    POSITIONAL = 'positional'
    UNIT = 'unit'


class FieldAdapter(Enum):
    """How a field reaches the runtime: through its own codec or through the interop wrapper."""

    PLAIN = 'plain'
    INTEROP = 'interop'


@dataclass(frozen=True, slots=True)
class Field:
    # attribute name for named fields, 0-based index for positional ones
    identity: str | int
    type_: Any
    adapter: FieldAdapter = FieldAdapter.PLAIN

    @property
    def slot(self) -> str:
        """Suffix that names this field in generated code."""
        return str(self.identity)


@dataclass(frozen=True, slots=True)
class Fields:
    style: FieldsStyle
    items: tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        assert (self.style is FieldsStyle.UNIT) == (not self.items), 'only unit fields are empty'

    def __iter__(self) -> Iterator[Field]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


UNIT = Fields(FieldsStyle.UNIT)


@dataclass(frozen=True, slots=True)
class Variant:
    name: str
    fields: Fields
    fixed_tag: int | None = None

    @property
    def has_fixed_tag(self) -> bool:
        return self.fixed_tag is not None


@dataclass(frozen=True, slots=True)
class RecordShape:
    name: str
    qualname: str
    fields: Fields
    type_params: tuple[TypeVar, ...] = ()


@dataclass(frozen=True, slots=True)
class UnionShape:
    name: str
    qualname: str
    variants: tuple[Variant, ...]
    type_params: tuple[TypeVar, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.variants


Shape: TypeAlias = RecordShape | UnionShape
