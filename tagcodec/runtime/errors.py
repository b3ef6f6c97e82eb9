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

from dataclasses import dataclass
from typing import TypeAlias

from tagcodec.serialization.exceptions import DecodeError


@dataclass(frozen=True, slots=True)
class AllowedRange:
    """Every tag from `min` to `max` (inclusive) is valid."""

    min: int
    max: int

    def __str__(self) -> str:
        return f'{self.min}..={self.max}'


@dataclass(frozen=True, slots=True)
class AllowedTags:
    """Only the listed tags are valid, in variant declaration order."""

    tags: tuple[int, ...]

    def __str__(self) -> str:
        return '[' + ', '.join(str(tag) for tag in self.tags) + ']'


AllowedVariants: TypeAlias = AllowedRange | AllowedTags


class EmptyUnionError(DecodeError):
    """A union without variants was decoded, no input can ever be valid for it."""

    def __init__(self, *, type_name: str) -> None:
        super().__init__(f'cannot decode empty union {type_name}')
        self.type_name = type_name


class UnexpectedVariantError(DecodeError):
    """The decoded tag does not belong to any variant of the union."""

    def __init__(self, *, found: int, type_name: str, allowed: AllowedVariants) -> None:
        super().__init__(f'unexpected variant {found} for {type_name}, allowed: {allowed}')
        self.found = found
        self.type_name = type_name
        self.allowed = allowed
