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
Assigns the wire tag of every variant of a union.

Tags follow declaration order: a variant with a fixed tag uses it, a variant without one takes the previous fixed tag
plus how many variants came after it, and before any fixed tag is seen a variant takes its 0-based position. For
`[A, B(tag=5), C, D(tag=2), E]` that is `0, 5, 5 + 1, 2, 2 + 1`.

Tags after a fixed one are kept as the symbolic sum instead of being folded, that is what generated code prints, and
it is why decode needs a guard arm for them. Collisions are not checked.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeAlias

from tagcodec.codegen.shape import Variant


@dataclass(frozen=True, slots=True)
class LiteralTag:
    value: int

    @property
    def is_literal(self) -> bool:
        return True

    def evaluate(self) -> int:
        return self.value

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class ComputedTag:
    base: int
    offset: int

    @property
    def is_literal(self) -> bool:
        return False

    def evaluate(self) -> int:
        return self.base + self.offset

    def render(self) -> str:
        return f'{self.base} + {self.offset}'


Tag: TypeAlias = LiteralTag | ComputedTag


def iter_variant_tags(variants: Iterable[Variant]) -> Iterator[tuple[Tag, Variant]]:
    """ Yield each variant with its tag, in declaration order.

    >>> from tagcodec.codegen.shape import UNIT
    >>> variants = [Variant('A', UNIT), Variant('B', UNIT, 5), Variant('C', UNIT)]
    >>> [tag.render() for tag, _ in iter_variant_tags(variants)]
    ['0', '5', '5 + 1']
    """
    last_fixed: tuple[int, int] | None = None
    for index, variant in enumerate(variants):
        tag: Tag
        if variant.fixed_tag is not None:
            tag = LiteralTag(variant.fixed_tag)
            last_fixed = (variant.fixed_tag, 0)
        elif last_fixed is not None:
            base, offset = last_fixed
            last_fixed = (base, offset + 1)
            tag = ComputedTag(base, offset + 1)
        else:
            tag = LiteralTag(index)
        yield tag, variant
