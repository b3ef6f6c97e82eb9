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
The arm that decoding falls into when the tag matches no variant.
"""

from collections.abc import Sequence

from tagcodec.codegen.crate import CrateName
from tagcodec.codegen.shape import UnionShape
from tagcodec.codegen.source import SourceBuilder
from tagcodec.codegen.tags import Tag


def allowed_variants_expr(shape: UnionShape, tags: Sequence[Tag], crate: CrateName) -> str:
    """ Describe the valid tags: a range when every tag is positional, the full list as soon as one is fixed.

    >>> from tagcodec.codegen.shape import UNIT, Variant
    >>> from tagcodec.codegen.tags import iter_variant_tags
    >>> crate = CrateName('tagcodec')
    >>> shape = UnionShape('U', 'U', (Variant('A', UNIT), Variant('B', UNIT), Variant('C', UNIT)))
    >>> allowed_variants_expr(shape, [tag for tag, _ in iter_variant_tags(shape.variants)], crate)
    'tagcodec.AllowedRange(min=0, max=2)'
    >>> shape = UnionShape('U', 'U', (Variant('A', UNIT), Variant('B', UNIT, 5), Variant('C', UNIT)))
    >>> allowed_variants_expr(shape, [tag for tag, _ in iter_variant_tags(shape.variants)], crate)
    'tagcodec.AllowedTags((0, 5, 5 + 1))'
    """
    if any(variant.has_fixed_tag for variant in shape.variants):
        rendered = ', '.join(tag.render() for tag in tags)
        if len(tags) == 1:
            rendered += ','
        return f'{crate.ty("AllowedTags")}(({rendered}))'
    return f'{crate.ty("AllowedRange")}(min=0, max={len(shape.variants) - 1})'


def emit_invalid_variant_arm(source: SourceBuilder, shape: UnionShape, tags: Sequence[Tag], crate: CrateName) -> None:
    with source.block('case variant:'):
        source.call(f'raise {crate.ty("UnexpectedVariantError")}', [
            'found=variant',
            f'type_name={shape.name!r}',
            f'allowed={allowed_variants_expr(shape, tags, crate)}',
        ])


def emit_empty_union_decode(source: SourceBuilder, crate: CrateName) -> None:
    source.line(f'raise {crate.ty("EmptyUnionError")}(type_name={crate.ty("type_name")}(Self))')
