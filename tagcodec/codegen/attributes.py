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

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from tagcodec.codegen.shape import FieldAdapter
from tagcodec.exception import UnknownFieldAttribute

INTEROP_TOKEN: Final[str] = 'with_pydantic'


@dataclass(frozen=True, slots=True)
class Attr:
    """ A per-field attribute, attached with `Annotated`:

        class Event:
            payload: Annotated[Payload, Attr('with_pydantic')]

    Other `Annotated` metadata is left alone, only `Attr` instances are inspected.
    """

    token: str


WITH_PYDANTIC: Final[Attr] = Attr(INTEROP_TOKEN)


def parse_field_adapter(attrs: Iterable[Attr], *, field: str | None = None) -> FieldAdapter:
    """ Decide the adapter of a field from its attributes.

    >>> parse_field_adapter([])
    <FieldAdapter.PLAIN: 'plain'>
    >>> parse_field_adapter([Attr('with_pydantic')])
    <FieldAdapter.INTEROP: 'interop'>
    >>> try:
    ...     parse_field_adapter([Attr('with_serde')])
    ... except UnknownFieldAttribute as e:
    ...     print(e.token)
    with_serde
    """
    adapter = FieldAdapter.PLAIN
    for attr in attrs:
        if attr.token != INTEROP_TOKEN:
            raise UnknownFieldAttribute(attr.token, field=field)
        adapter = FieldAdapter.INTEROP
    return adapter
