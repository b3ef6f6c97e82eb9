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

from __future__ import annotations

import importlib
from dataclasses import dataclass
from types import ModuleType

from tagcodec.conf.settings import DEFAULT_CRATE_ROOT, DOTTED_IDENTIFIER_RE
from tagcodec.exception import CodegenError


@dataclass(frozen=True, slots=True)
class CrateName:
    """ The root namespace generated code reaches the runtime through.

    Any module that re-exports the runtime surface of `tagcodec` works, which lets generated procedures target a
    renamed or vendored copy of it.

    >>> CrateName('tagcodec').ty('encode')
    'tagcodec.encode'
    >>> CrateName('vendor.codec').top_level
    'vendor'
    """

    name: str = DEFAULT_CRATE_ROOT

    def __post_init__(self) -> None:
        if not DOTTED_IDENTIFIER_RE.match(self.name):
            raise CodegenError(f'invalid root namespace: {self.name!r}')

    @property
    def top_level(self) -> str:
        return self.name.partition('.')[0]

    def ty(self, item: str) -> str:
        """Qualify a runtime name."""
        return f'{self.name}.{item}'

    def import_root(self) -> ModuleType:
        """Import the whole dotted path and return its top-level package, which is what generated code starts from."""
        try:
            importlib.import_module(self.name)
        except ImportError as e:
            raise CodegenError(f'cannot import root namespace {self.name!r}: {e}') from e
        return importlib.import_module(self.top_level)
