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

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from typing_extensions import Self


class SourceBuilder:
    """ Accumulates Python source one line at a time, `block` opens an indented suite.

    >>> source = SourceBuilder()
    >>> with source.block('def f(x):'):
    ...     source.call('return g', ['x', 'y=1'])
    >>> with source.block('def h():'):
    ...     pass
    >>> print(source.build(), end='')
    def f(x):
        return g(
            x,
            y=1,
        )
    def h():
        pass
    """

    INDENT = '    '

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._level = 0

    def line(self, text: str) -> None:
        self._lines.append(self.INDENT * self._level + text)

    @contextmanager
    def block(self, header: str) -> Iterator[Self]:
        """Emit `header` and indent everything emitted inside, an empty suite gets a `pass`."""
        self.line(header)
        start = len(self._lines)
        self._level += 1
        try:
            yield self
            if len(self._lines) == start:
                self.line('pass')
        finally:
            self._level -= 1

    def call(self, callee: str, args: Sequence[str]) -> None:
        """Emit a call with one argument per line, arguments are evaluated in the order given."""
        if not args:
            self.line(f'{callee}()')
            return
        with self.block(f'{callee}('):
            for arg in args:
                self.line(f'{arg},')
        self.line(')')

    def build(self) -> str:
        assert self._level == 0, 'unclosed block'
        return '\n'.join(self._lines) + '\n'
