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
Byte budgets for encoders and decoders.

`encode_to_bytes(..., max_bytes=N)` and `decode_from_bytes(..., max_bytes=N)` wrap their encoder or decoder in one of
these, so a value that would take more than `N` bytes fails as soon as the budget runs out. On the decode side a
length prefix is checked against the budget before the bytes it announces are read.
"""

from typing import Generic, TypeVar

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import SerializationError
from .serializer import Serializer
from .types import Buffer

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


class MaxBytesExceededError(SerializationError):
    """ Raised when an encode or decode goes past its byte budget.

    The wrapped encoder or decoder must not be used after this, whatever was written or read so far is unusable.
    """

    def __init__(self, max_bytes: int, needed: int) -> None:
        super().__init__(f'{needed} bytes needed, the limit is {max_bytes}')
        self.max_bytes = max_bytes
        self.needed = needed


class _Budget:
    __slots__ = ('max_bytes', 'used')

    def __init__(self, max_bytes: int) -> None:
        if max_bytes < 0:
            raise ValueError('max_bytes cannot be negative')
        self.max_bytes = max_bytes
        self.used = 0

    @property
    def left(self) -> int:
        return self.max_bytes - self.used

    def spend(self, size: int) -> None:
        if size > self.left:
            raise MaxBytesExceededError(self.max_bytes, self.used + size)
        self.used += size


class MaxBytesSerializer(Serializer, Generic[S]):
    """ An encoder that writes into `inner` and fails once more than `max_bytes` would have been written.

    >>> serializer = Serializer.build_bytes_serializer().with_max_bytes(2)
    >>> serializer.write_bytes(b'ab')
    >>> serializer.write_byte(0x63)
    Traceback (most recent call last):
    ...
    tagcodec.serialization.max_bytes.MaxBytesExceededError: 3 bytes needed, the limit is 2
    """

    inner: S

    def __init__(self, serializer: S, max_bytes: int) -> None:
        self.inner = serializer
        self._budget = _Budget(max_bytes)

    @property
    def bytes_left(self) -> int:
        return self._budget.left

    @override
    def finalize(self) -> Buffer:
        return self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        return self.inner.cur_pos()

    @override
    def write_byte(self, data: int) -> None:
        self._budget.spend(1)
        self.inner.write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        data_view = memoryview(data)
        self._budget.spend(data_view.nbytes)
        self.inner.write_bytes(data_view)


class MaxBytesDeserializer(Deserializer, Generic[D]):
    """ A decoder that reads from `inner` and fails once more than `max_bytes` would have been consumed.

    Peeking is free, only consumed bytes count. Views returned by `inner` are passed through untouched, so borrowing
    decodes stay zero-copy.
    """

    inner: D

    def __init__(self, deserializer: D, max_bytes: int) -> None:
        self.inner = deserializer
        self._budget = _Budget(max_bytes)

    @property
    def bytes_left(self) -> int:
        return self._budget.left

    @override
    def finalize(self) -> None:
        self.inner.finalize()

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def peek_byte(self) -> int:
        return self.inner.peek_byte()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        return self.inner.peek_bytes(n, exact=exact)

    @override
    def read_byte(self) -> int:
        self._budget.spend(1)
        return self.inner.read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        if exact:
            self._budget.spend(n)
            return self.inner.read_bytes(n)
        data = self.inner.read_bytes(min(n, self._budget.left), exact=False)
        size = len(memoryview(data))
        self._budget.spend(size)
        if size < n and not self.inner.is_empty():
            raise MaxBytesExceededError(self._budget.max_bytes, self._budget.used + 1)
        return data

    @override
    def read_all(self) -> Buffer:
        return self.read_bytes(self._budget.left + 1, exact=False)
