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
Interop adapters.

A field marked with the `with_pydantic` attribute is not encoded with its native codec, generated procedures wrap it
in `Compat` (or `BorrowCompat` when borrowing) and the runtime encodes the wrapper as a length-prefixed JSON document
produced by a pydantic `TypeAdapter` for the inner type. Any type pydantic can validate works, including pydantic
models, which do not need to be derived.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar('T')


@dataclass(frozen=True, slots=True)
class Compat(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class BorrowCompat(Generic[T]):
    """Same wire format as `Compat`, produced by borrowing decodes.

    pydantic always builds owned values, so the inner value never references the decoder's input.
    """

    value: T
