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
The wire layer used by generated procedures.

A `Serializer` plays the role of the "encoder" and a `Deserializer` the role of the "decoder" that generated
`encode`/`decode`/`borrow_decode` procedures receive. `BytesDeserializer` hands out views into its input buffer, which
is what makes borrowing decodes zero-copy.
"""

from .deserializer import Deserializer
from .exceptions import (
    BadDataError,
    DecodeError,
    EncodeError,
    OutOfDataError,
    SerializationError,
    TooLongError,
    TrailingDataError,
    UnsupportedTypeError,
)
from .max_bytes import MaxBytesExceededError
from .serializer import Serializer

__all__ = [
    'Serializer',
    'Deserializer',
    'SerializationError',
    'EncodeError',
    'DecodeError',
    'OutOfDataError',
    'TrailingDataError',
    'BadDataError',
    'TooLongError',
    'MaxBytesExceededError',
    'UnsupportedTypeError',
]
