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


class SerializationError(ValueError):
    """Base class for every error raised while writing or reading the wire format."""


class EncodeError(SerializationError):
    """A value could not be encoded."""


class DecodeError(SerializationError):
    """The input could not be decoded into a value."""


class OutOfDataError(DecodeError):
    """The input ended before the value was complete."""


class TrailingDataError(DecodeError):
    """The input still had bytes left after the value was complete."""


class BadDataError(DecodeError):
    """The input bytes do not form a valid value."""


class TooLongError(SerializationError):
    """A single read or write exceeded the allowed length."""


class UnsupportedTypeError(TypeError):
    """There is no codec for the requested type."""
