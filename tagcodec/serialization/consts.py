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

# limit for a single length-prefixed byte sequence (also applies to utf-8 strings and interop payloads)
DEFAULT_BYTES_MAX_LENGTH: int = 2**24

# an unsigned 64-bit value fits in 10 LEB128 bytes
DEFAULT_LEB128_MAX_BYTES: int = 10
