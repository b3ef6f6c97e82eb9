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

r"""
This module implements utf-8 string encoding with a length prefix.

It works exactly like bytes-encoding but the encoded byte-sequence is utf-8 and it takes/returns a `str`.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes 06666f6f626172
>>> bytes(se.finalize()).hex()
'06666f6f626172'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('06666f6f626172'))
>>> decode_utf8(de)
'foobar'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x01\xff')
>>> try:
...     decode_utf8(de)
... except BadDataError as e:
...     print(*e.args)
invalid utf-8 string
"""

from ..deserializer import Deserializer
from ..exceptions import BadDataError
from ..serializer import Serializer
from .bytes import decode_bytes_view, encode_bytes


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.
    """
    assert isinstance(value, str)
    encode_bytes(serializer, value.encode('utf-8'))


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a UTF-8 string with a length prefix.
    """
    data = decode_bytes_view(deserializer)
    try:
        return str(data, 'utf-8')
    except UnicodeDecodeError:
        raise BadDataError('invalid utf-8 string')
