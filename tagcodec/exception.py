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


class TagcodecError(Exception):
    """Base class for errors raised while generating procedures for a class."""


class CodegenError(TagcodecError):
    """The class cannot get generated procedures, nothing was attached to it."""


class UnknownFieldAttribute(CodegenError):
    """A field carries an attribute token that is not recognized."""

    def __init__(self, token: object, *, field: str | None = None) -> None:
        where = f' on field {field!r}' if field is not None else ''
        super().__init__(f'unknown attribute {token!r}{where}, expected one of: "with_pydantic"')
        self.token = token
        self.field = field


class InvalidShapeError(CodegenError):
    """The class is not a record or a tagged union that procedures can be generated for."""
