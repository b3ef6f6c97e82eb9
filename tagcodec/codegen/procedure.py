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

from dataclasses import dataclass, field
from typing import Any

from tagcodec.runtime.traits import Capability


@dataclass(frozen=True, slots=True)
class GeneratedProcedure:
    """The source of one procedure and the names it needs besides `Self` and the root namespace."""

    type_name: str
    qualname: str
    capability: Capability
    source: str
    namespace: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def name(self) -> str:
        return self.capability.value

    @property
    def trait_name(self) -> str:
        return self.capability.trait_name

    @property
    def filename(self) -> str:
        """Pseudo-filename the procedure is compiled under, it shows up in tracebacks."""
        return f'<tagcodec {self.qualname}.{self.name}>'
