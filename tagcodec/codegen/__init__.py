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

from tagcodec.codegen.attributes import INTEROP_TOKEN, WITH_PYDANTIC, Attr
from tagcodec.codegen.crate import CrateName
from tagcodec.codegen.driver import ALL_CAPABILITIES, compile_procedure, derive, generate, generate_all
from tagcodec.codegen.dump import dump_procedure
from tagcodec.codegen.procedure import GeneratedProcedure
from tagcodec.codegen.reflection import TaggedUnion, shape_from_class, variant

__all__ = [
    'ALL_CAPABILITIES',
    'Attr',
    'CrateName',
    'GeneratedProcedure',
    'INTEROP_TOKEN',
    'TaggedUnion',
    'WITH_PYDANTIC',
    'compile_procedure',
    'derive',
    'dump_procedure',
    'generate',
    'generate_all',
    'shape_from_class',
    'variant',
]
