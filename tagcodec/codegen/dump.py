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
Writes generated procedures to disk so they can be read, it never affects generation.
"""

from pathlib import Path
from typing import Optional, Union

from structlog import get_logger

from tagcodec.codegen.procedure import GeneratedProcedure

logger = get_logger()


def dump_filename(procedure: GeneratedProcedure) -> str:
    """ Name of the file a procedure is dumped to.

    >>> from tagcodec.runtime.traits import Capability
    >>> dump_filename(GeneratedProcedure('Shape', 'Shape', Capability.BORROW_DECODE, ''))
    'Shape_BorrowDecode.py'
    """
    return f'{procedure.type_name}_{procedure.trait_name}.py'


def dump_procedure(procedure: GeneratedProcedure, dump_dir: Union[Path, str]) -> Optional[Path]:
    """Write the procedure's source under `dump_dir`, returns the path or `None` when it could not be written."""
    log = logger.new(type_name=procedure.qualname, capability=procedure.name)
    path = Path(dump_dir) / dump_filename(procedure)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(procedure.source, encoding='utf-8')
    except OSError:
        log.warn('could not dump generated procedure', path=str(path), exc_info=True)
        return None
    log.debug('generated procedure dumped', path=str(path))
    return path
