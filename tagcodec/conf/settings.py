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

import re
from pathlib import Path
from typing import Optional, Union

from pydantic import field_validator

from tagcodec.utils.pydantic import BaseModel
from tagcodec.utils.yaml import dict_from_extended_yaml

DEFAULT_CRATE_ROOT: str = 'tagcodec'

# a python identifier, or several joined with dots
DOTTED_IDENTIFIER_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$')


class CodegenSettings(BaseModel):
    # Dotted import path of the codec runtime, every generated reference is qualified with it so a renamed or
    # re-exported copy of the runtime can be targeted.
    CRATE_ROOT: str = DEFAULT_CRATE_ROOT

    # Directory where generated procedures are written for inspection, `None` disables it.
    DUMP_DIR: Optional[str] = None

    @field_validator('CRATE_ROOT')
    @classmethod
    def _validate_crate_root(cls, crate_root: str) -> str:
        if not DOTTED_IDENTIFIER_RE.match(crate_root):
            raise ValueError(f'invalid root namespace: {crate_root!r}')
        return crate_root

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodegenSettings':
        """Takes a filepath to a yaml file and returns a validated CodegenSettings instance."""
        settings_dict = dict_from_extended_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
