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

import os
from typing import NamedTuple, Optional

from structlog import get_logger

from tagcodec.conf.settings import CodegenSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'TAGCODEC_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: CodegenSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> CodegenSettings:
    """
    Returns the process settings.

    Loaded once from the yaml filepath in the 'TAGCODEC_CONFIG_YAML' env var, defaults are used when it is not set.
    """
    global _settings_singleton

    source = os.environ.get(CONFIG_YAML_ENV_VAR)
    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')
        return _settings_singleton.settings

    if source is None:
        settings = CodegenSettings()
    else:
        settings = CodegenSettings.from_yaml(filepath=source)
        logger.debug('settings loaded', source=source)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings


def get_settings_source() -> Optional[str]:
    """ Returns the path of the YAML file that was loaded, `None` when defaults are in use.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def reset_global_settings() -> None:
    """Forget the loaded settings, the next call to get_global_settings() loads them again."""
    global _settings_singleton
    _settings_singleton = None
