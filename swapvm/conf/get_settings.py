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

from swapvm import conf
from swapvm.conf.settings import SwapVmSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'SWAPVM_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: SwapVmSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> SwapVmSettings:
    """
    Returns the settings loaded from the yaml filepath in the 'SWAPVM_CONFIG_YAML' env var.

    If it's not set, the default swap-vm configuration is returned.
    """
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR, conf.SWAP_VM_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    global _settings_singleton
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: str) -> SwapVmSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    log = logger.new()
    log.debug('loading settings', source=source)
    _settings_singleton = _SettingsMetadata(
        source=source,
        settings=SwapVmSettings.from_yaml(filepath=source),
    )

    return _settings_singleton.settings
