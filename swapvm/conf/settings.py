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

from pathlib import Path
from typing import Optional

from pydantic import field_validator

from swapvm.instructions.opcode_sets import OpcodeSet
from swapvm.utils.pydantic import BaseModel
from swapvm.utils.yaml import model_from_extended_yaml

DEFAULT_MAX_PROGRAM_LENGTH = 65535


class SwapVmSettings(BaseModel):
    # Opcode table used to assign discriminators, it must match the contract the programs are sent to.
    OPCODE_SET: OpcodeSet = OpcodeSet.SWAP_VM

    # Programs longer than this are rejected before decoding.
    MAX_PROGRAM_LENGTH: int = DEFAULT_MAX_PROGRAM_LENGTH

    # Reject dutch auctions whose amounts move against the taker-side direction of the decay.
    STRICT_AUCTION_MONOTONICITY: bool = True

    @field_validator('MAX_PROGRAM_LENGTH')
    @classmethod
    def _check_max_program_length(cls, value: int) -> int:
        if value <= 0:
            raise ValueError('MAX_PROGRAM_LENGTH must be positive')
        return value

    @classmethod
    def from_yaml(cls, *, filepath: str, custom_root: Optional[Path] = None) -> 'SwapVmSettings':
        """Takes a filepath to a yaml file and returns a validated SwapVmSettings instance."""
        return model_from_extended_yaml(cls, filepath=filepath, custom_root=custom_root)
