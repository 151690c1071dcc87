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

from dataclasses import dataclass

from swapvm.coders import BOOL, ArgField, ArgsCoder
from swapvm.instructions.opcode import Opcode, OpcodeId


@dataclass(frozen=True, slots=True)
class LimitSwapDirectionArgs:
    # true when the maker sells the token with the lower address
    maker_direction_lt: bool


LIMIT_SWAP_DIRECTION_ARGS_CODER = ArgsCoder(LimitSwapDirectionArgs, (ArgField('maker_direction_lt', BOOL),))

limit_swap_1d = Opcode(OpcodeId.LIMIT_SWAP_1D, LIMIT_SWAP_DIRECTION_ARGS_CODER)
limit_swap_only_full_1d = Opcode(OpcodeId.LIMIT_SWAP_ONLY_FULL_1D, LIMIT_SWAP_DIRECTION_ARGS_CODER)
