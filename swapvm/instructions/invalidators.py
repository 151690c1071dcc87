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

from swapvm.coders import UINT32, ArgField, ArgsCoder
from swapvm.instructions.opcode import Opcode, OpcodeId


@dataclass(frozen=True, slots=True)
class EmptyArgs:
    """Instructions that take no arguments still carry a zero length payload."""


@dataclass(frozen=True, slots=True)
class InvalidateBitArgs:
    bit_index: int


EMPTY_ARGS_CODER = ArgsCoder(EmptyArgs, ())
INVALIDATE_BIT_ARGS_CODER = ArgsCoder(InvalidateBitArgs, (ArgField('bit_index', UINT32),))

invalidate_bit_1d = Opcode(OpcodeId.INVALIDATE_BIT_1D, INVALIDATE_BIT_ARGS_CODER)
invalidate_token_in_1d = Opcode(OpcodeId.INVALIDATE_TOKEN_IN_1D, EMPTY_ARGS_CODER)
invalidate_token_out_1d = Opcode(OpcodeId.INVALIDATE_TOKEN_OUT_1D, EMPTY_ARGS_CODER)
