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
Flow control and guard instructions.

Jumps address the program by byte offset (the `pc`), not by instruction index.
"""

from dataclasses import dataclass

from swapvm.coders import ADDRESS, UINT16, UINT40, UINT64, UINT256, ArgField, ArgsCoder
from swapvm.instructions.opcode import Opcode, OpcodeId
from swapvm.types import Address, Amount, Timestamp


@dataclass(frozen=True, slots=True)
class JumpArgs:
    next_pc: int


@dataclass(frozen=True, slots=True)
class JumpIfTokenArgs:
    token: Address
    next_pc: int


@dataclass(frozen=True, slots=True)
class DeadlineArgs:
    deadline: Timestamp


@dataclass(frozen=True, slots=True)
class TakerTokenBalanceNonZeroArgs:
    token: Address


@dataclass(frozen=True, slots=True)
class TakerTokenBalanceGteArgs:
    token: Address
    min_amount: Amount


@dataclass(frozen=True, slots=True)
class SaltArgs:
    salt: int


JUMP_ARGS_CODER = ArgsCoder(JumpArgs, (ArgField('next_pc', UINT16),))
JUMP_IF_TOKEN_ARGS_CODER = ArgsCoder(JumpIfTokenArgs, (ArgField('token', ADDRESS), ArgField('next_pc', UINT16)))
DEADLINE_ARGS_CODER = ArgsCoder(DeadlineArgs, (ArgField('deadline', UINT40),))
TAKER_TOKEN_BALANCE_NON_ZERO_ARGS_CODER = ArgsCoder(TakerTokenBalanceNonZeroArgs, (ArgField('token', ADDRESS),))
TAKER_TOKEN_BALANCE_GTE_ARGS_CODER = ArgsCoder(
    TakerTokenBalanceGteArgs,
    (ArgField('token', ADDRESS), ArgField('min_amount', UINT256)),
)
SALT_ARGS_CODER = ArgsCoder(SaltArgs, (ArgField('salt', UINT64),))

jump = Opcode(OpcodeId.JUMP, JUMP_ARGS_CODER)
jump_if_token_in = Opcode(OpcodeId.JUMP_IF_TOKEN_IN, JUMP_IF_TOKEN_ARGS_CODER)
jump_if_token_out = Opcode(OpcodeId.JUMP_IF_TOKEN_OUT, JUMP_IF_TOKEN_ARGS_CODER)
deadline = Opcode(OpcodeId.DEADLINE, DEADLINE_ARGS_CODER)
only_taker_token_balance_non_zero = Opcode(
    OpcodeId.ONLY_TAKER_TOKEN_BALANCE_NON_ZERO,
    TAKER_TOKEN_BALANCE_NON_ZERO_ARGS_CODER,
)
only_taker_token_balance_gte = Opcode(OpcodeId.ONLY_TAKER_TOKEN_BALANCE_GTE, TAKER_TOKEN_BALANCE_GTE_ARGS_CODER)
salt = Opcode(OpcodeId.SALT, SALT_ARGS_CODER)
