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

from swapvm.coders import ADDRESS, UINT256, ArgField, ArgsCoder, ArrayArgType
from swapvm.exception import ValidationError
from swapvm.instructions.opcode import Opcode, OpcodeId
from swapvm.types import Address, Amount


@dataclass(frozen=True, slots=True)
class BalancesArgs:
    """ Maker balances for an X-dimensional pool, `balances[i]` belongs to `tokens[i]`."""
    tokens: tuple[Address, ...]
    balances: tuple[Amount, ...]


def _check_balances(args: BalancesArgs) -> None:
    if len(args.tokens) != len(args.balances):
        raise ValidationError(f'got {len(args.tokens)} tokens and {len(args.balances)} balances')


BALANCES_ARGS_CODER = ArgsCoder(
    BalancesArgs,
    (ArgField('tokens', ArrayArgType(ADDRESS)), ArgField('balances', ArrayArgType(UINT256))),
    check=_check_balances,
)

static_balances_xd = Opcode(OpcodeId.STATIC_BALANCES_XD, BALANCES_ARGS_CODER)
dynamic_balances_xd = Opcode(OpcodeId.DYNAMIC_BALANCES_XD, BALANCES_ARGS_CODER)
