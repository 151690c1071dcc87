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
Published opcode tables.

The position of an opcode in its table is the discriminator byte used on-chain, so these tuples are append-only: new
instructions go at the end, nothing is ever removed or reordered.
"""

from enum import Enum, unique

from swapvm.instructions import (
    balances,
    controls,
    dutch_auction,
    fee,
    invalidators,
    limit_swap,
    traits,
    transfer,
    xyc_swap,
)
from swapvm.instructions.opcode import Opcode


@unique
class OpcodeSet(str, Enum):
    SWAP_VM = 'swap-vm'
    AQUA = 'aqua'

    @property
    def opcodes(self) -> tuple[Opcode, ...]:
        return _OPCODE_TABLES[self]


_CONTROLS: tuple[Opcode, ...] = (
    controls.jump,
    controls.jump_if_token_in,
    controls.jump_if_token_out,
    controls.deadline,
    controls.only_taker_token_balance_non_zero,
    controls.only_taker_token_balance_gte,
    controls.salt,
)

SWAP_VM_OPCODES: tuple[Opcode, ...] = _CONTROLS + (
    balances.static_balances_xd,
    balances.dynamic_balances_xd,
    invalidators.invalidate_bit_1d,
    invalidators.invalidate_token_in_1d,
    invalidators.invalidate_token_out_1d,
    limit_swap.limit_swap_1d,
    limit_swap.limit_swap_only_full_1d,
    xyc_swap.xyc_swap_xd,
    dutch_auction.dutch_auction_balance_in_1d,
    dutch_auction.dutch_auction_balance_out_1d,
    fee.flat_fee_amount_in_xd,
    fee.flat_fee_amount_out_xd,
    transfer.transfer_in,
    transfer.transfer_out,
    traits.check_maker_traits,
    traits.check_taker_traits,
)

# balances and invalidation are kept by the Aqua liquidity layer, its programs never carry them
AQUA_OPCODES: tuple[Opcode, ...] = _CONTROLS + (
    limit_swap.limit_swap_1d,
    limit_swap.limit_swap_only_full_1d,
    xyc_swap.xyc_swap_xd,
    dutch_auction.dutch_auction_balance_in_1d,
    dutch_auction.dutch_auction_balance_out_1d,
    fee.flat_fee_amount_in_xd,
    fee.flat_fee_amount_out_xd,
    transfer.transfer_in,
    transfer.transfer_out,
    traits.check_maker_traits,
    traits.check_taker_traits,
)

_OPCODE_TABLES: dict[OpcodeSet, tuple[Opcode, ...]] = {
    OpcodeSet.SWAP_VM: SWAP_VM_OPCODES,
    OpcodeSet.AQUA: AQUA_OPCODES,
}
