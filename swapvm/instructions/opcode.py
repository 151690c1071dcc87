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

from enum import Enum, unique
from typing import Any, NamedTuple

from swapvm.coders.args_coder import ArgsCoder
from swapvm.exception import UnknownOpcodeError


@unique
class OpcodeId(Enum):
    """ Identity of every instruction understood by the SwapVM interpreter.

    Values are the `Family.instruction` names used by the contracts. Members are not integers, the byte that
    selects an instruction on-chain depends on the opcode table in use and is assigned by the registry.
    """

    # Controls
    JUMP = 'Controls.jump'
    JUMP_IF_TOKEN_IN = 'Controls.jumpIfTokenIn'
    JUMP_IF_TOKEN_OUT = 'Controls.jumpIfTokenOut'
    DEADLINE = 'Controls.deadline'
    ONLY_TAKER_TOKEN_BALANCE_NON_ZERO = 'Controls.onlyTakerTokenBalanceNonZero'
    ONLY_TAKER_TOKEN_BALANCE_GTE = 'Controls.onlyTakerTokenBalanceGte'
    SALT = 'Controls.salt'
    # Balances
    STATIC_BALANCES_XD = 'Balances.staticBalancesXD'
    DYNAMIC_BALANCES_XD = 'Balances.dynamicBalancesXD'
    # Invalidators
    INVALIDATE_BIT_1D = 'Invalidators.invalidateBit1D'
    INVALIDATE_TOKEN_IN_1D = 'Invalidators.invalidateTokenIn1D'
    INVALIDATE_TOKEN_OUT_1D = 'Invalidators.invalidateTokenOut1D'
    # Swaps
    LIMIT_SWAP_1D = 'LimitSwap.limitSwap1D'
    LIMIT_SWAP_ONLY_FULL_1D = 'LimitSwap.limitSwapOnlyFull1D'
    XYC_SWAP_XD = 'XYCSwap.xycSwapXD'
    # DutchAuction
    DUTCH_AUCTION_BALANCE_IN_1D = 'DutchAuction.dutchAuctionBalanceIn1D'
    DUTCH_AUCTION_BALANCE_OUT_1D = 'DutchAuction.dutchAuctionBalanceOut1D'
    # Fee
    FLAT_FEE_AMOUNT_IN_XD = 'Fee.flatFeeAmountInXD'
    FLAT_FEE_AMOUNT_OUT_XD = 'Fee.flatFeeAmountOutXD'
    # Transfer
    TRANSFER_IN = 'Transfer.transferIn'
    TRANSFER_OUT = 'Transfer.transferOut'
    # Traits
    CHECK_MAKER_TRAITS = 'Traits.checkMakerTraits'
    CHECK_TAKER_TRAITS = 'Traits.checkTakerTraits'

    @property
    def family(self) -> str:
        return self.value.split('.', 1)[0]

    @property
    def instruction_name(self) -> str:
        return self.value.split('.', 1)[1]

    @classmethod
    def from_name(cls, name: str) -> 'OpcodeId':
        """ Find an opcode by its dotted value, its instruction name or its member name.

        >>> OpcodeId.from_name('dutchAuctionBalanceIn1D')
        <OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D: 'DutchAuction.dutchAuctionBalanceIn1D'>
        >>> OpcodeId.from_name('JUMP') is OpcodeId.from_name('Controls.jump')
        True
        """
        for member in cls:
            if name in (member.value, member.name, member.instruction_name):
                return member
        raise UnknownOpcodeError(f'unknown opcode: {name!r}')

    def __str__(self) -> str:
        return self.value


class Opcode(NamedTuple):
    """ An opcode identity bound to the coder of its arguments."""
    id: OpcodeId
    coder: ArgsCoder[Any]


class DecodedInstruction(NamedTuple):
    opcode: OpcodeId
    args: Any
