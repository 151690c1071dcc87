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
Dutch auctions decay one side of the swap linearly over time.

Both opcodes share the same arguments and coder, the direction of the decay is given by the opcode identity and is
resolved in `swapvm.decay`:

>>> args = DutchAuctionArgs(start_amount=1000, end_amount=500, start_time=1700000000, duration=100)
>>> payload = DUTCH_AUCTION_ARGS_CODER.encode(args)
>>> len(payload)
73
>>> DUTCH_AUCTION_ARGS_CODER.decode(payload) == args
True
"""

from dataclasses import dataclass

from swapvm.coders import UINT32, UINT40, UINT256, ArgField, ArgsCoder
from swapvm.exception import ValidationError
from swapvm.instructions.opcode import Opcode, OpcodeId
from swapvm.types import Amount, Timestamp


@dataclass(frozen=True, slots=True)
class DutchAuctionArgs:
    start_amount: Amount
    end_amount: Amount
    start_time: Timestamp
    duration: int

    @property
    def end_time(self) -> Timestamp:
        return Timestamp(self.start_time + self.duration)


def _check_dutch_auction(args: DutchAuctionArgs) -> None:
    if args.duration <= 0:
        raise ValidationError('duration must be positive')


DUTCH_AUCTION_ARGS_CODER = ArgsCoder(
    DutchAuctionArgs,
    (
        ArgField('start_amount', UINT256),
        ArgField('end_amount', UINT256),
        ArgField('start_time', UINT40),
        ArgField('duration', UINT32),
    ),
    check=_check_dutch_auction,
)

dutch_auction_balance_in_1d = Opcode(OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D, DUTCH_AUCTION_ARGS_CODER)
dutch_auction_balance_out_1d = Opcode(OpcodeId.DUTCH_AUCTION_BALANCE_OUT_1D, DUTCH_AUCTION_ARGS_CODER)
