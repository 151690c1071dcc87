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
Linear decay of dutch auction amounts.

The amount moves from `start_amount` at `start_time` to `end_amount` at `start_time + duration`, as a weighted average
of both ends:

>>> args = DutchAuctionArgs(start_amount=1000, end_amount=500, start_time=100, duration=100)
>>> current_amount(args, 100, DecayDirection.INPUT)
1000
>>> current_amount(args, 150, DecayDirection.INPUT)
750
>>> current_amount(args, 500, DecayDirection.INPUT)
500

Whenever the result is not exact it's rounded in favor of the maker, up for what the taker pays and down for what the
taker receives:

>>> args = DutchAuctionArgs(start_amount=10, end_amount=0, start_time=0, duration=3)
>>> current_amount(args, 1, DecayDirection.INPUT)
7
>>> args = DutchAuctionArgs(start_amount=0, end_amount=10, start_time=0, duration=3)
>>> current_amount(args, 1, DecayDirection.OUTPUT)
3
"""

from enum import Enum
from typing import Optional

from swapvm.exception import InvalidRangeError, ValidationError
from swapvm.instructions.dutch_auction import DutchAuctionArgs
from swapvm.instructions.opcode import DecodedInstruction, OpcodeId
from swapvm.types import Amount


class DecayDirection(Enum):
    # amount paid by the taker, it may only go down
    INPUT = 'input'
    # amount received by the taker, it may only go up
    OUTPUT = 'output'


DUTCH_AUCTION_DIRECTIONS: dict[OpcodeId, DecayDirection] = {
    OpcodeId.DUTCH_AUCTION_BALANCE_IN_1D: DecayDirection.INPUT,
    OpcodeId.DUTCH_AUCTION_BALANCE_OUT_1D: DecayDirection.OUTPUT,
}


def check_auction(args: DutchAuctionArgs, direction: DecayDirection) -> None:
    """Raise InvalidRangeError if the amounts move against the direction of the auction."""
    if direction is DecayDirection.INPUT and args.start_amount < args.end_amount:
        raise InvalidRangeError(
            f'input auction must not increase: {args.start_amount} -> {args.end_amount}'
        )
    if direction is DecayDirection.OUTPUT and args.start_amount > args.end_amount:
        raise InvalidRangeError(
            f'output auction must not decrease: {args.start_amount} -> {args.end_amount}'
        )


def current_amount(args: DutchAuctionArgs, now: int, direction: DecayDirection, *, strict: bool = True) -> Amount:
    """ Return the auction amount at timestamp `now`.

    Raises InvalidRangeError when the duration is zero or, if `strict` is set, when the amounts don't follow the
    direction of the auction.
    """
    if args.duration <= 0:
        raise InvalidRangeError(f'auction duration must be positive, got {args.duration}')
    if strict:
        check_auction(args, direction)

    end_time = args.start_time + args.duration
    if now <= args.start_time:
        return args.start_amount
    if now >= end_time:
        return args.end_amount

    weighted = args.start_amount * (end_time - now) + args.end_amount * (now - args.start_time)
    if direction is DecayDirection.INPUT:
        return Amount(-(-weighted // args.duration))
    return Amount(weighted // args.duration)


def instruction_amount(instruction: DecodedInstruction, now: int, *, strict: Optional[bool] = None) -> Amount:
    """ Return the current amount of a decoded dutch auction instruction.

    The direction comes from the opcode. When `strict` is not given the global settings decide it.
    """
    direction = DUTCH_AUCTION_DIRECTIONS.get(instruction.opcode)
    if direction is None:
        raise ValidationError(f'{instruction.opcode} is not a dutch auction instruction')
    if strict is None:
        from swapvm.conf.get_settings import get_global_settings
        strict = get_global_settings().STRICT_AUCTION_MONOTONICITY
    return current_amount(instruction.args, now, direction, strict=strict)
