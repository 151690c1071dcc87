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

from argparse import ArgumentParser, Namespace

from structlog import get_logger

logger = get_logger()


def create_parser() -> ArgumentParser:
    from swapvm.decay import DecayDirection
    from swapvm_cli.util import add_registry_args, create_parser
    parser = create_parser()
    add_registry_args(parser)
    parser.add_argument('--instruction', type=str, help='Encoded dutch auction instruction in hex')
    parser.add_argument('--start-amount', type=int, help='Amount at the start of the auction')
    parser.add_argument('--end-amount', type=int, help='Amount at the end of the auction')
    parser.add_argument('--start-time', type=int, help='Unix timestamp when the auction starts')
    parser.add_argument('--duration', type=int, help='Auction duration in seconds')
    parser.add_argument('--direction', choices=[direction.value for direction in DecayDirection],
                        default=DecayDirection.INPUT.value, help='Side of the swap that decays')
    parser.add_argument('--now', type=int, help='Timestamp to evaluate at, defaults to the current time')
    parser.add_argument('--no-strict', action='store_true', help='Accept amounts that move against the direction')
    return parser


def execute(args: Namespace) -> None:
    import time

    from swapvm.decay import DUTCH_AUCTION_DIRECTIONS, DecayDirection, current_amount
    from swapvm.exception import SwapVmError
    from swapvm.instructions.dutch_auction import DutchAuctionArgs
    from swapvm_cli.util import check_or_exit, exit_with_error, parse_hex, registry_from_args

    log = logger.new()
    now = args.now if args.now is not None else int(time.time())

    try:
        if args.instruction:
            registry = registry_from_args(args)
            instruction = registry.decode_instruction(parse_hex(args.instruction))
            check_or_exit(instruction.opcode in DUTCH_AUCTION_DIRECTIONS,
                          f'{instruction.opcode} is not a dutch auction instruction')
            auction = instruction.args
            direction = DUTCH_AUCTION_DIRECTIONS[instruction.opcode]
        else:
            missing = [name for name in ('start_amount', 'end_amount', 'start_time', 'duration')
                       if getattr(args, name) is None]
            check_or_exit(not missing, 'missing ' + ', '.join('--' + name.replace('_', '-') for name in missing))
            auction = DutchAuctionArgs(
                start_amount=args.start_amount,
                end_amount=args.end_amount,
                start_time=args.start_time,
                duration=args.duration,
            )
            direction = DecayDirection(args.direction)
        log.debug('evaluating auction', auction=auction, direction=direction.value, now=now)
        amount = current_amount(auction, now, direction, strict=not args.no_strict)
    except SwapVmError as e:
        exit_with_error(str(e))

    print(amount)


def main():
    parser = create_parser()
    args = parser.parse_args()
    execute(args)
