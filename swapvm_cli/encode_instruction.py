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


def create_parser() -> ArgumentParser:
    from swapvm_cli.util import add_registry_args, create_parser
    parser = create_parser()
    add_registry_args(parser)
    parser.add_argument('opcode', type=str, help='Opcode name, e.g. dutchAuctionBalanceIn1D')
    parser.add_argument('args_json', type=str, help='Instruction arguments as a JSON object')
    return parser


def execute(args: Namespace) -> None:
    from swapvm.exception import SwapVmError
    from swapvm.instructions.opcode import OpcodeId
    from swapvm_cli.util import exit_with_error, parse_json, registry_from_args

    registry = registry_from_args(args)
    args_json = parse_json(args.args_json)
    try:
        identity = OpcodeId.from_name(args.opcode)
        instruction_args = registry.resolve(identity).args_from_json(args_json)
        data = registry.encode_instruction(identity, instruction_args)
    except SwapVmError as e:
        exit_with_error(str(e))

    print('0x' + data.hex())


def main():
    parser = create_parser()
    args = parser.parse_args()
    execute(args)
