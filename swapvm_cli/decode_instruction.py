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

import json
from argparse import ArgumentParser, Namespace


def create_parser() -> ArgumentParser:
    from swapvm_cli.util import add_registry_args, create_parser
    parser = create_parser()
    add_registry_args(parser)
    parser.add_argument('data', type=str, help='Encoded instruction in hex')
    parser.add_argument('--json', action='store_true', help='Print the instruction as JSON')
    return parser


def execute(args: Namespace) -> None:
    from swapvm.exception import SwapVmError
    from swapvm_cli.util import exit_with_error, parse_hex, registry_from_args

    registry = registry_from_args(args)
    data = parse_hex(args.data)
    try:
        instruction = registry.decode_instruction(data)
    except SwapVmError as e:
        exit_with_error(str(e))

    args_json = registry.resolve(instruction.opcode).args_to_json(instruction.args)
    if args.json:
        print(json.dumps({
            'discriminator': registry.discriminator_of(instruction.opcode),
            'opcode': instruction.opcode.value,
            'args': args_json,
        }, indent=2))
    else:
        print(f'{instruction.opcode} {json.dumps(args_json)}')


def main():
    parser = create_parser()
    args = parser.parse_args()
    execute(args)
