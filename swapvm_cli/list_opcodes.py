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
    parser.add_argument('--json', action='store_true', help='Print the table as JSON')
    return parser


def execute(args: Namespace) -> None:
    from swapvm_cli.util import registry_from_args

    registry = registry_from_args(args)
    if args.json:
        table = [
            {
                'discriminator': discriminator,
                'opcode': opcode.id.value,
                'args': opcode.coder.args_class.__name__,
                'length': opcode.coder.fixed_length,
            }
            for discriminator, opcode in enumerate(registry.opcodes())
        ]
        print(json.dumps(table, indent=2))
        return

    print(f'Opcode set: {registry.name}')
    width = max((len(opcode.id.value) for opcode in registry), default=0)
    for discriminator, opcode in enumerate(registry.opcodes()):
        print(f'  0x{discriminator:02x}  {opcode.id.value:<{width}}  {opcode.coder.args_class.__name__}')


def main():
    parser = create_parser()
    args = parser.parse_args()
    execute(args)
