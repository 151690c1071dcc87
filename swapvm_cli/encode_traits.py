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
    from swapvm_cli.decode_traits import TRAIT_KINDS
    from swapvm_cli.util import create_parser
    parser = create_parser()
    parser.add_argument('kind', choices=TRAIT_KINDS, help='Which trait word to build')
    parser.add_argument('fields_json', type=str, help='Field values as a JSON object, missing fields are zero')
    return parser


def execute(args: Namespace) -> None:
    from swapvm.exception import SwapVmError
    from swapvm.traits import pack
    from swapvm_cli.decode_traits import get_traits_class
    from swapvm_cli.util import check_or_exit, exit_with_error, parse_json

    traits_class = get_traits_class(args.kind)
    fields = parse_json(args.fields_json)
    check_or_exit(isinstance(fields, dict), 'fields must be a JSON object')
    try:
        word = pack(fields, traits_class.LAYOUT)
    except SwapVmError as e:
        exit_with_error(str(e))

    print(f'0x{word:064x}')


def main():
    parser = create_parser()
    args = parser.parse_args()
    execute(args)
