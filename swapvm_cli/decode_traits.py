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
from typing import Any

TRAIT_KINDS = ('maker', 'taker')


def get_traits_class(kind: str) -> Any:
    from swapvm.traits import MakerTraits, TakerTraits
    return MakerTraits if kind == 'maker' else TakerTraits


def create_parser() -> ArgumentParser:
    from swapvm_cli.util import create_parser
    parser = create_parser()
    parser.add_argument('kind', choices=TRAIT_KINDS, help='Which trait word to decode')
    parser.add_argument('word', type=str, help='Trait word, as a hex (0x-prefixed) or decimal integer')
    parser.add_argument('--strict', action='store_true', help='Fail if bits outside of any field are set')
    return parser


def execute(args: Namespace) -> None:
    from swapvm.exception import SwapVmError
    from swapvm.traits import unpack, unpack_strict
    from swapvm_cli.util import exit_with_error

    traits_class = get_traits_class(args.kind)
    try:
        word = int(args.word, 0)
    except ValueError:
        exit_with_error(f'invalid integer: {args.word!r}')

    try:
        fields = (unpack_strict if args.strict else unpack)(word, traits_class.LAYOUT)
    except SwapVmError as e:
        exit_with_error(str(e))

    print(json.dumps(fields, indent=2))


def main():
    parser = create_parser()
    args = parser.parse_args()
    execute(args)
