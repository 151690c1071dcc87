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
Instruction codec for the SwapVM on-chain interpreter.

The main entry points are re-exported here:

- `OpcodeRegistry`, `build_registry` and `get_default_registry` to encode and decode single instructions;
- `ProgramBuilder` and `decode_program` to work with whole programs;
- `current_amount` to preview dutch-auction amounts off-chain;
- `MakerTraits` and `TakerTraits` for the packed order trait words.
"""

__version__ = '0.4.0'

from swapvm.decay import DecayDirection, current_amount  # noqa: E402
from swapvm.instructions.opcode import DecodedInstruction, Opcode, OpcodeId  # noqa: E402
from swapvm.instructions.opcode_sets import OpcodeSet  # noqa: E402
from swapvm.program import ProgramBuilder, decode_program, format_program  # noqa: E402
from swapvm.registry import OpcodeRegistry, build_registry, get_default_registry  # noqa: E402
from swapvm.traits import MakerTraits, TakerTraits  # noqa: E402

__all__ = [
    '__version__',
    'DecayDirection',
    'DecodedInstruction',
    'MakerTraits',
    'Opcode',
    'OpcodeId',
    'OpcodeRegistry',
    'OpcodeSet',
    'ProgramBuilder',
    'TakerTraits',
    'build_registry',
    'current_amount',
    'decode_program',
    'format_program',
    'get_default_registry',
]
