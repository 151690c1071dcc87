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
A program is the plain concatenation of encoded instructions, there is no program header. The `pc` of an instruction
is its byte offset in the program, which is what jump instructions refer to.
"""

import json
from typing import Any, Iterable, Optional

from typing_extensions import Self

from swapvm.exception import DecodeError, ValidationError
from swapvm.instructions.opcode import DecodedInstruction, OpcodeId
from swapvm.registry import INSTRUCTION_HEADER_LENGTH, OpcodeRegistry, get_default_registry
from swapvm.serialization import Deserializer, Serializer


class ProgramBuilder:
    """ Accumulates instructions and produces the program bytes.

    Each instruction is validated and encoded as soon as it's added, so a bad instruction fails at the `add` call
    that introduced it.
    """

    def __init__(self, registry: Optional[OpcodeRegistry] = None) -> None:
        self.registry = registry if registry is not None else get_default_registry()
        self._serializer = Serializer.build_bytes_serializer()
        self._instructions: list[DecodedInstruction] = []

    def add(self, identity: OpcodeId, args: Any) -> Self:
        instruction = self.registry.encode_instruction(identity, args)
        self._serializer.write_bytes(instruction)
        self._instructions.append(DecodedInstruction(identity, args))
        return self

    def extend(self, instructions: Iterable[DecodedInstruction]) -> Self:
        for instruction in instructions:
            self.add(instruction.opcode, instruction.args)
        return self

    @property
    def pc(self) -> int:
        """Byte offset where the next instruction will be placed, used as the target of jumps."""
        return self._serializer.cur_pos()

    def instructions(self) -> list[DecodedInstruction]:
        return list(self._instructions)

    def build(self, *, max_length: Optional[int] = None) -> bytes:
        """`max_length` defaults to the MAX_PROGRAM_LENGTH setting, longer programs raise ValidationError."""
        if max_length is None:
            from swapvm.conf.get_settings import get_global_settings
            max_length = get_global_settings().MAX_PROGRAM_LENGTH
        if self.pc > max_length:
            raise ValidationError(f'program has {self.pc} bytes, max is {max_length}')
        return bytes(self._serializer.finalize())

    def __len__(self) -> int:
        return len(self._instructions)


def decode_program(
    data: bytes,
    registry: Optional[OpcodeRegistry] = None,
    *,
    max_length: Optional[int] = None,
) -> list[DecodedInstruction]:
    """ Decode every instruction of a program.

    Raises DecodeError if the program is longer than `max_length` (by default the MAX_PROGRAM_LENGTH setting) or if
    any instruction is truncated or malformed.
    """
    if registry is None:
        registry = get_default_registry()
    if max_length is None:
        from swapvm.conf.get_settings import get_global_settings
        max_length = get_global_settings().MAX_PROGRAM_LENGTH
    if len(data) > max_length:
        raise DecodeError(f'program has {len(data)} bytes, max is {max_length}')

    deserializer = Deserializer.build_bytes_deserializer(data)
    instructions: list[DecodedInstruction] = []
    while not deserializer.is_empty():
        pc = len(data) - deserializer.remaining()
        try:
            instructions.append(registry.deserialize_instruction(deserializer))
        except DecodeError as e:
            raise DecodeError(f'pc={pc}: {e}') from e
    return instructions


def format_program(instructions: Iterable[DecodedInstruction], registry: Optional[OpcodeRegistry] = None) -> str:
    """Disassemble instructions into one `pc opcode args` line each."""
    if registry is None:
        registry = get_default_registry()
    lines: list[str] = []
    pc = 0
    for instruction in instructions:
        coder = registry.resolve(instruction.opcode)
        args_json = json.dumps(coder.args_to_json(instruction.args))
        lines.append(f'{pc:5d} {instruction.opcode} {args_json}')
        pc += INSTRUCTION_HEADER_LENGTH + len(coder.encode(instruction.args))
    return '\n'.join(lines)
