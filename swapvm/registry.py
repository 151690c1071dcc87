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
The opcode registry assigns each instruction the discriminator byte that selects it on-chain and frames instructions
as `[discriminator: uint8][payload length: uint8][payload]`.

Discriminators are the registration order, so a registry built from an `OpcodeSet` reproduces the dispatch table of
the contract that uses that set.
"""

import threading
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Union

from structlog import get_logger

from swapvm.coders.args_coder import ArgsCoder
from swapvm.exception import (
    DecodeError,
    DuplicateOpcodeError,
    RegistryFrozenError,
    UnknownOpcodeError,
    ValidationError,
)
from swapvm.instructions.opcode import DecodedInstruction, Opcode, OpcodeId
from swapvm.instructions.opcode_sets import OpcodeSet
from swapvm.serialization import Deserializer, SerializationError, Serializer
from swapvm.serialization.encoding.int import decode_uint, encode_uint

logger = get_logger()

DISCRIMINATOR_BITS = 8
PAYLOAD_LENGTH_BITS = 8
MAX_OPCODES = 1 << DISCRIMINATOR_BITS
MAX_PAYLOAD_LENGTH = (1 << PAYLOAD_LENGTH_BITS) - 1
INSTRUCTION_HEADER_LENGTH = (DISCRIMINATOR_BITS + PAYLOAD_LENGTH_BITS) // 8


class OpcodeRegistry:
    """ Maps opcode identities to discriminators and argument coders.

    Registration is serialized by a lock and publishes fresh immutable tables, lookups never lock and always see
    either the table before or after a registration. Once frozen the registry cannot change.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.log = logger.new(registry=name)
        self._lock = threading.Lock()
        self._frozen = False
        self._opcodes: tuple[Opcode, ...] = ()
        self._discriminators: Mapping[OpcodeId, int] = MappingProxyType({})

    def register(self, identity: OpcodeId, coder: ArgsCoder[Any]) -> int:
        """Register an opcode and return its discriminator, which is the registration order."""
        if not isinstance(identity, OpcodeId):
            raise ValidationError(f'expected an OpcodeId, got {type(identity).__name__}')
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(f'{self.name}: cannot register {identity} after freeze')
            if identity in self._discriminators:
                raise DuplicateOpcodeError(f'{self.name}: {identity} is already registered')
            discriminator = len(self._opcodes)
            if discriminator >= MAX_OPCODES:
                raise ValidationError(f'{self.name}: cannot register more than {MAX_OPCODES} opcodes')
            discriminators = dict(self._discriminators)
            discriminators[identity] = discriminator
            self._opcodes = self._opcodes + (Opcode(identity, coder),)
            self._discriminators = MappingProxyType(discriminators)
        self.log.debug('opcode registered', opcode=identity.value, discriminator=discriminator)
        return discriminator

    def register_opcode(self, opcode: Opcode) -> int:
        return self.register(opcode.id, opcode.coder)

    def freeze(self) -> None:
        with self._lock:
            if self._frozen:
                return
            self._frozen = True
        self.log.info('registry frozen', opcodes=len(self._opcodes))

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def resolve(self, identity: OpcodeId) -> ArgsCoder[Any]:
        return self._opcodes[self.discriminator_of(identity)].coder

    def discriminator_of(self, identity: OpcodeId) -> int:
        try:
            return self._discriminators[identity]
        except (KeyError, TypeError):
            raise UnknownOpcodeError(f'{self.name}: {identity} is not registered')

    def opcode_at(self, discriminator: int) -> Opcode:
        opcodes = self._opcodes
        if not 0 <= discriminator < len(opcodes):
            raise UnknownOpcodeError(f'{self.name}: unassigned discriminator {discriminator}')
        return opcodes[discriminator]

    def opcodes(self) -> tuple[Opcode, ...]:
        """Registered opcodes, the index of each one is its discriminator."""
        return self._opcodes

    def __len__(self) -> int:
        return len(self._opcodes)

    def __contains__(self, identity: object) -> bool:
        return identity in self._discriminators

    def __iter__(self) -> Iterator[Opcode]:
        return iter(self._opcodes)

    def serialize_instruction(self, serializer: Serializer, identity: OpcodeId, args: Any) -> None:
        discriminator = self.discriminator_of(identity)
        payload = self._opcodes[discriminator].coder.encode(args)
        if len(payload) > MAX_PAYLOAD_LENGTH:
            raise ValidationError(f'{identity}: payload has {len(payload)} bytes, max is {MAX_PAYLOAD_LENGTH}')
        encode_uint(serializer, discriminator, bits=DISCRIMINATOR_BITS)
        encode_uint(serializer, len(payload), bits=PAYLOAD_LENGTH_BITS)
        serializer.write_bytes(payload)

    def encode_instruction(self, identity: OpcodeId, args: Any) -> bytes:
        serializer = Serializer.build_bytes_serializer()
        self.serialize_instruction(serializer, identity, args)
        return bytes(serializer.finalize())

    def deserialize_instruction(self, deserializer: Deserializer) -> DecodedInstruction:
        """ Read one instruction from a stream, leaving the deserializer positioned on the next one.

        Raises DecodeError for truncated or malformed data and UnknownOpcodeError for unassigned discriminators.
        """
        if deserializer.remaining() < INSTRUCTION_HEADER_LENGTH:
            raise DecodeError('not enough bytes for the instruction header')
        try:
            discriminator = decode_uint(deserializer, bits=DISCRIMINATOR_BITS)
            length = decode_uint(deserializer, bits=PAYLOAD_LENGTH_BITS)
        except SerializationError as e:
            raise DecodeError(str(e)) from e
        opcode = self.opcode_at(discriminator)
        if deserializer.remaining() < length:
            raise DecodeError(
                f'{opcode.id}: payload length is {length} but only {deserializer.remaining()} bytes remain'
            )
        payload = bytes(deserializer.read_bytes(length))
        return DecodedInstruction(opcode.id, opcode.coder.decode(payload))

    def decode_instruction(self, data: bytes) -> DecodedInstruction:
        """Decode a single instruction, `data` must hold exactly one instruction."""
        deserializer = Deserializer.build_bytes_deserializer(data)
        instruction = self.deserialize_instruction(deserializer)
        if not deserializer.is_empty():
            raise DecodeError(f'{instruction.opcode}: {deserializer.remaining()} trailing bytes after the payload')
        return instruction

    def __repr__(self) -> str:
        return f'OpcodeRegistry({self.name!r}, opcodes={len(self._opcodes)}, frozen={self._frozen})'


def build_registry(opcode_set: Union[OpcodeSet, str]) -> OpcodeRegistry:
    """Build and freeze the registry of a published opcode table."""
    try:
        opcode_set = OpcodeSet(opcode_set)
    except ValueError:
        raise ValidationError(f'unknown opcode set: {opcode_set!r}')
    registry = OpcodeRegistry(opcode_set.value)
    for opcode in opcode_set.opcodes:
        registry.register_opcode(opcode)
    registry.freeze()
    return registry


_default_registry: Optional[OpcodeRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> OpcodeRegistry:
    """Return the registry for the opcode set in the global settings, it's built on the first call."""
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry
    from swapvm.conf.get_settings import get_global_settings
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = build_registry(get_global_settings().OPCODE_SET)
        return _default_registry
