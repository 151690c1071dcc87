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
An `ArgsCoder` turns one instruction's argument dataclass into the payload bytes read by the on-chain instruction, and
back. The payload is the concatenation of every field in schema order, with no padding and no field tags:

>>> from dataclasses import dataclass
>>> from swapvm.coders.sized_int_arg_type import UINT16, UINT40
>>> @dataclass(frozen=True)
... class ExampleArgs:
...     deadline: int
...     next_pc: int
>>> coder = ArgsCoder(ExampleArgs, (ArgField('deadline', UINT40), ArgField('next_pc', UINT16)))
>>> coder.fixed_length
7
>>> coder.encode(ExampleArgs(deadline=1700000000, next_pc=3)).hex()
'006553f1000003'
>>> coder.decode(bytes.fromhex('006553f1000003'))
ExampleArgs(deadline=1700000000, next_pc=3)
>>> try:
...     coder.decode(bytes.fromhex('006553f10000'))
... except DecodeError as e:
...     print(e)
ExampleArgs: not enough bytes to read
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any, Callable, Generic, Mapping, NamedTuple, TypeVar

from swapvm.coders.arg_type import ArgType
from swapvm.exception import DecodeError, SwapVmError, ValidationError
from swapvm.serialization import Deserializer, SerializationError, Serializer

A = TypeVar('A')


class ArgField(NamedTuple):
    name: str
    arg_type: ArgType[Any]


class ArgsCoder(Generic[A]):
    """ Stateless encoder/decoder for the arguments of one instruction shape.

    The `check` hook validates relations between fields (for example matching array lengths), it is called before
    encoding and after decoding, it must raise ValidationError when the args are not acceptable.
    """

    __slots__ = ('_class', '_schema', '_check', '_fixed_length')

    def __init__(
        self,
        args_class: type[A],
        schema: tuple[ArgField, ...],
        *,
        check: Callable[[A], None] | None = None,
    ) -> None:
        if not is_dataclass(args_class):
            raise TypeError('expected a dataclass')
        class_fields = [field.name for field in fields(args_class)]
        schema_fields = [arg_field.name for arg_field in schema]
        # XXX: the schema defines the wire order, it must cover exactly the dataclass fields
        if sorted(class_fields) != sorted(schema_fields) or len(set(schema_fields)) != len(schema_fields):
            raise TypeError(f'schema {schema_fields} does not match {args_class.__name__} fields {class_fields}')
        self._class = args_class
        self._schema = tuple(schema)
        self._check = check
        self._fixed_length = self._calc_fixed_length(self._schema)

    @staticmethod
    def _calc_fixed_length(schema: tuple[ArgField, ...]) -> int | None:
        total = 0
        for arg_field in schema:
            size = arg_field.arg_type.fixed_size
            if size is None:
                return None
            total += size
        return total

    @property
    def args_class(self) -> type[A]:
        return self._class

    @property
    def schema(self) -> tuple[ArgField, ...]:
        return self._schema

    @property
    def fixed_length(self) -> int | None:
        """ Length of every payload, None when the schema has variable-length fields."""
        return self._fixed_length

    def check_args(self, args: A) -> None:
        if not isinstance(args, self._class):
            raise ValidationError(f'expected {self._class.__name__}, got {type(args).__name__}')
        for arg_field in self._schema:
            value = getattr(args, arg_field.name, None)
            if value is None:
                raise ValidationError(f'{self._class.__name__}: missing argument {arg_field.name!r}')
            arg_field.arg_type.check_value(value)
        if self._check is not None:
            self._check(args)

    def serialize(self, serializer: Serializer, args: A) -> None:
        self.check_args(args)
        for arg_field in self._schema:
            arg_field.arg_type.serialize(serializer, getattr(args, arg_field.name))

    def deserialize(self, deserializer: Deserializer) -> A:
        kwargs: dict[str, Any] = {}
        for arg_field in self._schema:
            kwargs[arg_field.name] = arg_field.arg_type.deserialize(deserializer)
        args = self._class(**kwargs)
        if self._check is not None:
            self._check(args)
        return args

    def encode(self, args: A) -> bytes:
        """ Encode the args as the instruction payload, raises ValidationError for bad args."""
        serializer = Serializer.build_bytes_serializer()
        try:
            self.serialize(serializer, args)
        except SerializationError as e:
            raise ValidationError(f'{self._class.__name__}: {e}') from e
        return bytes(serializer.finalize())

    def decode(self, data: bytes) -> A:
        """ Decode an instruction payload, all of `data` must be consumed, raises DecodeError for bad data."""
        if self._fixed_length is not None and len(data) < self._fixed_length:
            raise DecodeError(f'{self._class.__name__}: not enough bytes to read')
        deserializer = Deserializer.build_bytes_deserializer(data)
        try:
            args = self.deserialize(deserializer)
            deserializer.finalize()
        except DecodeError:
            raise
        except (SerializationError, SwapVmError) as e:
            # decoded values that fail a range or relation check are bad data, not bad arguments
            raise DecodeError(f'{self._class.__name__}: {e}') from e
        return args

    def args_to_json(self, args: A) -> dict[str, ArgType.Json]:
        self.check_args(args)
        return {
            arg_field.name: arg_field.arg_type.value_to_json(getattr(args, arg_field.name))
            for arg_field in self._schema
        }

    def args_from_json(self, json_value: Mapping[str, ArgType.Json]) -> A:
        if not isinstance(json_value, Mapping):
            raise ValidationError('expected a JSON object')
        unknown = set(json_value) - {arg_field.name for arg_field in self._schema}
        if unknown:
            raise ValidationError(f'{self._class.__name__}: unknown arguments {sorted(unknown)}')
        kwargs: dict[str, Any] = {}
        for arg_field in self._schema:
            if arg_field.name not in json_value:
                raise ValidationError(f'{self._class.__name__}: missing argument {arg_field.name!r}')
            kwargs[arg_field.name] = arg_field.arg_type.json_to_value(json_value[arg_field.name])
        args = self._class(**kwargs)
        self.check_args(args)
        return args

    def __repr__(self) -> str:
        return f'ArgsCoder({self._class.__name__})'
