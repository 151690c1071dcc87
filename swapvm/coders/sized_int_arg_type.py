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

from __future__ import annotations

from typing_extensions import override

from swapvm.coders.arg_type import ArgType
from swapvm.exception import ValidationError
from swapvm.serialization import Deserializer, Serializer
from swapvm.serialization.encoding.int import (
    byte_length,
    check_int,
    check_uint,
    decode_int,
    decode_uint,
    encode_int,
    encode_uint,
)


class _SizedIntArgType(ArgType[int]):
    """ Base class for integer arguments with a fixed bit width and signedness.
    """

    __slots__ = ('_bits',)
    _bits: int

    def __init__(self, bits: int) -> None:
        byte_length(bits)
        self._bits = bits

    @property
    def bits(self) -> int:
        return self._bits

    @property
    @override
    def fixed_size(self) -> int:
        return byte_length(self._bits)

    @override
    def _json_to_value(self, json_value: ArgType.Json, /) -> int:
        # decimal and 0x-prefixed strings are accepted too
        if isinstance(json_value, str):
            try:
                return int(json_value, 0)
            except ValueError:
                raise ValidationError(f'invalid integer: {json_value!r}')
        if isinstance(json_value, bool) or not isinstance(json_value, int):
            raise ValidationError('expected int')
        return json_value

    @override
    def _value_to_json(self, value: int, /) -> ArgType.Json:
        return value

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._bits})'


class UintArgType(_SizedIntArgType):
    __slots__ = ()

    @override
    def _check_value(self, value: int, /) -> None:
        check_uint(value, bits=self._bits)

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_uint(serializer, value, bits=self._bits)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return decode_uint(deserializer, bits=self._bits)


class IntArgType(_SizedIntArgType):
    __slots__ = ()

    @override
    def _check_value(self, value: int, /) -> None:
        check_int(value, bits=self._bits)

    @override
    def _serialize(self, serializer: Serializer, value: int, /) -> None:
        encode_int(serializer, value, bits=self._bits)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> int:
        return decode_int(deserializer, bits=self._bits)


UINT16 = UintArgType(16)
UINT32 = UintArgType(32)
UINT40 = UintArgType(40)
UINT64 = UintArgType(64)
UINT256 = UintArgType(256)
