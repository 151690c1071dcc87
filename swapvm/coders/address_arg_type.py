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

from typing_extensions import override

from swapvm.coders.arg_type import ArgType
from swapvm.exception import ValidationError
from swapvm.serialization import Deserializer, Serializer
from swapvm.serialization.encoding.address import ADDRESS_LENGTH, decode_address, encode_address
from swapvm.types import Address


class AddressArgType(ArgType[Address]):
    """ A 20 bytes address, represented in JSON as a 0x-prefixed hex string."""

    __slots__ = ()

    @property
    @override
    def fixed_size(self) -> int:
        return ADDRESS_LENGTH

    @override
    def _check_value(self, value: Address, /) -> None:
        if not isinstance(value, bytes):
            raise ValidationError('expected bytes')
        if len(value) != ADDRESS_LENGTH:
            raise ValidationError(f'address must have {ADDRESS_LENGTH} bytes, got {len(value)}')

    @override
    def _serialize(self, serializer: Serializer, value: Address, /) -> None:
        encode_address(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Address:
        return Address(decode_address(deserializer))

    @override
    def _json_to_value(self, json_value: ArgType.Json, /) -> Address:
        if not isinstance(json_value, str):
            raise ValidationError('expected hex string')
        raw = json_value[2:] if json_value.lower().startswith('0x') else json_value
        try:
            return Address(bytes.fromhex(raw))
        except ValueError:
            raise ValidationError(f'invalid address: {json_value!r}')

    @override
    def _value_to_json(self, value: Address, /) -> ArgType.Json:
        return '0x' + value.hex()


ADDRESS = AddressArgType()
