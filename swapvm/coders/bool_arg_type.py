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
from swapvm.serialization.encoding.bool import decode_bool, encode_bool


class BoolArgType(ArgType[bool]):
    __slots__ = ()

    @property
    @override
    def fixed_size(self) -> int:
        return 1

    @override
    def _check_value(self, value: bool, /) -> None:
        if not isinstance(value, bool):
            raise ValidationError('expected boolean')

    @override
    def _serialize(self, serializer: Serializer, value: bool, /) -> None:
        encode_bool(serializer, value)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> bool:
        return decode_bool(deserializer)

    @override
    def _json_to_value(self, json_value: ArgType.Json, /) -> bool:
        if not isinstance(json_value, bool):
            raise ValidationError('expected bool')
        return json_value

    @override
    def _value_to_json(self, value: bool, /) -> ArgType.Json:
        return value


BOOL = BoolArgType()
