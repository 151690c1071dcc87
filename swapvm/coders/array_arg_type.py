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

from typing import TypeVar

from typing_extensions import override

from swapvm.coders.arg_type import ArgType
from swapvm.exception import ValidationError
from swapvm.serialization import Deserializer, Serializer
from swapvm.serialization.compound_encoding.collection import MAX_ARRAY_COUNT, decode_array, encode_array

T = TypeVar('T')


class ArrayArgType(ArgType[tuple[T, ...]]):
    """ A homogeneous array prefixed by a uint16 element count.

    Values are always tuples so decoded args stay immutable and comparable.
    """

    __slots__ = ('_inner',)
    _inner: ArgType[T]

    def __init__(self, inner: ArgType[T]) -> None:
        self._inner = inner

    @property
    def inner(self) -> ArgType[T]:
        return self._inner

    @override
    def _check_value(self, value: tuple[T, ...], /) -> None:
        if not isinstance(value, tuple):
            raise ValidationError('expected tuple')
        if len(value) > MAX_ARRAY_COUNT:
            raise ValidationError(f'array has more than {MAX_ARRAY_COUNT} elements')
        for item in value:
            self._inner.check_value(item)

    @override
    def _serialize(self, serializer: Serializer, value: tuple[T, ...], /) -> None:
        encode_array(serializer, value, self._inner.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> tuple[T, ...]:
        return decode_array(deserializer, self._inner.deserialize, tuple)

    @override
    def _json_to_value(self, json_value: ArgType.Json, /) -> tuple[T, ...]:
        if not isinstance(json_value, list):
            raise ValidationError('expected list')
        return tuple(self._inner.json_to_value(item) for item in json_value)

    @override
    def _value_to_json(self, value: tuple[T, ...], /) -> ArgType.Json:
        return [self._inner.value_to_json(item) for item in value]

    def __repr__(self) -> str:
        return f'ArrayArgType({self._inner!r})'
