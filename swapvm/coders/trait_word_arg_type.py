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

from typing import Protocol, TypeVar

from typing_extensions import Self, override

from swapvm.coders.arg_type import ArgType
from swapvm.exception import ValidationError
from swapvm.serialization import Deserializer, Serializer
from swapvm.serialization.encoding.int import decode_uint, encode_uint
from swapvm.traits.packer import TRAIT_WORD_BITS, TraitLayout, pack


class TraitWord(Protocol):
    LAYOUT: TraitLayout

    @classmethod
    def from_int(cls, word: int, *, strict: bool = False) -> Self:
        ...

    def to_int(self) -> int:
        ...


W = TypeVar('W', bound=TraitWord)


class TraitWordArgType(ArgType[W]):
    """ A packed trait word (`MakerTraits`, `TakerTraits`) encoded as a 32 bytes big-endian unsigned integer.

    In JSON the value is the mapping of field names, fields that are left out are zero.
    """

    __slots__ = ('_class',)
    _class: type[W]

    def __init__(self, class_: type[W]) -> None:
        self._class = class_

    @property
    @override
    def fixed_size(self) -> int:
        return TRAIT_WORD_BITS // 8

    @override
    def _check_value(self, value: W, /) -> None:
        if not isinstance(value, self._class):
            raise ValidationError(f'expected {self._class.__name__} instance')

    @override
    def _serialize(self, serializer: Serializer, value: W, /) -> None:
        encode_uint(serializer, value.to_int(), bits=TRAIT_WORD_BITS)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> W:
        # bits outside the layout could not be re-encoded
        return self._class.from_int(decode_uint(deserializer, bits=TRAIT_WORD_BITS), strict=True)

    @override
    def _json_to_value(self, json_value: ArgType.Json, /) -> W:
        if not isinstance(json_value, dict):
            raise ValidationError('expected dict')
        return self._class.from_int(pack(json_value, self._class.LAYOUT))

    @override
    def _value_to_json(self, value: W, /) -> ArgType.Json:
        fields = self._class.LAYOUT.field_names()
        return {name: getattr(value, name) for name in fields}

    def __repr__(self) -> str:
        return f'TraitWordArgType({self._class.__name__})'
