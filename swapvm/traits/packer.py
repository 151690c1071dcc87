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
Packing of flags and small integers into a single fixed-width trait word.

A `TraitLayout` is the only description of where each field lives, both `pack` and `unpack` read the same table:

>>> layout = TraitLayout('Example', [
...     BitField.uint('expiration', 0, 40),
...     BitField.flag('use_permit2', 254),
...     BitField.flag('no_partial_fills', 255),
... ])
>>> word = pack({'expiration': 1700000000, 'no_partial_fills': True}, layout)
>>> hex(word)
'0x800000000000000000000000000000000000000000000000000000006553f100'
>>> unpack(word, layout)
{'expiration': 1700000000, 'use_permit2': False, 'no_partial_fills': True}

Values that don't fit their field are rejected instead of being masked:

>>> try:
...     pack({'expiration': 1 << 40}, layout)
... except RangeError as e:
...     print(e)
Example.expiration: 1099511627776 does not fit in 40 bits
"""

from collections.abc import Iterable, Mapping
from typing import NamedTuple, TypeAlias

from swapvm.exception import LayoutError, RangeError, ValidationError

TRAIT_WORD_BITS = 256

FieldValue: TypeAlias = int | bool


class BitField(NamedTuple):
    name: str
    offset: int
    width: int
    is_flag: bool = False

    @classmethod
    def flag(cls, name: str, offset: int) -> 'BitField':
        return cls(name, offset, 1, True)

    @classmethod
    def uint(cls, name: str, offset: int, width: int) -> 'BitField':
        return cls(name, offset, width, False)

    @property
    def mask(self) -> int:
        return ((1 << self.width) - 1) << self.offset

    @property
    def end(self) -> int:
        """First bit after this field."""
        return self.offset + self.width


class TraitLayout:
    """ Ordered, validated table of bit fields for one trait kind.

    Published layouts are part of the wire format, fields must never be moved once released, new fields can only use
    bits that were unused before.
    """

    __slots__ = ('name', 'word_bits', '_fields', '_by_name', '_used_mask')

    def __init__(self, name: str, fields: Iterable[BitField], *, word_bits: int = TRAIT_WORD_BITS) -> None:
        self.name = name
        self.word_bits = word_bits
        self._fields: tuple[BitField, ...] = tuple(fields)
        self._by_name: dict[str, BitField] = {}
        used_mask = 0
        for field in self._fields:
            if field.name in self._by_name:
                raise LayoutError(f'{name}: duplicated field {field.name!r}')
            if field.width <= 0 or field.offset < 0:
                raise LayoutError(f'{name}.{field.name}: invalid range')
            if field.is_flag and field.width != 1:
                raise LayoutError(f'{name}.{field.name}: flags must be 1 bit wide')
            if field.end > word_bits:
                raise LayoutError(f'{name}.{field.name}: bits {field.offset}..{field.end - 1} exceed {word_bits} bits')
            if used_mask & field.mask:
                raise LayoutError(f'{name}.{field.name}: overlaps another field')
            used_mask |= field.mask
            self._by_name[field.name] = field
        self._used_mask = used_mask

    @property
    def fields(self) -> tuple[BitField, ...]:
        return self._fields

    @property
    def used_mask(self) -> int:
        return self._used_mask

    def field_names(self) -> tuple[str, ...]:
        return tuple(field.name for field in self._fields)

    def __getitem__(self, name: str) -> BitField:
        return self._by_name[name]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self):
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f'TraitLayout({self.name!r}, {list(self._fields)!r}, word_bits={self.word_bits})'


def pack(fields: Mapping[str, FieldValue], layout: TraitLayout) -> int:
    """ Build a trait word out of the given field values.

    Missing fields are packed as zero, unknown field names raise ValidationError and values that don't fit their
    field raise RangeError.
    """
    for name in fields:
        if name not in layout:
            raise ValidationError(f'{layout.name}: unknown field {name!r}')
    word = 0
    for field in layout:
        value = fields.get(field.name, 0)
        word |= _field_to_int(field, value, layout) << field.offset
    return word


def unpack(word: int, layout: TraitLayout) -> dict[str, FieldValue]:
    """ Split a trait word into its fields, in layout order.

    Bits that are not covered by any field are ignored, use `unpack_strict` to reject them.
    """
    _check_word(word, layout)
    result: dict[str, FieldValue] = {}
    for field in layout:
        raw = (word >> field.offset) & ((1 << field.width) - 1)
        result[field.name] = bool(raw) if field.is_flag else raw
    return result


def unpack_strict(word: int, layout: TraitLayout) -> dict[str, FieldValue]:
    """ Same as `unpack` but raise RangeError if any bit outside the layout's fields is set."""
    _check_word(word, layout)
    stray = word & ~layout.used_mask
    if stray:
        raise RangeError(f'{layout.name}: unassigned bits are set: {hex(stray)}')
    return unpack(word, layout)


def _field_to_int(field: BitField, value: FieldValue, layout: TraitLayout) -> int:
    if field.is_flag:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int) and value in (0, 1):
            return value
        raise RangeError(f'{layout.name}.{field.name}: expected a boolean, got {value!r}')
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f'{layout.name}.{field.name}: expected an integer, got {type(value).__name__}')
    if value < 0 or value >> field.width:
        raise RangeError(f'{layout.name}.{field.name}: {value} does not fit in {field.width} bits')
    return value


def _check_word(word: int, layout: TraitLayout) -> None:
    if isinstance(word, bool) or not isinstance(word, int):
        raise ValidationError(f'{layout.name}: expected an integer word, got {type(word).__name__}')
    if word < 0 or word >> layout.word_bits:
        raise RangeError(f'{layout.name}: word does not fit in {layout.word_bits} bits')
