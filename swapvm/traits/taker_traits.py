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

from dataclasses import asdict, dataclass

from typing_extensions import Self

from swapvm.traits.packer import TRAIT_WORD_BITS, BitField, TraitLayout, pack, unpack, unpack_strict
from swapvm.utils.fixed_int import uint_from_bytes, uint_to_bytes

# Published layout, bits can only be appended, never moved.
TAKER_TRAITS_LAYOUT = TraitLayout('TakerTraits', [
    BitField.uint('threshold', 0, 185),
    BitField.uint('args_interaction_length', 200, 24),
    BitField.uint('args_extension_length', 224, 24),
    BitField.flag('args_has_target', 251),
    BitField.flag('use_permit2', 252),
    BitField.flag('skip_order_permit', 253),
    BitField.flag('unwrap_weth', 254),
    BitField.flag('is_making_amount', 255),
])


@dataclass(frozen=True, slots=True)
class TakerTraits:
    """ Fill options chosen by the taker.

    `threshold` is the worst acceptable amount on the other side of the fill (max amount paid when the taker sets the
    making amount, min amount received otherwise), zero disables the check.
    """

    threshold: int = 0
    args_interaction_length: int = 0
    args_extension_length: int = 0
    args_has_target: bool = False
    use_permit2: bool = False
    skip_order_permit: bool = False
    unwrap_weth: bool = False
    is_making_amount: bool = False

    LAYOUT = TAKER_TRAITS_LAYOUT

    def __post_init__(self) -> None:
        # fail early on values that don't fit their bit range
        pack(asdict(self), TAKER_TRAITS_LAYOUT)

    @classmethod
    def default(cls) -> Self:
        return cls()

    @classmethod
    def from_int(cls, word: int, *, strict: bool = False) -> Self:
        """With `strict` set, a word with bits outside the layout raises RangeError instead of losing them."""
        fields = (unpack_strict if strict else unpack)(word, TAKER_TRAITS_LAYOUT)
        return cls(**fields)  # type: ignore[arg-type]

    def to_int(self) -> int:
        return pack(asdict(self), TAKER_TRAITS_LAYOUT)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        return cls.from_int(uint_from_bytes(data, TRAIT_WORD_BITS))

    def to_bytes(self) -> bytes:
        return uint_to_bytes(self.to_int(), TRAIT_WORD_BITS)
