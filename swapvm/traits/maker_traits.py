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

from swapvm.exception import ValidationError
from swapvm.traits.packer import TRAIT_WORD_BITS, BitField, TraitLayout, pack, unpack, unpack_strict
from swapvm.utils.fixed_int import uint_from_bytes, uint_to_bytes

ALLOWED_SENDER_BITS = 80

# Published layout, bits can only be appended, never moved.
MAKER_TRAITS_LAYOUT = TraitLayout('MakerTraits', [
    BitField.uint('allowed_sender', 0, ALLOWED_SENDER_BITS),
    BitField.uint('expiration', 80, 40),
    BitField.uint('nonce_or_epoch', 120, 40),
    BitField.uint('series', 160, 40),
    BitField.flag('unwrap_weth', 247),
    BitField.flag('use_permit2', 248),
    BitField.flag('has_extension', 249),
    BitField.flag('need_epoch_check', 250),
    BitField.flag('post_interaction', 251),
    BitField.flag('pre_interaction', 252),
    BitField.flag('allow_multiple_fills', 254),
    BitField.flag('no_partial_fills', 255),
])


@dataclass(frozen=True, slots=True)
class MakerTraits:
    """ Order properties chosen by the maker, packed in a single 256-bit word.

    The low 80 bits of `allowed_sender` are the low 80 bits of the only address allowed to fill the order, zero means
    anyone can fill it. An `expiration` of zero means the order never expires.
    """

    allowed_sender: int = 0
    expiration: int = 0
    nonce_or_epoch: int = 0
    series: int = 0
    unwrap_weth: bool = False
    use_permit2: bool = False
    has_extension: bool = False
    need_epoch_check: bool = False
    post_interaction: bool = False
    pre_interaction: bool = False
    allow_multiple_fills: bool = False
    no_partial_fills: bool = False

    LAYOUT = MAKER_TRAITS_LAYOUT

    def __post_init__(self) -> None:
        # fail early on values that don't fit their bit range
        pack(asdict(self), MAKER_TRAITS_LAYOUT)

    @classmethod
    def default(cls) -> Self:
        """Traits of a plain order that can be partially filled multiple times."""
        return cls(allow_multiple_fills=True)

    @classmethod
    def from_int(cls, word: int, *, strict: bool = False) -> Self:
        """With `strict` set, a word with bits outside the layout raises RangeError instead of losing them."""
        fields = (unpack_strict if strict else unpack)(word, MAKER_TRAITS_LAYOUT)
        return cls(**fields)  # type: ignore[arg-type]

    def to_int(self) -> int:
        return pack(asdict(self), MAKER_TRAITS_LAYOUT)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        return cls.from_int(uint_from_bytes(data, TRAIT_WORD_BITS))

    def to_bytes(self) -> bytes:
        return uint_to_bytes(self.to_int(), TRAIT_WORD_BITS)

    @property
    def allow_partial_fills(self) -> bool:
        return not self.no_partial_fills

    def is_expired(self, now: int) -> bool:
        return self.expiration != 0 and self.expiration < now

    def is_allowed_sender(self, sender: bytes) -> bool:
        if len(sender) != 20:
            raise ValidationError('sender must be a 20 bytes address')
        if self.allowed_sender == 0:
            return True
        return int.from_bytes(sender[-ALLOWED_SENDER_BITS // 8:], byteorder='big') == self.allowed_sender

    @staticmethod
    def allowed_sender_from_address(address: bytes) -> int:
        """Compute the `allowed_sender` value for the given 20 bytes address."""
        if len(address) != 20:
            raise ValidationError('address must have 20 bytes')
        return int.from_bytes(address[-ALLOWED_SENDER_BITS // 8:], byteorder='big')
