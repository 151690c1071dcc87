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

from swapvm.traits.maker_traits import MAKER_TRAITS_LAYOUT, MakerTraits
from swapvm.traits.packer import TRAIT_WORD_BITS, BitField, TraitLayout, pack, unpack, unpack_strict
from swapvm.traits.taker_traits import TAKER_TRAITS_LAYOUT, TakerTraits

__all__ = [
    'MAKER_TRAITS_LAYOUT',
    'TAKER_TRAITS_LAYOUT',
    'TRAIT_WORD_BITS',
    'BitField',
    'MakerTraits',
    'TakerTraits',
    'TraitLayout',
    'pack',
    'unpack',
    'unpack_strict',
]
