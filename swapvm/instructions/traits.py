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

from dataclasses import dataclass

from swapvm.coders import ArgField, ArgsCoder, TraitWordArgType
from swapvm.instructions.opcode import Opcode, OpcodeId
from swapvm.traits import MakerTraits, TakerTraits


@dataclass(frozen=True, slots=True)
class MakerTraitsArgs:
    traits: MakerTraits


@dataclass(frozen=True, slots=True)
class TakerTraitsArgs:
    traits: TakerTraits


MAKER_TRAITS_ARGS_CODER = ArgsCoder(MakerTraitsArgs, (ArgField('traits', TraitWordArgType(MakerTraits)),))
TAKER_TRAITS_ARGS_CODER = ArgsCoder(TakerTraitsArgs, (ArgField('traits', TraitWordArgType(TakerTraits)),))

check_maker_traits = Opcode(OpcodeId.CHECK_MAKER_TRAITS, MAKER_TRAITS_ARGS_CODER)
check_taker_traits = Opcode(OpcodeId.CHECK_TAKER_TRAITS, TAKER_TRAITS_ARGS_CODER)
