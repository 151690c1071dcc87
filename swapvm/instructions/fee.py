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

from swapvm.coders import UINT32, ArgField, ArgsCoder
from swapvm.exception import RangeError
from swapvm.instructions.opcode import Opcode, OpcodeId

FEE_BASE = 1_000_000_000


@dataclass(frozen=True, slots=True)
class FlatFeeArgs:
    """ A fee expressed in units of 1e-9 of the amount, `FEE_BASE` is 100%."""
    fee: int

    @property
    def percent(self) -> float:
        return self.fee * 100 / FEE_BASE


def _check_fee(args: FlatFeeArgs) -> None:
    if args.fee > FEE_BASE:
        raise RangeError(f'fee {args.fee} is above {FEE_BASE}')


FLAT_FEE_ARGS_CODER = ArgsCoder(FlatFeeArgs, (ArgField('fee', UINT32),), check=_check_fee)

flat_fee_amount_in_xd = Opcode(OpcodeId.FLAT_FEE_AMOUNT_IN_XD, FLAT_FEE_ARGS_CODER)
flat_fee_amount_out_xd = Opcode(OpcodeId.FLAT_FEE_AMOUNT_OUT_XD, FLAT_FEE_ARGS_CODER)
