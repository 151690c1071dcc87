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

from swapvm.coders import ADDRESS, UINT256, ArgField, ArgsCoder
from swapvm.instructions.opcode import Opcode, OpcodeId
from swapvm.types import Address, Amount


@dataclass(frozen=True, slots=True)
class TransferArgs:
    token: Address
    recipient: Address
    amount: Amount


TRANSFER_ARGS_CODER = ArgsCoder(
    TransferArgs,
    (ArgField('token', ADDRESS), ArgField('recipient', ADDRESS), ArgField('amount', UINT256)),
)

transfer_in = Opcode(OpcodeId.TRANSFER_IN, TRANSFER_ARGS_CODER)
transfer_out = Opcode(OpcodeId.TRANSFER_OUT, TRANSFER_ARGS_CODER)
