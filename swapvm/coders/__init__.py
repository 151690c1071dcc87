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

from swapvm.coders.address_arg_type import ADDRESS, AddressArgType
from swapvm.coders.arg_type import ArgType
from swapvm.coders.args_coder import ArgField, ArgsCoder
from swapvm.coders.array_arg_type import ArrayArgType
from swapvm.coders.bool_arg_type import BOOL, BoolArgType
from swapvm.coders.sized_int_arg_type import UINT16, UINT32, UINT40, UINT64, UINT256, IntArgType, UintArgType
from swapvm.coders.trait_word_arg_type import TraitWordArgType

__all__ = [
    'ADDRESS',
    'BOOL',
    'UINT16',
    'UINT32',
    'UINT40',
    'UINT64',
    'UINT256',
    'AddressArgType',
    'ArgField',
    'ArgType',
    'ArgsCoder',
    'ArrayArgType',
    'BoolArgType',
    'IntArgType',
    'TraitWordArgType',
    'UintArgType',
]
