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


class SwapVmError(Exception):
    """General error class"""


class ValidationError(SwapVmError, ValueError):
    """A structured argument is missing or malformed"""


class RangeError(ValidationError):
    """A value does not fit the declared numeric or bit-field width"""


class DecodeError(SwapVmError, ValueError):
    """A byte buffer is malformed or truncated"""


class UnknownOpcodeError(SwapVmError, LookupError):
    """Opcode identity or discriminator is not registered"""


class DuplicateOpcodeError(SwapVmError):
    """Opcode identity is already registered"""


class RegistryFrozenError(SwapVmError):
    """Registry does not accept new opcodes anymore"""


class InvalidRangeError(SwapVmError, ValueError):
    """Decay parameters are inconsistent: zero duration or amounts moving in the wrong direction"""


class LayoutError(SwapVmError, ValueError):
    """A trait layout has overlapping or out of word bit ranges"""
