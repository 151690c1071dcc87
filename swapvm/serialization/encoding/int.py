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
This module implements encoding of integers with a fixed bit width, the width and signedness are parametrized.

The encoding format is the standard big-endian format used by the on-chain interpreter. A value of `bits` width takes
`ceil(bits / 8)` bytes, so a 40-bit timestamp takes 5 bytes and a 256-bit amount takes 32 bytes. Python integers have
arbitrary precision, so every range check is explicit and a value is never truncated.

>>> se = Serializer.build_bytes_serializer()
>>> encode_uint(se, 255, bits=8)  # writes ff
>>> encode_uint(se, 1234, bits=16)  # writes 04d2
>>> encode_int(se, -1234, bits=16)  # writes fb2e
>>> encode_uint(se, 1, bits=40)  # writes 0000000001
>>> bytes(se.finalize()).hex()
'ff04d2fb2e0000000001'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ff04d2fb2e0000000001'))
>>> decode_uint(de, bits=8)  # reads ff
255
>>> decode_uint(de, bits=16)  # reads 04d2
1234
>>> decode_int(de, bits=16)  # reads fb2e
-1234
>>> decode_uint(de, bits=40)  # reads 0000000001
1

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_uint(se, 256, bits=8)
... except RangeError as e:
...     print(*e.args)
256 does not fit in uint8
"""

from swapvm.exception import RangeError
from swapvm.serialization import Deserializer, OutOfDataError, Serializer


def byte_length(bits: int) -> int:
    """ Number of bytes needed to hold `bits` bits.

    >>> byte_length(1), byte_length(8), byte_length(40), byte_length(185), byte_length(256)
    (1, 1, 5, 24, 32)
    """
    if not isinstance(bits, int) or isinstance(bits, bool) or bits <= 0:
        raise ValueError(f'invalid bit width: {bits!r}')
    return (bits + 7) // 8


def uint_bounds(bits: int) -> tuple[int, int]:
    byte_length(bits)
    return 0, (1 << bits) - 1


def int_bounds(bits: int) -> tuple[int, int]:
    byte_length(bits)
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def check_uint(value: int, *, bits: int) -> None:
    """ Raise RangeError if `value` is not an unsigned integer that fits in `bits` bits."""
    lower_bound, upper_bound = uint_bounds(bits)
    if not isinstance(value, int) or isinstance(value, bool):
        raise RangeError(f'expected integer, got {type(value).__name__}')
    if value < lower_bound or value > upper_bound:
        raise RangeError(f'{value} does not fit in uint{bits}')


def check_int(value: int, *, bits: int) -> None:
    """ Raise RangeError if `value` is not a signed integer that fits in `bits` bits."""
    lower_bound, upper_bound = int_bounds(bits)
    if not isinstance(value, int) or isinstance(value, bool):
        raise RangeError(f'expected integer, got {type(value).__name__}')
    if value < lower_bound or value > upper_bound:
        raise RangeError(f'{value} does not fit in int{bits}')


def encode_uint(serializer: Serializer, value: int, *, bits: int) -> None:
    """ Encode an unsigned int using the given bit width.

    This modules's docstring has more details and examples.
    """
    check_uint(value, bits=bits)
    serializer.write_bytes(value.to_bytes(byte_length(bits), byteorder='big', signed=False))


def decode_uint(deserializer: Deserializer, *, bits: int) -> int:
    """ Decode an unsigned int using the given bit width.

    Raises OutOfDataError when there aren't enough bytes and RangeError when the value uses bits above `bits`.
    """
    length = byte_length(bits)
    data = deserializer.read_bytes(length)
    if len(data) != length:
        raise OutOfDataError('not enough bytes to read')
    value = int.from_bytes(data, byteorder='big', signed=False)
    check_uint(value, bits=bits)
    return value


def encode_int(serializer: Serializer, value: int, *, bits: int) -> None:
    """ Encode a signed int using two's complement with the given bit width.

    This modules's docstring has more details and examples.
    """
    check_int(value, bits=bits)
    serializer.write_bytes(value.to_bytes(byte_length(bits), byteorder='big', signed=True))


def decode_int(deserializer: Deserializer, *, bits: int) -> int:
    """ Decode a signed int using two's complement with the given bit width.
    """
    length = byte_length(bits)
    data = deserializer.read_bytes(length)
    if len(data) != length:
        raise OutOfDataError('not enough bytes to read')
    value = int.from_bytes(data, byteorder='big', signed=True)
    check_int(value, bits=bits)
    return value
