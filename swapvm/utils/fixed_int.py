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

from swapvm.exception import RangeError
from swapvm.serialization import Deserializer, Serializer
from swapvm.serialization.encoding.int import byte_length, decode_int, decode_uint, encode_int, encode_uint


def uint_to_bytes(value: int, bits: int) -> bytes:
    """
    Receive an unsigned integer and return its big-endian bytes, using the byte-ceiling of `bits`.

    >>> uint_to_bytes(0, 8) == bytes([0x00])
    True
    >>> uint_to_bytes(1700000000, 40).hex()
    '006553f100'
    >>> try:
    ...     uint_to_bytes(-1, 8)
    ... except RangeError as e:
    ...     print(e)
    -1 does not fit in uint8
    """
    serializer = Serializer.build_bytes_serializer()
    encode_uint(serializer, value, bits=bits)
    return bytes(serializer.finalize())


def uint_from_bytes(data: bytes, bits: int) -> int:
    """
    Receive exactly `ceil(bits / 8)` big-endian bytes and return the unsigned integer.

    >>> uint_from_bytes(bytes.fromhex('006553f100'), 40)
    1700000000
    >>> try:
    ...     uint_from_bytes(bytes.fromhex('6553f100'), 40)
    ... except RangeError as e:
    ...     print(e)
    expected 5 bytes for uint40, got 4
    >>> try:
    ...     uint_from_bytes(bytes.fromhex('1000'), 12)
    ... except RangeError as e:
    ...     print(e)
    4096 does not fit in uint12
    """
    _check_length(data, bits, 'uint')
    deserializer = Deserializer.build_bytes_deserializer(data)
    value = decode_uint(deserializer, bits=bits)
    deserializer.finalize()
    return value


def int_to_bytes(value: int, bits: int) -> bytes:
    """
    Receive a signed integer and return its two's complement big-endian bytes.

    >>> int_to_bytes(-1, 16).hex()
    'ffff'
    """
    serializer = Serializer.build_bytes_serializer()
    encode_int(serializer, value, bits=bits)
    return bytes(serializer.finalize())


def int_from_bytes(data: bytes, bits: int) -> int:
    """
    Receive exactly `ceil(bits / 8)` bytes and return the signed integer.

    >>> int_from_bytes(bytes.fromhex('fb2e'), 16)
    -1234
    """
    _check_length(data, bits, 'int')
    deserializer = Deserializer.build_bytes_deserializer(data)
    value = decode_int(deserializer, bits=bits)
    deserializer.finalize()
    return value


def _check_length(data: bytes, bits: int, kind: str) -> None:
    expected = byte_length(bits)
    if len(data) != expected:
        raise RangeError(f'expected {expected} bytes for {kind}{bits}, got {len(data)}')
