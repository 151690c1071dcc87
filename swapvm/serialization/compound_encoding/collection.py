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

r"""
An array is any sized iterable of values with the same encoder.

Layout: [N: uint16 big-endian][value_0]...[value_N-1]

The count prefix is fixed-width, matching how the on-chain argument parsers read arrays out of calldata.

>>> from swapvm.serialization.encoding.int import decode_uint, encode_uint
>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [1, 2, 3], lambda s, v: encode_uint(s, v, bits=8))
>>> bytes(se.finalize()).hex()
'0003010203'

Breakdown of the result:

    0003: 3 elements
    01, 02, 03: each element as uint8

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0003010203'))
>>> decode_array(de, lambda d: decode_uint(d, bits=8), tuple)
(1, 2, 3)
>>> de.finalize()
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from swapvm.serialization import Deserializer, Serializer, TooLongError
from swapvm.serialization.encoding.int import decode_uint, encode_uint

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)

ARRAY_COUNT_BITS = 16
MAX_ARRAY_COUNT = (1 << ARRAY_COUNT_BITS) - 1


def encode_array(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    if len(values) > MAX_ARRAY_COUNT:
        raise TooLongError(f'array has more than {MAX_ARRAY_COUNT} elements')
    encode_uint(serializer, len(values), bits=ARRAY_COUNT_BITS)
    for value in values:
        encoder(serializer, value)


def decode_array(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    length = decode_uint(deserializer, bits=ARRAY_COUNT_BITS)
    return builder(decoder(deserializer) for _ in range(length))
