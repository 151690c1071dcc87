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
This module implements encoding of an EVM address: exactly 20 raw bytes, no length prefix.

>>> se = Serializer.build_bytes_serializer()
>>> encode_address(se, bytes.fromhex('11' * 20))
>>> bytes(se.finalize()).hex()
'1111111111111111111111111111111111111111'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('22' * 21))
>>> decode_address(de).hex()
'2222222222222222222222222222222222222222'
>>> de.remaining()
1
"""

from swapvm.serialization import Deserializer, OutOfDataError, Serializer

ADDRESS_LENGTH = 20


def encode_address(serializer: Serializer, address: bytes) -> None:
    assert isinstance(address, bytes) and len(address) == ADDRESS_LENGTH
    serializer.write_bytes(address)


def decode_address(deserializer: Deserializer) -> bytes:
    data = deserializer.read_bytes(ADDRESS_LENGTH)
    if len(data) != ADDRESS_LENGTH:
        raise OutOfDataError('not enough bytes to read')
    return bytes(data)
