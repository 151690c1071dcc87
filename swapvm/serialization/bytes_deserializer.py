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

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import OutOfDataError, SerializationError
from .types import Buffer


class BytesDeserializer(Deserializer):
    """Deserializer over an in-memory buffer, tracked with a read offset into a memoryview."""

    def __init__(self, data: Buffer) -> None:
        self._data = memoryview(data)
        self._offset = 0
        self._finalized = False

    def _check_open(self) -> None:
        if self._finalized:
            raise SerializationError('deserializer was already finalized')

    @override
    def finalize(self) -> None:
        self._check_open()
        if self.remaining():
            raise SerializationError(f'trailing data: {self.remaining()} bytes')
        self._finalized = True

    @override
    def is_empty(self) -> bool:
        return self.remaining() == 0

    @override
    def remaining(self) -> int:
        return len(self._data) - self._offset

    @override
    def peek_byte(self) -> int:
        self._check_open()
        if self.is_empty():
            raise OutOfDataError('not enough bytes to read')
        return self._data[self._offset]

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        self._check_open()
        if n < 0:
            raise SerializationError('value cannot be negative')
        if exact and self.remaining() < n:
            raise OutOfDataError('not enough bytes to read')
        return self._data[self._offset:self._offset + n]

    @override
    def read_byte(self) -> int:
        value = self.peek_byte()
        self._offset += 1
        return value

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        chunk = self.peek_bytes(n, exact=exact)
        self._offset += len(chunk)
        return chunk

    @override
    def read_all(self) -> memoryview:
        return self.read_bytes(self.remaining())
