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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .types import Buffer

if TYPE_CHECKING:
    from .bytes_serializer import BytesSerializer


class Serializer(ABC):
    """Write side of the codec, encoders only ever append to it."""

    def finalize(self) -> Buffer:
        """Get the bytes written so far."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        """Number of bytes written so far."""
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        # XXX: implementors should specialize this, writing byte by byte is slow
        for byte in bytes(memoryview(data)):
            self.write_byte(byte)

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()
