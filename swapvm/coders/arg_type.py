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
from typing import Generic, TypeAlias, TypeVar, final

from swapvm.exception import DecodeError
from swapvm.serialization import Deserializer, SerializationError, Serializer

T = TypeVar('T')


class ArgType(ABC, Generic[T]):
    """ This class is used to model the type of one instruction argument and how it will be (de)serialized.

    Instances are stateless and shared by every coder that uses them, an `ArgsCoder` is made of an ordered sequence
    of named `ArgType` instances.
    """

    # These are all the values that can be observed when parsing a JSON with the builtin json module
    Json: TypeAlias = dict | list | str | int | float | bool | None

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @property
    def fixed_size(self) -> int | None:
        """ Number of bytes of every encoded value, or None when the size depends on the value."""
        return None

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a ValidationError (or RangeError) if the value is not compatible with this type."""
        # XXX: subclasses must implement ArgType._check_value, not ArgType.check_value
        self._check_value(value)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Serialize a value, checking it first, so calling check_value before is not needed."""
        self._check_value(value)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, /) -> T:
        """ Deserialize a value, the produced value is checked before being returned.

        Errors from the underlying deserializer are not converted here, that is left for the outermost caller.
        """
        value = self._deserialize(deserializer)
        self._check_value(value)
        return value

    @final
    def to_bytes(self, value: T, /) -> bytes:
        """ Shortcut to quickly convert a value T to `bytes` and avoid using the serialization system.
        """
        serializer = Serializer.build_bytes_serializer()
        self.serialize(serializer, value)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: bytes, /) -> T:
        """ Shortcut to quickly parse a value T from `bytes`, all of `data` must be consumed.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        try:
            value = self.deserialize(deserializer)
            deserializer.finalize()
        except SerializationError as e:
            raise DecodeError(str(e)) from e
        return value

    @final
    def json_to_value(self, json_value: Json, /) -> T:
        """ Use this to convert a value that comes out from `json.load` into the value that this class expects.

        Will raise a ValidationError if the given `json_value` is not compatible.
        """
        value = self._json_to_value(json_value)
        self._check_value(value)
        return value

    @final
    def value_to_json(self, value: T, /) -> Json:
        """ Use this to convert a value to an object compatible with `json.dump`."""
        self._check_value(value)
        return self._value_to_json(value)

    @abstractmethod
    def _check_value(self, value: T, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the give value has been checked."""
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> T:
        raise NotImplementedError

    @abstractmethod
    def _json_to_value(self, json_value: Json, /) -> T:
        raise NotImplementedError

    @abstractmethod
    def _value_to_json(self, value: T, /) -> Json:
        raise NotImplementedError
