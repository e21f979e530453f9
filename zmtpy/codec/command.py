"""Command frames such as READY."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Union

from zmtpy.errors import CommandError, DecodeError
from zmtpy.socket_type import SocketType

_SHORT_COMMAND = 0x04
_LONG_COMMAND = 0x06
_MAX_SHORT_LENGTH = 255

BytesLike = Union[bytes, bytearray, memoryview, str]


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class CommandName(Enum):
    """Known command names."""

    READY = "READY"

    def __str__(self) -> str:
        return self.value


class _Reader:
    """Consumes a command body, raising DecodeError when it runs short."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    @property
    def exhausted(self) -> bool:
        return self._pos >= len(self._data)

    def take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise DecodeError("Truncated command")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def u8(self) -> int:
        return self.take(1)[0]

    def u32(self) -> int:
        return int.from_bytes(self.take(4), "big")


@dataclass
class Command:
    """A command with a name and a set of named byte properties."""

    name: CommandName
    properties: dict[str, bytes] = field(default_factory=dict)

    @classmethod
    def ready(cls, socket_type: SocketType) -> Command:
        """Build the READY command announcing ``socket_type``."""
        return cls(CommandName.READY, {"Socket-Type": str(socket_type).encode("ascii")})

    def add_prop(self, name: str, value: BytesLike) -> Command:
        """Set one property; returns self for chaining."""
        self.properties[name] = _as_bytes(value)
        return self

    def add_properties(self, properties: Mapping[str, BytesLike]) -> Command:
        """Set several properties; returns self for chaining."""
        for name, value in properties.items():
            self.properties[name] = _as_bytes(value)
        return self

    @classmethod
    def parse(cls, data: bytes) -> Command:
        """Parse a command frame body (without flags and length)."""
        reader = _Reader(bytes(data))
        name_length = reader.u8()
        raw_name = reader.take(name_length)
        try:
            name = CommandName(raw_name.decode("ascii"))
        except (UnicodeDecodeError, ValueError):
            raise CommandError("Unknown command received") from None
        properties: dict[str, bytes] = {}
        while not reader.exhausted:
            prop_length = reader.u8()
            try:
                prop = reader.take(prop_length).decode("utf-8")
            except UnicodeDecodeError:
                raise DecodeError("Invalid property identifier") from None
            properties[prop] = reader.take(reader.u32())
        return cls(name, properties)

    def to_bytes(self) -> bytes:
        """Encode the command as a complete frame with flags and length."""
        name = str(self.name).encode("ascii")
        body = bytearray([len(name)])
        body += name
        for prop, value in self.properties.items():
            encoded = prop.encode("utf-8")
            body.append(len(encoded))
            body += encoded
            body += len(value).to_bytes(4, "big")
            body += value
        if len(body) > _MAX_SHORT_LENGTH:
            header = bytes([_LONG_COMMAND]) + len(body).to_bytes(8, "big")
        else:
            header = bytes([_SHORT_COMMAND, len(body)])
        return header + bytes(body)