"""Security mechanisms named in the greeting."""

from __future__ import annotations

from enum import Enum

from zmtpy.errors import MechanismError


class Mechanism(Enum):
    """A security mechanism; NULL is the default."""

    NULL = "NULL"
    PLAIN = "PLAIN"
    CURVE = "CURVE"

    @classmethod
    def parse(cls, data: bytes) -> Mechanism:
        """Parse a mechanism name padded with zero bytes."""
        name = bytes(data).split(b"\x00", 1)[0]
        for member in cls:
            if member.value.encode("ascii") == name:
                return member
        raise MechanismError("Failed to parse ZmqMechanism")

    def __str__(self) -> str:
        return self.value